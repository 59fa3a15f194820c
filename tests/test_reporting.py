import json

import pandas as pd
import pytest

from keyindex.evaluation.complexity import summarize_growth
from keyindex.reporting import save_timing_curves, write_benchmark_report


def _timings() -> pd.DataFrame:
    return pd.DataFrame(
        {
            "size": [100, 1000, 10000],
            "build_ms": [0.1, 1.0, 10.0],
            "index_lookup_ms": [0.01, 0.011, 0.012],
            "scan_lookup_ms": [1.0, 10.0, 100.0],
            "index_batch_ms": [0.02, 0.021, 0.022],
            "scan_batch_ms": [2.0, 20.0, 200.0],
        }
    )


def test_save_timing_curves_writes_png(tmp_path):
    path = save_timing_curves(_timings(), output_path=tmp_path / "plots" / "timings.png")

    assert path.exists()
    assert path.stat().st_size > 0


def test_save_timing_curves_rejects_empty_frame(tmp_path):
    with pytest.raises(ValueError):
        save_timing_curves(pd.DataFrame(), output_path=tmp_path / "empty.png")


def test_write_benchmark_report(tmp_path):
    frame = _timings()
    growth = summarize_growth(frame)

    paths = write_benchmark_report(frame, growth, tmp_path / "report")

    assert set(paths) == {"csv", "json", "summary"}
    payload = json.loads(paths["json"].read_text(encoding="utf-8"))
    assert len(payload["timings"]) == 3
    assert payload["growth"]["scan_lookup_ms"]["exponent"] == pytest.approx(1.0)
    assert pd.read_csv(paths["csv"])["size"].tolist() == [100, 1000, 10000]
    summary = paths["summary"].read_text(encoding="utf-8")
    assert "scan_lookup_ms | 1.000" in summary
