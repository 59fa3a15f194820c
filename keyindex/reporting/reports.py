"""Serialise benchmark tables and growth fits to disk."""

from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Mapping

import pandas as pd

from keyindex.evaluation.complexity import GrowthEstimate


def write_benchmark_report(
    frame: pd.DataFrame,
    growth: Mapping[str, GrowthEstimate],
    output_dir: Path | str,
) -> dict[str, Path]:
    """
    Write ``timings.csv``, ``report.json`` and ``summary.md`` under ``output_dir``.

    Returns the written paths keyed by artefact name.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_path = output_dir / "timings.csv"
    frame.to_csv(csv_path, index=False)

    json_path = output_dir / "report.json"
    payload = {
        "timings": frame.to_dict(orient="records"),
        "growth": {column: asdict(estimate) for column, estimate in growth.items()},
    }
    json_path.write_text(json.dumps(payload, indent=2), encoding="utf-8")

    summary_path = output_dir / "summary.md"
    lines: list[str] = []
    lines.append("# Lookup Benchmark Summary\n")
    lines.append("Series | Growth Exponent | R^2")
    lines.append("--- | --- | ---")
    for column, estimate in growth.items():
        lines.append(f"{column} | {estimate.exponent:.3f} | {estimate.r_squared:.3f}")
    summary_path.write_text("\n".join(lines), encoding="utf-8")

    return {"csv": csv_path, "json": json_path, "summary": summary_path}
