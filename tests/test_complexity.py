import pandas as pd
import pytest

from keyindex.evaluation.complexity import estimate_growth_exponent, summarize_growth


def test_growth_exponent_of_linear_series():
    sizes = [10, 100, 1000, 10000]
    estimate = estimate_growth_exponent(sizes, [2.0 * s for s in sizes])

    assert estimate.exponent == pytest.approx(1.0)
    assert estimate.r_squared == pytest.approx(1.0)


def test_growth_exponent_of_constant_series():
    estimate = estimate_growth_exponent([10, 100, 1000], [0.5, 0.5, 0.5])

    assert estimate.exponent == pytest.approx(0.0, abs=1e-9)


def test_growth_exponent_requires_distinct_positive_points():
    with pytest.raises(ValueError):
        estimate_growth_exponent([10, 10], [1.0, 2.0])
    with pytest.raises(ValueError):
        estimate_growth_exponent([10, 100], [0.0, 1.0])
    with pytest.raises(ValueError):
        estimate_growth_exponent([10, 100], [1.0])


def test_summarize_growth_skips_non_positive_columns():
    frame = pd.DataFrame(
        {
            "size": [10, 100, 1000],
            "scan_lookup_ms": [1.0, 10.0, 100.0],
            "index_lookup_ms": [0.0, 0.1, 0.1],
        }
    )

    summary = summarize_growth(frame)

    assert set(summary) == {"scan_lookup_ms"}
    assert summary["scan_lookup_ms"].exponent == pytest.approx(1.0)
