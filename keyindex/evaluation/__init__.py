"""Benchmark harness and empirical growth estimates for lookup strategies."""

from .benchmark import (  # noqa: F401
    TIMING_COLUMNS,
    LookupTiming,
    run_benchmarks,
    run_lookup_benchmark,
    synthetic_records,
    timings_to_frame,
)
from .complexity import GrowthEstimate, estimate_growth_exponent, summarize_growth  # noqa: F401
