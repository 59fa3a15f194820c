"""
Benchmark orchestration entry point.

Runs the scan-vs-index timings described by the ``benchmark`` config section,
fits growth exponents, and writes the report and plot named by ``output``.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import pandas as pd
from loguru import logger

from keyindex.evaluation import (
    GrowthEstimate,
    run_benchmarks,
    summarize_growth,
    timings_to_frame,
)
from keyindex.reporting import save_timing_curves, write_benchmark_report
from keyindex.utils import get_by_dotted_path

DEFAULT_SIZES = (1_000, 10_000, 100_000)


@dataclass
class BenchmarkResult:
    config: Mapping[str, Any]
    timings: pd.DataFrame
    growth: dict[str, GrowthEstimate]
    runtime_seconds: float
    report_paths: dict[str, Path]
    plot_path: Path | None


def run_benchmark_pipeline(config: Mapping[str, Any]) -> BenchmarkResult:
    sizes = get_by_dotted_path(config, "benchmark.sizes", list(DEFAULT_SIZES))
    lookups = int(get_by_dotted_path(config, "benchmark.lookups", 100))
    repeats = int(get_by_dotted_path(config, "benchmark.repeats", 3))
    seed = int(get_by_dotted_path(config, "benchmark.seed", 42))
    output_dir = Path(get_by_dotted_path(config, "output.dir", "artifacts/benchmark"))
    plot_enabled = bool(get_by_dotted_path(config, "output.plot", True))

    start = time.perf_counter()
    timings = run_benchmarks(sizes, lookups=lookups, seed=seed, repeats=repeats)
    frame = timings_to_frame(timings)

    if frame["size"].nunique() >= 2:
        growth = summarize_growth(frame)
    else:
        logger.warning("Growth exponents need at least two sizes; got {}.", list(frame["size"]))
        growth = {}

    for column, estimate in growth.items():
        logger.info(
            "{}: exponent={:.3f} (r^2={:.3f})",
            column,
            estimate.exponent,
            estimate.r_squared,
        )

    report_paths = write_benchmark_report(frame, growth, output_dir)
    plot_path = None
    if plot_enabled:
        plot_path = save_timing_curves(frame, output_path=output_dir / "timings.png")

    runtime = time.perf_counter() - start
    logger.info("Benchmark finished in {:.1f}s; artefacts in {}", runtime, output_dir)
    return BenchmarkResult(
        config=config,
        timings=frame,
        growth=growth,
        runtime_seconds=runtime,
        report_paths=report_paths,
        plot_path=plot_path,
    )
