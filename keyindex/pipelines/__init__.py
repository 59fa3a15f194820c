"""End-to-end benchmark orchestration."""

from .benchmarking import BenchmarkResult, run_benchmark_pipeline  # noqa: F401
