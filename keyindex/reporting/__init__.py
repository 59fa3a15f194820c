"""Plot and report writers for benchmark output."""

from .plots import save_timing_curves  # noqa: F401
from .reports import write_benchmark_report  # noqa: F401
