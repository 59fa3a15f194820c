"""Plotting helpers for benchmark artefacts."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

import matplotlib
import pandas as pd

# Force a non-interactive backend for headless environments (CI, servers, etc.).
matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt  # noqa: E402

from keyindex.evaluation.benchmark import TIMING_COLUMNS  # noqa: E402


def save_timing_curves(
    frame: pd.DataFrame,
    *,
    output_path: Path | str,
    columns: Sequence[str] = TIMING_COLUMNS,
    xlabel: str = "Sequence size",
    ylabel: str = "Median time (ms)",
    title: str = "Indexed lookups vs linear scans",
) -> Path:
    """
    Save a log-log line plot of each timing column against ``size``.

    Parameters
    ----------
    frame:
        Benchmark table with a ``size`` column and one column per timing series.
    output_path:
        Target image path. Directories are created automatically.
    columns:
        Timing series to draw; missing or all-zero columns are skipped.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    fig, ax = plt.subplots(figsize=(8, 5))
    has_data = False
    if not frame.empty and "size" in frame:
        ordered = frame.sort_values("size")
        for column in columns:
            if column not in ordered or not (ordered[column] > 0).any():
                continue
            has_data = True
            ax.plot(
                ordered["size"],
                ordered[column],
                marker="o",
                linestyle="-",
                label=column.removesuffix("_ms").replace("_", " "),
            )

    if not has_data:
        plt.close(fig)
        raise ValueError("Timing table is empty; nothing to plot.")

    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set_xlabel(xlabel)
    ax.set_ylabel(ylabel)
    ax.set_title(title)
    ax.grid(True, linestyle="--", linewidth=0.5, alpha=0.7)
    ax.legend()

    fig.tight_layout()
    fig.savefig(output_path, dpi=180)
    plt.close(fig)

    return output_path
