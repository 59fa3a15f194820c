"""Empirical growth estimates for timing series."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np
import pandas as pd
from loguru import logger
from scipy import stats

from .benchmark import TIMING_COLUMNS


@dataclass(frozen=True)
class GrowthEstimate:
    exponent: float
    intercept: float
    r_squared: float


def estimate_growth_exponent(
    sizes: Sequence[float], timings: Sequence[float]
) -> GrowthEstimate:
    """
    Fit ``timing ~ a * size ** b`` on log-log axes and return ``b``.

    An exponent near 0 indicates constant cost per call, near 1 linear cost.
    """
    size_arr = np.asarray(sizes, dtype=float)
    timing_arr = np.asarray(timings, dtype=float)
    if size_arr.shape != timing_arr.shape:
        raise ValueError("sizes and timings must have the same length.")
    if len(np.unique(size_arr)) < 2:
        raise ValueError("At least two distinct sizes are required to estimate growth.")
    if np.any(size_arr <= 0) or np.any(timing_arr <= 0):
        raise ValueError("sizes and timings must be strictly positive.")

    result = stats.linregress(np.log(size_arr), np.log(timing_arr))
    return GrowthEstimate(
        exponent=float(result.slope),
        intercept=float(result.intercept),
        r_squared=float(result.rvalue**2),
    )


def summarize_growth(
    frame: pd.DataFrame, columns: Iterable[str] = TIMING_COLUMNS
) -> dict[str, GrowthEstimate]:
    """Growth estimate per timing column; columns with zero timings are skipped."""
    summary: dict[str, GrowthEstimate] = {}
    for column in columns:
        if column not in frame:
            continue
        series = frame[column]
        if (series <= 0).any():
            logger.warning("Skipping growth fit for '{}': non-positive timings.", column)
            continue
        try:
            summary[column] = estimate_growth_exponent(frame["size"], series)
        except ValueError as exc:
            logger.warning("Skipping growth fit for '{}': {}", column, exc)
    return summary
