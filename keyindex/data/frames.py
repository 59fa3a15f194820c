"""Build lookup indexes from the rows of a pandas DataFrame."""

from __future__ import annotations

from typing import Hashable

import pandas as pd
from loguru import logger

from .indexers import KeyIndex, index_by


def _require_column(frame: pd.DataFrame, column: Hashable) -> None:
    if column not in frame.columns:
        raise KeyError(f"Column '{column}' missing from frame; available: {list(frame.columns)}")
    if int((frame.columns == column).sum()) > 1:
        raise ValueError(f"Column '{column}' appears more than once in frame; labels must be unique.")


def index_frame(
    frame: pd.DataFrame,
    key_column: Hashable,
    value_column: Hashable | None = None,
) -> KeyIndex:
    """
    Index the rows of ``frame`` by ``key_column``.

    Parameters
    ----------
    frame:
        Source rows, indexed in frame order.
    key_column:
        Column holding the lookup key. Rows with a null key are skipped.
    value_column:
        Column holding the stored value. When omitted each row is stored as a
        ``dict`` of column name to value.

    Duplicate keys follow the same last-write-wins rule as ``index_by``.
    """
    _require_column(frame, key_column)
    if value_column is not None:
        _require_column(frame, value_column)

    null_keys = frame[key_column].isna()
    skipped = int(null_keys.sum())
    if skipped > 0:
        logger.info("Skipped {} rows with a null '{}' key.", skipped, key_column)
        frame = frame.loc[~null_keys]

    keys = frame[key_column].tolist()
    if value_column is not None:
        values = frame[value_column].tolist()
    else:
        values = frame.to_dict(orient="records")

    return index_by(zip(keys, values), key_fn=lambda pair: pair[0], value_fn=lambda pair: pair[1])
