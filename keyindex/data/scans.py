"""Linear-scan lookups over plain sequences.

These are the operations an index replaces; they are kept as the comparison
baseline for benchmarks and as a reference for expected results.
"""

from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from .indexers import ABSENT


def scan_find(sequence: Iterable[Any], key_fn: Callable[[Any], Any], key: Any) -> Any:
    """Return the first element whose key equals ``key``, or ``ABSENT``."""
    for element in sequence:
        if key_fn(element) == key:
            return element
    return ABSENT


def scan_take(
    sequence: Iterable[Any], key_fn: Callable[[Any], Any], keys: Sequence[Any]
) -> list[Any]:
    """Elements whose key appears in ``keys``, checked by list membership."""
    wanted = list(keys)
    return [element for element in sequence if key_fn(element) in wanted]


def scan_reject(
    sequence: Iterable[Any], key_fn: Callable[[Any], Any], keys: Sequence[Any]
) -> list[Any]:
    """Elements whose key does not appear in ``keys``."""
    unwanted = list(keys)
    return [element for element in sequence if key_fn(element) not in unwanted]
