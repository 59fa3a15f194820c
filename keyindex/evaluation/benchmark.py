"""Timing harness comparing indexed lookups against repeated linear scans."""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Callable, Iterable, Sequence

import numpy as np
import pandas as pd
from loguru import logger

from keyindex.data.indexers import index_by_item
from keyindex.data.scans import scan_find, scan_take


@dataclass(frozen=True)
class LookupTiming:
    size: int
    build_ms: float
    index_lookup_ms: float
    scan_lookup_ms: float
    index_batch_ms: float
    scan_batch_ms: float


TIMING_COLUMNS = (
    "build_ms",
    "index_lookup_ms",
    "scan_lookup_ms",
    "index_batch_ms",
    "scan_batch_ms",
)


def synthetic_records(n: int, seed: int = 42) -> list[dict[str, Any]]:
    """Records with unique integer ids ``0..n-1`` in shuffled order."""
    rng = np.random.default_rng(seed)
    ids = rng.permutation(n)
    scores = rng.random(n)
    return [
        {"id": int(record_id), "name": f"record-{int(record_id)}", "score": float(score)}
        for record_id, score in zip(ids, scores)
    ]


def _record_id(record: dict[str, Any]) -> int:
    return record["id"]


def _median_ms(fn: Callable[[], Any], repeats: int) -> float:
    samples = []
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        samples.append((time.perf_counter() - start) * 1000.0)
    return float(np.median(samples))


def run_lookup_benchmark(
    size: int,
    *,
    lookups: int = 100,
    seed: int = 42,
    repeats: int = 3,
) -> LookupTiming:
    """
    Time one index build plus ``lookups`` point and batch queries at ``size``.

    Query keys are drawn uniformly from ``0..2*size`` so roughly half miss,
    which exercises the absent path on both the index and the scan.
    """
    records = synthetic_records(size, seed=seed)
    rng = np.random.default_rng(seed + 1)
    query_keys = [int(k) for k in rng.integers(0, 2 * size, size=lookups)]
    key_fn = _record_id

    build_ms = _median_ms(lambda: index_by_item(records, "id"), repeats)
    index = index_by_item(records, "id")

    index_lookup_ms = _median_ms(lambda: [index.lookup(k) for k in query_keys], repeats)
    scan_lookup_ms = _median_ms(
        lambda: [scan_find(records, key_fn, k) for k in query_keys], repeats
    )
    index_batch_ms = _median_ms(lambda: index.take(query_keys), repeats)
    scan_batch_ms = _median_ms(lambda: scan_take(records, key_fn, query_keys), repeats)

    timing = LookupTiming(
        size=size,
        build_ms=build_ms,
        index_lookup_ms=index_lookup_ms,
        scan_lookup_ms=scan_lookup_ms,
        index_batch_ms=index_batch_ms,
        scan_batch_ms=scan_batch_ms,
    )
    logger.debug("Benchmark size={} | {}", size, timing)
    return timing


def run_benchmarks(
    sizes: Iterable[int],
    *,
    lookups: int = 100,
    seed: int = 42,
    repeats: int = 3,
) -> list[LookupTiming]:
    sizes = [int(s) for s in sizes]
    if not sizes:
        raise ValueError("At least one benchmark size is required.")
    if any(s <= 0 for s in sizes):
        raise ValueError(f"Benchmark sizes must be positive, got {sizes}")
    if lookups <= 0:
        raise ValueError("lookups must be greater than zero.")
    if repeats <= 0:
        raise ValueError("repeats must be greater than zero.")

    results = []
    for size in sizes:
        logger.info("Running lookup benchmark for size={}", size)
        results.append(
            run_lookup_benchmark(size, lookups=lookups, seed=seed, repeats=repeats)
        )
    return results


def timings_to_frame(timings: Sequence[LookupTiming]) -> pd.DataFrame:
    frame = pd.DataFrame([asdict(t) for t in timings], columns=["size", *TIMING_COLUMNS])
    return frame.sort_values("size").reset_index(drop=True)
