import pytest

from keyindex.evaluation.benchmark import (
    TIMING_COLUMNS,
    run_benchmarks,
    run_lookup_benchmark,
    synthetic_records,
    timings_to_frame,
)


def test_synthetic_records_have_unique_ids():
    records = synthetic_records(50, seed=1)

    assert len(records) == 50
    assert sorted(r["id"] for r in records) == list(range(50))
    assert synthetic_records(50, seed=1) == records


def test_run_lookup_benchmark_small():
    timing = run_lookup_benchmark(200, lookups=10, repeats=1)

    assert timing.size == 200
    for column in TIMING_COLUMNS:
        assert getattr(timing, column) >= 0


def test_run_benchmarks_validates_arguments():
    with pytest.raises(ValueError):
        run_benchmarks([])
    with pytest.raises(ValueError):
        run_benchmarks([0, 10])
    with pytest.raises(ValueError):
        run_benchmarks([10], lookups=0)
    with pytest.raises(ValueError):
        run_benchmarks([10], repeats=0)


def test_timings_to_frame_sorted_by_size():
    timings = run_benchmarks([300, 100], lookups=5, repeats=1)

    frame = timings_to_frame(timings)

    assert frame["size"].tolist() == [100, 300]
    assert list(frame.columns) == ["size", *TIMING_COLUMNS]
