import pandas as pd
import pytest

from keyindex.data.frames import index_frame
from keyindex.data.indexers import index_by


def _frame():
    return pd.DataFrame(
        [
            {"id": 1, "name": "a"},
            {"id": 2, "name": "b"},
            {"id": 1, "name": "c"},
        ]
    )


def test_index_frame_matches_index_by_over_records():
    frame = _frame()

    expected = index_by(frame.to_dict(orient="records"), key_fn=lambda r: r["id"])
    index = index_frame(frame, "id")

    assert index == expected
    assert index[1] == {"id": 1, "name": "c"}


def test_index_frame_with_value_column():
    index = index_frame(_frame(), "id", value_column="name")

    assert index.to_dict() == {1: "c", 2: "b"}


def test_index_frame_skips_null_keys():
    frame = pd.DataFrame({"id": ["x", None, "y"], "name": ["a", "b", "c"]})

    index = index_frame(frame, "id", "name")

    assert index.to_dict() == {"x": "a", "y": "c"}


def test_index_frame_missing_column():
    with pytest.raises(KeyError):
        index_frame(_frame(), "missing")
    with pytest.raises(KeyError):
        index_frame(_frame(), "id", value_column="missing")


def test_index_frame_empty():
    frame = pd.DataFrame({"id": [], "name": []})

    assert len(index_frame(frame, "id")) == 0


def test_index_frame_rejects_duplicated_column_labels():
    frame = pd.DataFrame([[1, "a", "b"], [2, "c", "d"]], columns=["id", "name", "name"])

    with pytest.raises(ValueError, match="more than once"):
        index_frame(frame, "id", value_column="name")

    keyed_twice = pd.DataFrame([[1, 2, "a"]], columns=["id", "id", "name"])
    with pytest.raises(ValueError, match="more than once"):
        index_frame(keyed_twice, "id")
