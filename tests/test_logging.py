from loguru import logger

import keyindex  # noqa: F401
from keyindex.data.indexers import index_by


def _capture(fn):
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        fn()
    finally:
        logger.remove(sink_id)
    return messages


def test_index_by_is_silent_by_default():
    messages = _capture(lambda: index_by([1, 2, 2], key_fn=lambda n: n))

    assert messages == []


def test_index_by_logs_build_once_enabled():
    logger.enable("keyindex")
    try:
        messages = _capture(lambda: index_by([1, 2, 2], key_fn=lambda n: n))
    finally:
        logger.disable("keyindex")

    assert len(messages) == 1
    assert "Indexed 3 elements into 2 keys (1 collisions)" in messages[0]
