"""Index construction and the linear-scan baselines it replaces."""

from .frames import index_frame  # noqa: F401
from .indexers import (  # noqa: F401
    ABSENT,
    Absent,
    IndexStats,
    KeyIndex,
    index_by,
    index_by_attr,
    index_by_item,
)
from .scans import scan_find, scan_reject, scan_take  # noqa: F401
