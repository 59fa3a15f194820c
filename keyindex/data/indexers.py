"""
Single-valued lookup indexes built from ordered sequences.

An index is built once, in a single pass, and then answers point and batch
lookups in expected constant time per key. It replaces the pattern of scanning
the same collection over and over to find elements by an identifier.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from operator import attrgetter, itemgetter
from types import MappingProxyType
from typing import Any, Callable, Hashable, Iterable, Iterator, TypeVar

from loguru import logger

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")
E = TypeVar("E")


class Absent:
    """Marker returned by point lookups when a key is not in the index."""

    _instance: "Absent | None" = None

    def __new__(cls) -> "Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


@dataclass(frozen=True)
class IndexStats:
    """Counts describing the sequence an index was built from."""

    elements: int
    keys: int

    @property
    def collisions(self) -> int:
        return self.elements - self.keys


class KeyIndex(Mapping):
    """
    Read-only mapping from key to value.

    Built entries live in a private dict that is never mutated after
    construction. ``drop`` shares that dict with the derived index and records
    the removed keys instead of copying the survivors, so an exclusion costs
    time in the number of removed keys. ``take`` and ``drop`` always return new
    objects; the receiver is never modified.
    """

    __slots__ = ("_entries", "_excluded", "_stats")

    def __init__(self, entries: Mapping[Any, Any] | None = None) -> None:
        data = dict(entries or {})
        self._entries: dict[Any, Any] = data
        self._excluded: frozenset = frozenset()
        self._stats = IndexStats(elements=len(data), keys=len(data))

    @classmethod
    def _adopt(
        cls,
        entries: dict,
        stats: IndexStats | None = None,
        excluded: frozenset = frozenset(),
    ) -> "KeyIndex":
        # Takes ownership of ``entries`` without copying.
        index = cls.__new__(cls)
        index._entries = entries
        index._excluded = excluded
        if stats is None:
            size = len(entries) - len(excluded)
            stats = IndexStats(elements=size, keys=size)
        index._stats = stats
        return index

    @property
    def entries(self) -> Mapping[Any, Any]:
        """Read-only view of the live entries."""
        if not self._excluded:
            return MappingProxyType(self._entries)
        return MappingProxyType(self.to_dict())

    @property
    def stats(self) -> IndexStats:
        return self._stats

    def __getitem__(self, key: Any) -> Any:
        if key in self._excluded:
            raise KeyError(key)
        return self._entries[key]

    def __iter__(self) -> Iterator[Any]:
        if not self._excluded:
            return iter(self._entries)
        excluded = self._excluded
        return (key for key in self._entries if key not in excluded)

    def __len__(self) -> int:
        return len(self._entries) - len(self._excluded)

    def __contains__(self, key: object) -> bool:
        return key in self._entries and key not in self._excluded

    def __repr__(self) -> str:
        return f"KeyIndex({self.to_dict()!r})"

    def lookup(self, key: Any, default: Any = ABSENT) -> Any:
        """Return the value stored under ``key`` or ``default`` (``ABSENT``)."""
        if key in self._excluded:
            return default
        return self._entries.get(key, default)

    def take(self, keys: Iterable[Any]) -> "KeyIndex":
        """Restrict the index to the requested keys that are present."""
        entries = self._entries
        return KeyIndex._adopt({key: entries[key] for key in keys if key in self})

    def key_set(self) -> frozenset:
        return frozenset(self)

    def value_list(self) -> list[Any]:
        """Values in first-seen key order."""
        if not self._excluded:
            return list(self._entries.values())
        entries = self._entries
        return [entries[key] for key in self]

    def drop(self, keys: Iterable[Any]) -> "KeyIndex":
        """
        Return a new index without ``keys``; unknown keys are ignored.

        The result shares this index's entries and only stores the removed
        keys, so the cost is linear in ``keys`` (plus any keys an earlier
        ``drop`` already excluded), not in the index size.
        """
        removed = frozenset(key for key in keys if key in self)
        excluded = self._excluded | removed if self._excluded else removed
        return KeyIndex._adopt(self._entries, excluded=excluded)

    def to_dict(self) -> dict[Any, Any]:
        if not self._excluded:
            return dict(self._entries)
        excluded = self._excluded
        return {key: value for key, value in self._entries.items() if key not in excluded}


def index_by(
    sequence: Iterable[E],
    key_fn: Callable[[E], K],
    value_fn: Callable[[E], V] | None = None,
) -> KeyIndex:
    """
    Build a ``KeyIndex`` from ``sequence`` in one pass.

    Parameters
    ----------
    sequence:
        Elements to index. Consumed exactly once; may be empty.
    key_fn:
        Extracts the lookup key from each element.
    value_fn:
        Extracts the stored value. Defaults to storing the element itself.

    When several elements share a key, the value from the last one wins.
    Exceptions raised by ``key_fn`` or ``value_fn`` propagate to the caller and
    no index is returned.
    """
    if not callable(key_fn):
        raise TypeError(f"key_fn must be callable, got {type(key_fn).__name__}")
    if value_fn is not None and not callable(value_fn):
        raise TypeError(f"value_fn must be callable, got {type(value_fn).__name__}")

    entries: dict[K, Any] = {}
    elements = 0
    if value_fn is None:
        for element in sequence:
            entries[key_fn(element)] = element
            elements += 1
    else:
        for element in sequence:
            key = key_fn(element)
            entries[key] = value_fn(element)
            elements += 1

    stats = IndexStats(elements=elements, keys=len(entries))
    logger.debug(
        "Indexed {} elements into {} keys ({} collisions)",
        stats.elements,
        stats.keys,
        stats.collisions,
    )
    return KeyIndex._adopt(entries, stats)


def index_by_attr(
    sequence: Iterable[Any], attribute: str, value_attr: str | None = None
) -> KeyIndex:
    """Index objects by an attribute, e.g. ``index_by_attr(users, "id")``."""
    value_fn = attrgetter(value_attr) if value_attr is not None else None
    return index_by(sequence, attrgetter(attribute), value_fn)


def index_by_item(
    sequence: Iterable[Any], key: Hashable, value_key: Hashable | None = None
) -> KeyIndex:
    """Index mappings (or sequences) by an item, e.g. ``index_by_item(rows, "id")``."""
    value_fn = itemgetter(value_key) if value_key is not None else None
    return index_by(sequence, itemgetter(key), value_fn)
