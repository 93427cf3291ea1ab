# ==================================================
# stable_hash_map/hash_map.py
# ==================================================
from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple

from .buckets import BucketIndex
from .const   import BASE_BUCKETS, FULLNESS_COEF, RESIZE_COEF
from .records import Entry, RecordStore

logger = logging.getLogger(__name__)


class KeyNotFound(KeyError):
    """Raised by ``HashMap.at`` for a key that is not stored."""


class HashMap:
    """Separate-chaining hash map with stable entry handles.

    Entries live in an insertion-ordered linked store; the bucket index only
    points at them. Resizing rebuilds the index and never moves an entry, so
    a handle returned by ``insert``/``find``/``lookup_or_default`` stays
    valid until that key is erased or the map is cleared.

    ``insert`` never overwrites: inserting a key that is already present
    returns the existing entry and ``False``.
    """

    def __init__(self,
                 items: Optional[Iterable[Tuple[Any, Any]]] = None,
                 hasher: Optional[Callable[[Any], int]] = None,
                 base_buckets: int = BASE_BUCKETS,
                 default_factory: Optional[Callable[[], Any]] = None):
        if base_buckets < 1:
            raise ValueError("base_buckets must be at least 1")
        self._hasher          = hasher if hasher is not None else hash
        self._base_buckets    = base_buckets
        self.default_factory  = default_factory
        self._records         = RecordStore()
        self._index           = BucketIndex(self._hasher, base_buckets)

        if items is not None:
            if isinstance(items, Mapping):
                items = items.items()
            for key, value in items:
                self.insert(key, value)

    # ------------------------------------------------------------------
    def size(self) -> int:
        return len(self._records)

    __len__ = size

    def empty(self) -> bool:
        return len(self._records) == 0

    def hash_function(self) -> Callable[[Any], int]:
        return self._hasher

    def bucket_count(self) -> int:
        return self._index.width

    def bucket_size(self, slot: int) -> int:
        return len(self._index.buckets[slot])

    def load_factor(self) -> float:
        return len(self._records) / self._index.width

    # ------------------------------------------------------------------
    def begin(self) -> Entry:
        return self._records.first

    def end(self) -> Entry:
        return self._records.end

    def find(self, key) -> Entry:
        """Entry handle for `key`, or ``end()`` when absent."""
        entry = self._index.lookup(key)
        return self._records.end if entry is None else entry

    def __contains__(self, key) -> bool:
        return self._index.lookup(key) is not None

    def get(self, key, default=None):
        entry = self._index.lookup(key)
        return default if entry is None else entry.value

    def at(self, key):
        entry = self._index.lookup(key)
        if entry is None:
            raise KeyNotFound(key)
        return entry.value

    # ------------------------------------------------------------------
    def insert(self, key, value) -> Tuple[Entry, bool]:
        slot, i = self._index.locate(key)
        bucket  = self._index.buckets[slot]
        if i < len(bucket):
            return bucket[i][1], False

        entry = self._records.append(key, value)
        self._index.add(slot, key, entry)
        if len(self._records) * FULLNESS_COEF > self._index.width:
            self._expand()
            return self.find(key), True
        return entry, True

    def erase(self, key) -> int:
        slot, i = self._index.locate(key)
        bucket  = self._index.buckets[slot]
        if i == len(bucket):
            return 0

        self._records.unlink(bucket[i][1])
        self._index.discard(slot, i)
        width = self._index.width
        if width > self._base_buckets and \
                len(self._records) * FULLNESS_COEF <= width // RESIZE_COEF:
            self._shrink()
        return 1

    def lookup_or_default(self, key) -> Entry:
        """Entry for `key`, inserting ``default_factory()`` first if absent."""
        entry = self._index.lookup(key)
        if entry is None:
            value = self.default_factory() if self.default_factory is not None else None
            entry = self.insert(key, value)[0]
        return entry

    def __getitem__(self, key):
        return self.lookup_or_default(key).value

    def __setitem__(self, key, value):
        self.lookup_or_default(key).value = value

    def clear(self) -> None:
        logger.debug("clear: dropping %d entries, width %d -> %d",
                     len(self._records), self._index.width, self._base_buckets)
        self._records.clear()
        self._index.rebuild(self._base_buckets, ())

    # ------------------------------------------------------------------
    def assign(self, other: HashMap) -> HashMap:
        """Replace the contents with a logical copy of `other`."""
        if other is self:
            return self
        self.clear()
        for key, value in other.items():
            self.insert(key, value)
        return self

    def copy(self) -> HashMap:
        clone = HashMap(hasher=self._hasher, base_buckets=self._base_buckets,
                        default_factory=self.default_factory)
        return clone.assign(self)

    __copy__ = copy

    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Entry]:
        return iter(self._records)

    entries = __iter__

    def items(self) -> Iterator[Tuple[Any, Any]]:
        for entry in self._records:
            yield entry.key, entry.value

    def keys(self) -> Iterator[Any]:
        for entry in self._records:
            yield entry.key

    def values(self) -> Iterator[Any]:
        for entry in self._records:
            yield entry.value

    def __repr__(self):
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return f"HashMap({{{body}}})"

    # ── resizing ──────────────────────────────────────────────────────
    def _expand(self) -> None:
        self._rehash(self._index.width * RESIZE_COEF)

    def _shrink(self) -> None:
        self._rehash(max(self._base_buckets, self._index.width // RESIZE_COEF))

    def _rehash(self, width: int) -> None:
        logger.debug("rehash: %d entries, width %d -> %d",
                     len(self._records), self._index.width, width)
        self._index.rebuild(width, self._records)
