# ==================================================
# stable_hash_map/records.py
# ==================================================
from __future__ import annotations

from typing import Any, Iterator, Optional


class Entry:
    """One key/value record. The object itself is the stable handle."""
    __slots__ = ("_key", "value", "_prev", "_next")

    def __init__(self, key: Any, value: Any):
        self._key  = key
        self.value = value
        self._prev: Optional[Entry] = None
        self._next: Optional[Entry] = None

    @property
    def key(self):
        return self._key

    def next_entry(self) -> Optional[Entry]:
        return self._next

    def __iter__(self):
        yield self._key
        yield self.value

    def __repr__(self):
        return f"Entry({self._key!r}, {self.value!r})"


class _End(Entry):
    __slots__ = ()

    def __init__(self):
        super().__init__(None, None)
        self._prev = self._next = self

    def __repr__(self):
        return "<end>"


class RecordStore:
    """Insertion-ordered, doubly-linked owner of every Entry.

    A single circular sentinel doubles as the end marker handed out to
    callers. Entries are linked and unlinked, never copied, so a handle
    stays valid until its own entry is removed.
    """

    def __init__(self):
        self.end = _End()
        self._len = 0

    def __len__(self):
        return self._len

    # ------------------------------------------------------------------
    @property
    def first(self) -> Entry:
        return self.end._next

    @property
    def last(self) -> Entry:
        return self.end._prev

    # ------------------------------------------------------------------
    def append(self, key, value) -> Entry:
        entry = Entry(key, value)
        tail  = self.end._prev
        entry._prev, entry._next = tail, self.end
        tail._next = entry
        self.end._prev = entry
        self._len += 1
        return entry

    def unlink(self, entry: Entry) -> None:
        entry._prev._next = entry._next
        entry._next._prev = entry._prev
        entry._prev = None          # _next stays so a walk parked on `entry` can resume
        self._len -= 1

    def clear(self) -> None:
        # fresh sentinel: stale handles can no longer walk back into the store
        self.end  = _End()
        self._len = 0

    # ------------------------------------------------------------------
    def __iter__(self) -> Iterator[Entry]:
        end  = self.end
        node = end._next
        while node is not end:
            yield node
            node = node._next
            while node._prev is None:       # skip entries unlinked while we were away
                node = node._next
