# ==================================================
# stable_hash_map/buckets.py
# ==================================================
from __future__ import annotations

from typing import Any, Callable, Iterable, List, Optional, Tuple

from .records import Entry

Pair = Tuple[Any, Entry]


class BucketIndex:
    """Chained lookup table of (key, entry) pairs.

    Derived entirely from the record store: it can be thrown away and
    rebuilt at any width without touching the entries it points at.
    """

    def __init__(self, hasher: Callable[[Any], int], width: int):
        self.hasher  = hasher
        self.buckets: List[List[Pair]] = [[] for _ in range(width)]

    @property
    def width(self) -> int:
        return len(self.buckets)

    # ------------------------------------------------------------------
    def slot_of(self, key) -> int:
        return self.hasher(key) % len(self.buckets)

    def locate(self, key) -> Tuple[int, int]:
        """(slot, position) of `key`; position == len(bucket) when absent."""
        slot   = self.slot_of(key)
        bucket = self.buckets[slot]
        for i, (k, _) in enumerate(bucket):
            if k == key:
                return slot, i
        return slot, len(bucket)

    def lookup(self, key) -> Optional[Entry]:
        slot, i = self.locate(key)
        bucket  = self.buckets[slot]
        return bucket[i][1] if i < len(bucket) else None

    # ------------------------------------------------------------------
    def add(self, slot: int, key, entry: Entry) -> None:
        self.buckets[slot].append((key, entry))

    def discard(self, slot: int, i: int) -> None:
        bucket = self.buckets[slot]
        bucket[i] = bucket[-1]      # swap-remove: order inside a bucket carries no meaning
        bucket.pop()

    def rebuild(self, width: int, entries: Iterable[Entry]) -> None:
        self.buckets = [[] for _ in range(width)]
        for entry in entries:
            key = entry.key
            self.buckets[self.slot_of(key)].append((key, entry))
