"""
Tests for the bucket index.
"""
from stable_hash_map.buckets import BucketIndex
from stable_hash_map.records import RecordStore


def _indexed(keys, width, hasher=hash):
    store = RecordStore()
    index = BucketIndex(hasher, width)
    for k in keys:
        entry = store.append(k, None)
        index.add(index.slot_of(k), k, entry)
    return store, index


class TestBucketIndex:
    """Slot resolution, swap-removal and rebuilds."""

    def test_slot_is_hash_mod_width(self):
        """Negative hashes still land in range."""
        index = BucketIndex(hash, 10)
        assert index.slot_of(23) == 3
        assert index.slot_of(-1) == 9

    def test_locate_missing_returns_bucket_length(self):
        """A miss reports the bucket length as position."""
        _, index = _indexed([1, 11, 21], 10)
        slot, i = index.locate(31)
        assert slot == 1
        assert i == len(index.buckets[1]) == 3
        assert index.lookup(31) is None

    def test_discard_swaps_with_last(self):
        """Removing from a chain keeps the other pairs."""
        _, index = _indexed([1, 11, 21], 10)
        slot, i = index.locate(1)
        index.discard(slot, i)
        assert sorted(k for k, _ in index.buckets[1]) == [11, 21]
        assert index.lookup(1) is None

    def test_rebuild_keeps_entry_objects(self):
        """A rebuild at a new width points at the very same entries."""
        store, index = _indexed(range(8), 4)
        before = {k: index.lookup(k) for k in range(8)}
        index.rebuild(16, store)
        assert index.width == 16
        for k, entry in before.items():
            assert index.lookup(k) is entry
            assert index.slot_of(k) == k % 16
        assert sum(len(b) for b in index.buckets) == 8
