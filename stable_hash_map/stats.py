# ==================================================
# stable_hash_map/stats.py
# ==================================================
from __future__ import annotations

from typing import NamedTuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from .hash_map import HashMap


class BucketStats(NamedTuple):
    bucket_count:  int
    size:          int
    load_factor:   float
    empty_buckets: int
    longest_chain: int
    mean_chain:    float     # over non-empty buckets only


def chain_lengths(hash_map: "HashMap") -> np.ndarray:
    n = hash_map.bucket_count()
    return np.fromiter((hash_map.bucket_size(i) for i in range(n)),
                       dtype=np.int64, count=n)


def bucket_stats(hash_map: "HashMap") -> BucketStats:
    lengths  = chain_lengths(hash_map)
    occupied = lengths[lengths > 0]
    return BucketStats(
        bucket_count  = int(lengths.size),
        size          = int(lengths.sum()),
        load_factor   = hash_map.load_factor(),
        empty_buckets = int(lengths.size - occupied.size),
        longest_chain = int(lengths.max()),
        mean_chain    = float(occupied.mean()) if occupied.size else 0.0,
    )
