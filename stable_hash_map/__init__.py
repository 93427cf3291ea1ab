from .hash_map import HashMap, KeyNotFound
from .records  import Entry
from .hashing  import XXHasher, Blake2bHasher, xxh64_hash, blake2b_hash
from .stats    import BucketStats, bucket_stats, chain_lengths

__all__ = ["HashMap", "KeyNotFound", "Entry",
           "XXHasher", "Blake2bHasher", "xxh64_hash", "blake2b_hash",
           "BucketStats", "bucket_stats", "chain_lengths"]
