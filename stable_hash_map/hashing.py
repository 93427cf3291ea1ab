# ==================================================
# stable_hash_map/hashing.py
# ==================================================
"""
Process-stable hash functions for ``HashMap(hasher=...)``.

The builtin ``hash`` is salted per interpreter for ``str``/``bytes``; these
hashers give the same bucket layout on every run, which keeps chain
statistics reproducible.
"""
from __future__ import annotations

import hashlib, struct

import xxhash                                    # pip install xxhash


def key_bytes(key) -> bytes:
    """Canonical byte encoding of a hashable key."""
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    if isinstance(key, int):
        return key.to_bytes(key.bit_length() // 8 + 1, "little", signed=True)
    raise TypeError(f"cannot hash key of type {type(key).__name__}")


class XXHasher:
    """64-bit xxHash of the key bytes."""

    def __init__(self, seed: int = 0):
        self.seed = seed

    def __call__(self, key) -> int:
        return xxhash.xxh64(key_bytes(key), seed=self.seed).intdigest()

    def __repr__(self):
        return f"XXHasher(seed={self.seed})"


class Blake2bHasher:
    """BLAKE2b digest of the key bytes as an unsigned int, optionally keyed."""

    def __init__(self, digest_size: int = 8, key: bytes = b""):
        self.digest_size = digest_size
        self.key         = key

    def __call__(self, key) -> int:
        digest = hashlib.blake2b(key_bytes(key), digest_size=self.digest_size,
                                 key=self.key).digest()
        if self.digest_size == 8:
            return struct.unpack("<Q", digest)[0]
        return int.from_bytes(digest, "little")

    def __repr__(self):
        keyed = ", keyed" if self.key else ""
        return f"Blake2bHasher(digest_size={self.digest_size}{keyed})"


xxh64_hash   = XXHasher()
blake2b_hash = Blake2bHasher()
