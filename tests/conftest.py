"""
Shared fixtures for the stable_hash_map tests.
"""
import pytest

from stable_hash_map import HashMap


class ConstantHasher:
    """Sends every key to the same bucket so chains get long."""

    def __init__(self):
        self.calls = 0

    def __call__(self, key):
        self.calls += 1
        return 7


@pytest.fixture
def colliding_hasher():
    return ConstantHasher()


@pytest.fixture
def scenario_map():
    """(1,"a"), (2,"b"), (1,"c") inserted in that order."""
    return HashMap([(1, "a"), (2, "b"), (1, "c")])


@pytest.fixture
def filled_map():
    """Factory: a map holding keys 0..n-1 mapped to their string form."""
    def _make(n, **kw):
        hm = HashMap(**kw)
        for i in range(n):
            hm.insert(i, str(i))
        return hm
    return _make
