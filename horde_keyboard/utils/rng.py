"""
Deterministic PRNG shared by the swarm and the hive.

Both cores take an XorShift32 instance instead of calling the random
module, so a fixed seed reproduces a whole session.
"""

import random
from typing import List, Sequence, TypeVar

T = TypeVar('T')


class XorShift32:
    """Deterministic PRNG using xorshift32 algorithm."""

    def __init__(self, seed: int):
        self._state = (seed & 0xFFFFFFFF) or 1

    def next_uint32(self) -> int:
        x = self._state
        x ^= (x << 13) & 0xFFFFFFFF
        x ^= (x >> 17) & 0xFFFFFFFF
        x ^= (x << 5) & 0xFFFFFFFF
        self._state = x
        return x

    def next_float(self) -> float:
        """Random float in [0, 1)."""
        return self.next_uint32() * 2.3283064365386963e-10

    def next_float_range(self, lo: float, hi: float) -> float:
        """Random float in [lo, hi)."""
        return lo + self.next_float() * (hi - lo)

    def next_int(self, n: int) -> int:
        """Random int in [0, n). n must be positive."""
        return int(self.next_float() * n)

    def chance(self, probability: float) -> bool:
        """True with the given probability."""
        return self.next_float() < probability

    def choice(self, items: Sequence[T]) -> T:
        """Pick one item uniformly."""
        return items[self.next_int(len(items))]

    def sample(self, items: Sequence[T], k: int) -> List[T]:
        """
        Pick k distinct items (partial Fisher-Yates).

        k is clamped to len(items).
        """
        pool = list(items)
        k = max(0, min(k, len(pool)))
        for i in range(k):
            j = i + self.next_int(len(pool) - i)
            pool[i], pool[j] = pool[j], pool[i]
        return pool[:k]


def generate_random_seed() -> int:
    """Generate a random seed value."""
    return random.randint(0, 0x7FFFFFFF)
