"""Tests for the XorShift32 PRNG."""

import pytest

from horde_keyboard.utils.rng import XorShift32, generate_random_seed


class TestXorShift32:

    def test_known_first_value(self):
        assert XorShift32(1).next_uint32() == 270369

    def test_zero_seed_is_usable(self):
        """A zero state would stick at zero forever; it is promoted to 1."""
        a = XorShift32(0)
        b = XorShift32(1)
        assert [a.next_uint32() for _ in range(5)] == [b.next_uint32() for _ in range(5)]

    def test_same_seed_same_sequence(self):
        a = XorShift32(12345)
        b = XorShift32(12345)
        assert [a.next_float() for _ in range(100)] == [b.next_float() for _ in range(100)]

    def test_different_seeds_differ(self):
        a = XorShift32(1)
        b = XorShift32(2)
        assert [a.next_uint32() for _ in range(10)] != [b.next_uint32() for _ in range(10)]

    def test_float_range(self):
        rng = XorShift32(99)
        for _ in range(1000):
            assert 0.0 <= rng.next_float() < 1.0
            assert -2.0 <= rng.next_float_range(-2.0, 3.0) < 3.0

    def test_int_range(self):
        rng = XorShift32(7)
        values = {rng.next_int(6) for _ in range(500)}
        assert values == set(range(6))

    def test_chance_extremes(self):
        rng = XorShift32(3)
        assert not any(rng.chance(0.0) for _ in range(200))
        assert all(rng.chance(1.0) for _ in range(200))

    def test_choice(self):
        rng = XorShift32(5)
        items = ['a', 'b', 'c']
        assert all(rng.choice(items) in items for _ in range(50))


class TestSample:

    def test_sample_distinct(self):
        rng = XorShift32(11)
        items = list(range(50))
        picked = rng.sample(items, 15)
        assert len(picked) == 15
        assert len(set(picked)) == 15
        assert set(picked) <= set(items)

    def test_sample_does_not_mutate_input(self):
        rng = XorShift32(11)
        items = list(range(10))
        rng.sample(items, 5)
        assert items == list(range(10))

    @pytest.mark.parametrize("k, expected", [(0, 0), (-3, 0), (20, 10)])
    def test_sample_clamps_k(self, k, expected):
        assert len(XorShift32(1).sample(list(range(10)), k)) == expected

    def test_sample_empty(self):
        assert XorShift32(1).sample([], 3) == []


def test_generate_random_seed_range():
    for _ in range(20):
        assert 0 <= generate_random_seed() <= 0x7FFFFFFF
