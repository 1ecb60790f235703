"""
Dungeon Rush - Seeded Random Tests
"""

import pytest

from dungeon_rush.engine.rng import SeededRandom


class TestSeededRandom:
    """Tests for the LCG."""

    def test_first_value_for_seed_one(self):
        rng = SeededRandom(1)
        assert rng.next() == 16806 / 2147483646
        assert rng.state == 16807

    def test_second_value_for_seed_one(self):
        rng = SeededRandom(1)
        rng.next()
        rng.next()
        assert rng.state == 282475249

    @pytest.mark.parametrize("seed", [0, 2147483647])
    def test_zero_state_avoided(self, seed):
        assert SeededRandom(seed).state == 2147483646

    def test_negative_seed_normalized(self):
        assert SeededRandom(-5).state == 2147483642

    def test_values_in_unit_interval(self):
        rng = SeededRandom(987)
        for _ in range(500):
            value = rng.next()
            assert 0 <= value < 1

    def test_next_int_bounds(self):
        rng = SeededRandom(31337)
        values = {rng.next_int(2, 5) for _ in range(500)}
        assert values == {2, 3, 4, 5}

    def test_same_seed_same_sequence(self):
        first = SeededRandom(42)
        second = SeededRandom(42)
        assert [first.next() for _ in range(20)] == [second.next() for _ in range(20)]

    def test_reset(self):
        rng = SeededRandom(42)
        expected = [rng.next() for _ in range(5)]
        rng.reset(42)
        assert [rng.next() for _ in range(5)] == expected


class TestShuffle:
    """Tests for the Fisher-Yates shuffle."""

    def test_is_permutation(self):
        items = list(range(30))
        shuffled = SeededRandom(7).shuffle(items)
        assert sorted(shuffled) == items

    def test_input_untouched(self):
        items = [1, 2, 3, 4]
        SeededRandom(7).shuffle(items)
        assert items == [1, 2, 3, 4]

    def test_deterministic(self):
        items = list("abcdefghij")
        assert SeededRandom(3).shuffle(items) == SeededRandom(3).shuffle(items)

    def test_seed_changes_order(self):
        items = list(range(30))
        assert SeededRandom(1).shuffle(items) != SeededRandom(2).shuffle(items)

    def test_empty_and_single(self):
        rng = SeededRandom(5)
        assert rng.shuffle([]) == []
        assert rng.shuffle(["x"]) == ["x"]

    def test_consumes_one_draw_per_swap(self):
        rng = SeededRandom(11)
        rng.shuffle(list(range(10)))
        reference = SeededRandom(11)
        for _ in range(9):
            reference.next()
        assert rng.state == reference.state


class TestChoice:
    """Tests for choice."""

    def test_choice_from_items(self):
        assert SeededRandom(9).choice(["a", "b", "c"]) in {"a", "b", "c"}

    def test_choice_empty(self):
        with pytest.raises(ValueError, match="empty"):
            SeededRandom(9).choice([])
