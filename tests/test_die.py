# Area: Dice Tests
"""Tests for Die."""

import random

import pytest
from dice_match.die import Die


class TestDieConstruction:
    """Tests for Die construction."""

    def test_faces_recorded(self):
        assert Die(6).faces == 6

    def test_zero_faces_rejected(self):
        with pytest.raises(ValueError):
            Die(0)

    def test_no_value_before_first_roll(self):
        die = Die(6)
        assert die.last_value is None
        assert str(die) == "-"


class TestDieRoll:
    """Tests for Die.roll()."""

    @pytest.mark.parametrize("faces", [1, 2, 6, 20])
    def test_roll_in_range(self, faces):
        """Every roll lands in [1, faces]."""
        die = Die(faces, rng=random.Random(1234))
        for _ in range(200):
            assert 1 <= die.roll() <= faces

    def test_single_face_always_one(self):
        die = Die(1)
        assert [die.roll() for _ in range(5)] == [1, 1, 1, 1, 1]

    def test_roll_updates_last_value(self):
        die = Die(6, rng=random.Random(7))
        value = die.roll()
        assert die.last_value == value
        assert str(die) == str(value)

    def test_seeded_dice_are_reproducible(self):
        """Two dice with equally seeded sources roll the same sequence."""
        a = Die(6, rng=random.Random(99))
        b = Die(6, rng=random.Random(99))
        assert [a.roll() for _ in range(10)] == [b.roll() for _ in range(10)]

    def test_reset_forgets_value(self):
        die = Die(6)
        die.roll()
        die.reset()
        assert die.last_value is None
