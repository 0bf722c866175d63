# Area: Dice Tests
"""Tests for SoloRound roll history."""

import random

import pytest
from dice_match.errors import AlreadyFinishedError
from dice_match.solo_round import SoloRound, never_finished


class ScriptedRng:
    """Returns pre-set die values in order."""

    def __init__(self, values):
        self.values = list(values)

    def randint(self, low, high):
        return self.values.pop(0)


class TestSoloRoundRolls:
    """Tests for roll_once() and the history accessors."""

    def test_initial_state(self):
        solo = SoloRound(6, 2)
        assert solo.rounds_played() == 0
        assert solo.last_roll() is None
        assert solo.full_history() == ()
        assert solo.is_finished() is False

    def test_roll_once_throws_all_dice(self):
        solo = SoloRound(6, 3, rng=ScriptedRng([4, 2, 6]))
        assert solo.roll_once() == (4, 2, 6)

    def test_history_grows_with_each_roll(self):
        """History length equals the number of successful rolls."""
        solo = SoloRound(6, 2, rng=random.Random(3))
        for expected in range(1, 6):
            solo.roll_once()
            assert solo.rounds_played() == expected
            assert len(solo.full_history()) == expected

    def test_last_roll_and_roll_for(self):
        solo = SoloRound(6, 2, rng=ScriptedRng([1, 2, 3, 4]))
        solo.roll_once()
        solo.roll_once()
        assert solo.last_roll() == (3, 4)
        assert solo.roll_for(1) == (1, 2)
        assert solo.roll_for(2) == (3, 4)

    @pytest.mark.parametrize("round_number", [0, -1, 3])
    def test_roll_for_out_of_range(self, round_number):
        solo = SoloRound(6, 1, rng=ScriptedRng([5, 5]))
        solo.roll_once()
        solo.roll_once()
        assert solo.roll_for(round_number) is None

    def test_full_history_is_snapshot(self):
        """A snapshot taken earlier is not affected by later rolls."""
        solo = SoloRound(6, 1, rng=ScriptedRng([2, 5]))
        solo.roll_once()
        snapshot = solo.full_history()
        solo.roll_once()
        assert snapshot == ((2,),)
        assert solo.full_history() == ((2,), (5,))

    def test_zero_dice_rejected(self):
        with pytest.raises(ValueError):
            SoloRound(6, 0)


class TestSoloRoundFinishCondition:
    """Tests for the injected finish condition."""

    def test_never_finished_default(self):
        solo = SoloRound(6, 1, rng=random.Random(0))
        for _ in range(20):
            solo.roll_once()
        assert solo.is_finished() is False
        assert never_finished(solo.full_history()) is False

    def test_condition_sees_whole_history(self):
        seen = []

        def condition(history):
            seen.append(history)
            return False

        solo = SoloRound(6, 1, finish_condition=condition, rng=ScriptedRng([1, 2]))
        solo.roll_once()
        solo.roll_once()
        assert seen == [((1,),), ((1,), (2,))]

    def test_roll_after_finish_raises(self):
        solo = SoloRound(
            6, 2,
            finish_condition=lambda history: history[-1][0] == history[-1][1],
            rng=ScriptedRng([3, 4, 6, 6]),
        )
        solo.roll_once()
        assert solo.is_finished() is False
        solo.roll_once()
        assert solo.is_finished() is True
        with pytest.raises(AlreadyFinishedError):
            solo.roll_once()
        assert solo.rounds_played() == 2

    def test_reset_restores_initial_state(self):
        solo = SoloRound(
            6, 1,
            finish_condition=lambda history: True,
            rng=ScriptedRng([4, 1]),
        )
        solo.roll_once()
        assert solo.is_finished() is True

        solo.reset()
        assert solo.rounds_played() == 0
        assert solo.last_roll() is None
        assert solo.is_finished() is False
        assert solo.roll_once() == (1,)
