# Area: Match Tests
"""Tests for Player."""

import pytest
from dice_match.player import Player


class TestPlayer:
    """Tests for Player identity and scoring."""

    def test_new_player(self):
        player = Player("Juan")
        assert player.display_name == "Juan"
        assert player.score == 0
        assert player.solo_round is None
        assert str(player) == "Juan"

    def test_unique_ids(self):
        assert Player("Ann").player_id != Player("Ann").player_id

    def test_equality_by_id(self):
        a = Player("Ann")
        b = Player("Ann")
        assert a == a
        assert a != b
        assert len({a, b, a}) == 2

    def test_award_accumulates(self):
        player = Player("Ann")
        assert player.award(1) == 1
        assert player.award(0) == 1
        assert player.award(2) == 3

    def test_negative_award_rejected(self):
        player = Player("Ann")
        with pytest.raises(ValueError):
            player.award(-1)
        assert player.score == 0
