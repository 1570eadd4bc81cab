"""Tests for DiceRoller."""

import random

import pytest

from elfarena.engine.dice import DiceRoller


class TestDiceRoller:
    """Test suite for DiceRoller."""

    def test_roll_single_die(self):
        """Test rolling a single die."""
        result = DiceRoller.roll(20, rng=random.Random(1))
        assert 1 <= result["total"] <= 20
        assert len(result["rolls"]) == 1
        assert result["modifier"] == 0

    def test_roll_with_modifier(self):
        result = DiceRoller.roll(6, modifier=3, count=2, rng=random.Random(2))
        assert result["total"] == sum(result["rolls"]) + 3
        assert all(1 <= roll <= 6 for roll in result["rolls"])

    @pytest.mark.parametrize(
        "notation, expected",
        [("1d6", (1, 6)), ("2D8", (2, 8)), ("d4", (1, 4)), (" 3d12 ", (3, 12))],
    )
    def test_parse_notation(self, notation, expected):
        assert DiceRoller.parse_notation(notation) == expected

    @pytest.mark.parametrize("notation", ["", "d", "1d0", "0d6", "sword", "1d6+2", None, 6])
    def test_parse_notation_rejects_malformed(self, notation):
        with pytest.raises(ValueError):
            DiceRoller.parse_notation(notation)

    def test_die_sides(self):
        assert DiceRoller.die_sides("1d10") == 10
        assert DiceRoller.die_sides(None) == 0
        assert DiceRoller.die_sides("") == 0

    def test_roll_notation(self):
        result = DiceRoller.roll_notation("3d4", rng=random.Random(3))
        assert result["count"] == 3
        assert result["dice_type"] == 4
        assert 3 <= result["total"] <= 12

    def test_roll_ability_score_range(self):
        rng = random.Random(4)
        for _ in range(50):
            assert 3 <= DiceRoller.roll_ability_score(rng) <= 18

    def test_odds(self, scripted_rng):
        assert DiceRoller.odds(0.5, scripted_rng([0.49])) is True
        assert DiceRoller.odds(0.5, scripted_rng([0.5])) is False
        assert DiceRoller.odds(0.0, scripted_rng([0.0])) is False
        assert DiceRoller.odds(1.0, scripted_rng([0.999])) is True
