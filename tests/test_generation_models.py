"""Tests for generator output records."""

import pytest
from pydantic import ValidationError

from elfarena.models.generation import (
    FALLBACK_ACTION,
    PLAYER_TARGET,
    MonsterAction,
    MonsterActionType,
    MonsterRecord,
)
from elfarena.models.stats import Ability


class TestMonsterRecord:
    """Test suite for MonsterRecord validation."""

    def test_full_payload(self):
        record = MonsterRecord.model_validate(
            {
                "name": "Moss Troll",
                "description": "A slow, mossy troll.",
                "hp": 20,
                "base_exp": 15,
                "drop_chance": 0.6,
                "stats": {"STR": 12, "DEX": 6, "CON": 14, "INT": 4, "WIS": 6, "CHA": 5},
                "special_abilities": ["Regrowth: heals slowly"],
            }
        )
        assert record.stats[Ability.STRENGTH] == 12
        assert record.stats[Ability.CONSTITUTION] == 14
        assert record.special_abilities == ["Regrowth: heals slowly"]

    def test_defaults(self):
        record = MonsterRecord(name="Slime", hp=5)
        assert record.description == "An ordinary monster."
        assert record.base_exp == 10
        assert record.drop_chance == 0.5
        assert record.stats == {}

    def test_unknown_stat_keys_are_dropped(self):
        record = MonsterRecord(name="Wisp", hp=5, stats={"HP": 30, "strength": 9, "LUCK": 3})
        assert record.stats == {Ability.STRENGTH: 9}

    def test_ability_dicts_become_text(self):
        record = MonsterRecord(
            name="Wolf", hp=8, special_abilities=[{"name": "Howl", "description": "Calls the pack"}, "Bite"]
        )
        assert record.special_abilities == ["Howl: Calls the pack", "Bite"]

    @pytest.mark.parametrize(
        "payload",
        [
            {"name": "Ghost", "hp": 0},
            {"name": "Ghost", "hp": 10, "drop_chance": 1.5},
            {"name": "Ghost", "hp": 10, "stats": {"STR": -1}},
            {"name": "", "hp": 10},
            {"hp": 10},
        ],
    )
    def test_invalid_payloads(self, payload):
        with pytest.raises(ValidationError):
            MonsterRecord.model_validate(payload)


class TestMonsterAction:
    """Test suite for MonsterAction interpretation."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("attack", MonsterActionType.ATTACK),
            ("Defend", MonsterActionType.DEFEND),
            ("bolster defense", MonsterActionType.DEFEND),
            ("other", MonsterActionType.OTHER),
            ("flee", MonsterActionType.ATTACK),
            ("", MonsterActionType.ATTACK),
            (None, MonsterActionType.ATTACK),
        ],
    )
    def test_interpret(self, raw, expected):
        assert MonsterActionType.interpret(raw) == expected

    def test_attack_targets_player(self):
        action = MonsterAction.model_validate({"action_type": "attack", "description": "Claws!"})
        assert action.target == PLAYER_TARGET

    def test_explicit_target_kept(self):
        action = MonsterAction(action_type="attack", description="Bites the tree", target="tree")
        assert action.target == "tree"

    def test_defend_has_no_default_target(self):
        action = MonsterAction(action_type="defend", description="Hunkers down")
        assert action.action_type == MonsterActionType.DEFEND
        assert action.target is None

    def test_missing_description(self):
        action = MonsterAction.model_validate({"action_type": "other", "description": None})
        assert action.description == ""

    def test_fallback_action(self):
        assert FALLBACK_ACTION.action_type == MonsterActionType.ATTACK
        assert FALLBACK_ACTION.target == PLAYER_TARGET
        assert FALLBACK_ACTION.description
