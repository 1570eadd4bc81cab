"""Tests for the LLM generator agents using fake chat models."""

import json

from langchain_core.language_models.fake_chat_models import FakeListChatModel

from elfarena.agents import ItemAgent, MonsterActionAgent, MonsterAgent, StateSerializer
from elfarena.models.combatants import Monster
from elfarena.models.generation import PLAYER_TARGET, MonsterActionType
from elfarena.models.stats import Ability


class ExplodingLLM:
    """Chat model stand-in whose every call fails."""

    def invoke(self, messages):
        raise ConnectionError("LLM server unreachable")


MONSTER_JSON = json.dumps(
    {
        "name": "Thorn Sprite",
        "description": "A prickly forest spirit.",
        "hp": 14,
        "base_exp": 12,
        "drop_chance": 0.4,
        "stats": {"STR": 8, "DEX": 15, "CON": 9, "INT": 10, "WIS": 12, "CHA": 11},
        "special_abilities": ["Bramble Whip: lashes with thorns"],
    }
)


class TestMonsterAgent:
    """Test suite for MonsterAgent."""

    def test_valid_monster(self):
        agent = MonsterAgent(llm=FakeListChatModel(responses=[MONSTER_JSON]))
        monster = agent.generate_monster(1)
        assert isinstance(monster, Monster)
        assert monster.name == "Thorn Sprite"
        assert monster.hp_bar.maximum == 14
        assert monster.base_exp == 12
        assert monster.stats.get(Ability.DEXTERITY) == 15

    def test_fenced_json(self):
        agent = MonsterAgent(llm=FakeListChatModel(responses=[f"```json\n{MONSTER_JSON}\n```"]))
        assert agent.generate_record(2).name == "Thorn Sprite"

    def test_malformed_output_falls_back(self, caplog):
        agent = MonsterAgent(llm=FakeListChatModel(responses=["I refuse to make a monster {oops"]))
        with caplog.at_level("WARNING"):
            record = agent.generate_record(1)
        assert record.name == "Error Monster"
        assert "I refuse to make a monster" in caplog.text

    def test_schema_violation_falls_back(self):
        agent = MonsterAgent(llm=FakeListChatModel(responses=['{"name": "Ghost", "hp": -3}']))
        assert agent.generate_record(4).name == "Error Monster"

    def test_llm_failure_falls_back(self, caplog):
        agent = MonsterAgent(llm=ExplodingLLM())
        with caplog.at_level("WARNING"):
            monster = agent.generate_monster(5)
        assert monster.name == "Error Monster"
        assert "LLM server unreachable" in caplog.text

    def test_rules_are_passed_to_monster(self, certain_rules):
        agent = MonsterAgent(llm=FakeListChatModel(responses=[MONSTER_JSON]))
        monster = agent.generate_monster(1, rules=certain_rules)
        assert monster.rules is certain_rules


class TestMonsterActionAgent:
    """Test suite for MonsterActionAgent."""

    def test_valid_attack(self, plain_player, make_monster):
        agent = MonsterActionAgent(
            llm=FakeListChatModel(responses=['{"action_type": "attack", "description": "Bites hard."}'])
        )
        action = agent.choose_action(make_monster(), plain_player)
        assert action.action_type == MonsterActionType.ATTACK
        assert action.description == "Bites hard."
        assert action.target == PLAYER_TARGET

    def test_defense_wording_means_defend(self, plain_player, make_monster):
        agent = MonsterActionAgent(
            llm=FakeListChatModel(responses=['{"action_type": "bolster defense", "description": "Curls up."}'])
        )
        assert agent.choose_action(make_monster(), plain_player).action_type == MonsterActionType.DEFEND

    def test_unusable_output_falls_back_to_attack(self, plain_player, make_monster):
        agent = MonsterActionAgent(llm=FakeListChatModel(responses=["growl"]))
        action = agent.choose_action(make_monster(), plain_player)
        assert action.action_type == MonsterActionType.ATTACK
        assert action.target == PLAYER_TARGET

    def test_llm_failure_falls_back_to_attack(self, plain_player, make_monster):
        agent = MonsterActionAgent(llm=ExplodingLLM())
        assert agent.choose_action(make_monster(), plain_player).action_type == MonsterActionType.ATTACK


class TestItemAgent:
    """Test suite for ItemAgent."""

    def test_valid_weapon(self):
        reply = '{"name": "Elven Longsword", "type": "Weapon", "damage": "1d8", "effect": "Glows near orcs"}'
        item = ItemAgent(llm=FakeListChatModel(responses=[reply])).generate_item()
        assert item.name == "Elven Longsword"
        assert item.is_weapon
        assert item.damage_die == 8

    def test_weapon_without_damage_is_rejected(self):
        reply = '{"name": "Bent Spoon", "type": "Weapon"}'
        assert ItemAgent(llm=FakeListChatModel(responses=[reply])).generate_item() is None

    def test_llm_failure_returns_none(self):
        assert ItemAgent(llm=ExplodingLLM()).generate_item() is None


class TestStateSerializer:
    """Test suite for StateSerializer."""

    def test_combat_context(self, plain_player, make_monster):
        monster = make_monster(name="Wolf", hp=12, special_abilities=["Howl", "Pack Tactics"])
        context = StateSerializer.extract_combat_context(monster, plain_player)
        assert context == {
            "monster_name": "Wolf",
            "monster_hp": "12/12",
            "player_name": "Arwen",
            "player_hp": "25/25",
            "special_abilities": "Howl, Pack Tactics",
        }

    def test_combat_context_without_abilities(self, plain_player, make_monster):
        context = StateSerializer.extract_combat_context(make_monster(), plain_player)
        assert context["special_abilities"] == "none"

    def test_serialize_player(self, plain_player):
        data = StateSerializer.serialize_player(plain_player)
        assert data["name"] == "Arwen"
        assert data["level"] == 1
        assert data["weapon"] is None
