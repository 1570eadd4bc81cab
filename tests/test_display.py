"""Tests for the logging display sink and the CLI wiring."""

import logging

import pytest

from elfarena.app import build_engine, build_parser
from elfarena.engine.display import LoggingDisplay
from elfarena.models.generation import MonsterAction
from elfarena.models.outcomes import AttackOutcome, EncounterResult


@pytest.fixture
def display():
    return LoggingDisplay(logging.getLogger("elfarena.test.display"))


class TestLoggingDisplay:
    """Test suite for LoggingDisplay."""

    def test_miss(self, display, caplog):
        with caplog.at_level(logging.INFO):
            display.show_outcome(AttackOutcome(attacker="Arwen", defender="Goblin", hit=False))
        assert "Arwen's attack on Goblin missed!" in caplog.text

    def test_critical_defeat(self, display, caplog):
        outcome = AttackOutcome(attacker="Arwen", defender="Goblin", hit=True, critical=True, damage=7, defeated=True)
        with caplog.at_level(logging.INFO):
            display.show_outcome(outcome)
        assert "Critical Hit!" in caplog.text
        assert "Arwen dealt 7 damage to Goblin." in caplog.text
        assert "Goblin has been defeated!" in caplog.text

    def test_evasion(self, display, caplog):
        outcome = AttackOutcome(attacker="Goblin", defender="Arwen", hit=True, evaded=True)
        with caplog.at_level(logging.INFO):
            display.show_outcome(outcome)
        assert "Arwen dodged the attack from Goblin!" in caplog.text
        assert "damage" not in caplog.text

    def test_defend_action(self, display, caplog):
        with caplog.at_level(logging.INFO):
            display.show_action("Goblin", MonsterAction(action_type="defend", description="Raises its shield."))
        assert "Raises its shield." in caplog.text
        assert "Goblin takes a defensive stance!" in caplog.text

    def test_stats_table(self, display, caplog, plain_player):
        with caplog.at_level(logging.INFO):
            display.show_stats(plain_player.snapshot())
        assert "STR: 14 (+2)" in caplog.text
        assert "Attack Power: 8, Defense: 2" in caplog.text

    def test_result(self, display, caplog):
        result = EncounterResult(
            monster_name="Goblin", victory=True, turns=3, experience_gained=10, gold_gained=7, item_name="Oak Bow"
        )
        with caplog.at_level(logging.INFO):
            display.show_result(result)
        assert "Victory over Goblin in 3 turns: +10 EXP, +7 gold" in caplog.text
        assert "Loot: Oak Bow (stored)" in caplog.text

    def test_defeat_result_is_error(self, display, caplog):
        with caplog.at_level(logging.INFO):
            display.show_result(EncounterResult(monster_name="Ogre", victory=False, turns=4))
        assert caplog.records[-1].levelno == logging.ERROR


class TestCli:
    """Test suite for argument parsing and engine wiring."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.encounters is None
        assert args.provider is None

    def test_parser_overrides(self):
        args = build_parser().parse_args(["--encounters", "3", "--delay", "0", "--name", "Legolas"])
        assert args.encounters == 3
        assert args.delay == 0.0
        assert args.name == "Legolas"

    def test_build_engine(self):
        args = build_parser().parse_args(["--provider", "ollama", "--model", "llama3", "--name", "Legolas"])
        engine = build_engine(args)
        assert engine.player.name == "Legolas"
        assert engine.encounter_count == 0
