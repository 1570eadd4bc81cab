"""Pytest configuration and fixtures."""

import pytest

from elfarena.models.combatants import Monster, Player
from elfarena.models.generation import MonsterRecord
from elfarena.models.items import ItemRecord
from elfarena.settings.game_config import CombatRules


class ScriptedRandom:
    """Random source that replays fixed draws, then a default value."""

    def __init__(self, draws=(), default: float = 0.5, randint_value=None):
        self._draws = list(draws)
        self._default = default
        self._randint_value = randint_value
        self.calls = 0

    def random(self) -> float:
        self.calls += 1
        if self._draws:
            return self._draws.pop(0)
        return self._default

    def randint(self, a: int, b: int) -> int:
        if self._randint_value is None:
            return a
        return self._randint_value


@pytest.fixture
def scripted_rng():
    """Factory for scripted random sources."""
    return ScriptedRandom


@pytest.fixture
def certain_rules():
    """Rules where every attack hits and nothing is evaded or critical."""
    return CombatRules(base_hit_chance=100, base_evasion_rate=0, base_critical_chance=0, critical_multiplier=1.5)


@pytest.fixture
def plain_player(certain_rules):
    """Unarmed player with STR 14 and every other ability at 10."""
    player = Player(name="Arwen", stats={"STR": 14}, rules=certain_rules)
    player.equipped_weapon = None
    return player


@pytest.fixture
def make_monster(certain_rules):
    """Factory for monsters sharing the deterministic rules."""

    def _make(name="Goblin", hp=10, stats=None, base_exp=10, drop_chance=0.5, special_abilities=None, rules=None):
        record = MonsterRecord(
            name=name,
            description=f"A test {name.lower()}",
            hp=hp,
            base_exp=base_exp,
            drop_chance=drop_chance,
            stats={"CON": 10} if stats is None else stats,
            special_abilities=special_abilities or [],
        )
        return Monster(record, rules=rules or certain_rules)

    return _make


@pytest.fixture
def flame_sword():
    return ItemRecord(name="Flame Sword", type="Weapon", damage="1d8", effect="Burns on hit")


@pytest.fixture
def healing_potion():
    return ItemRecord(name="Healing Potion", type="Potion", effect="Restores 10 HP")
