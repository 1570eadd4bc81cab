"""Ability scores and derived bonuses."""

import math
import random
from enum import Enum
from numbers import Real
from typing import Mapping, Optional, Union

from elfarena.exceptions import InvalidAbilityError, InvalidValueError


class Ability(str, Enum):
    """Recognized ability scores."""

    STRENGTH = "STR"
    DEXTERITY = "DEX"
    CONSTITUTION = "CON"
    INTELLIGENCE = "INT"
    WISDOM = "WIS"
    CHARISMA = "CHA"

    @classmethod
    def parse(cls, key: object) -> Optional["Ability"]:
        """Resolve an enum member, short name ("STR") or full name ("strength")."""
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        normalized = key.strip().upper()
        for ability in cls:
            if normalized in (ability.value, ability.name):
                return ability
        return None


# Pseudo-stat that is read but never stored
LUCK = "LUCK"

DEFAULT_ABILITY_VALUE = 10

AbilityKey = Union[Ability, str]


def calculate_bonus(value: float) -> int:
    """D&D style modifier: floor((value - 10) / 2)."""
    return math.floor((value - 10) / 2)


class StatBlock:
    """Holds every recognized ability score of a combatant."""

    def __init__(self, values: Optional[Mapping[AbilityKey, float]] = None) -> None:
        self._values: dict[Ability, float] = {ability: DEFAULT_ABILITY_VALUE for ability in Ability}
        for key, value in (values or {}).items():
            self.set(key, value)

    @classmethod
    def rolled(cls, rng: Optional[random.Random] = None) -> "StatBlock":
        """Roll every ability as 4d6, dropping the lowest die."""
        from elfarena.engine.dice import DiceRoller

        return cls({ability: DiceRoller.roll_ability_score(rng) for ability in Ability})

    def get(self, ability: AbilityKey) -> float:
        """Return the score; LUCK reads as the default value."""
        parsed = Ability.parse(ability)
        if parsed is None:
            if isinstance(ability, str) and ability.strip().upper() == LUCK:
                return DEFAULT_ABILITY_VALUE
            raise InvalidAbilityError(ability)
        return self._values[parsed]

    def set(self, ability: AbilityKey, value: float) -> None:
        """Overwrite a score after validating key and value."""
        parsed = Ability.parse(ability)
        if parsed is None:
            raise InvalidAbilityError(ability)
        if isinstance(value, bool) or not isinstance(value, Real) or not math.isfinite(value) or value < 0:
            raise InvalidValueError(value)
        self._values[parsed] = value

    def bonus(self, ability: AbilityKey) -> int:
        """Bonus lookup never fails: unknown keys yield 0."""
        try:
            return calculate_bonus(self.get(ability))
        except InvalidAbilityError:
            return 0

    def as_table(self) -> dict[str, tuple[float, int]]:
        """Short name -> (value, bonus), in declaration order."""
        return {ability.value: (self._values[ability], self.bonus(ability)) for ability in Ability}

    def to_dict(self) -> dict[str, float]:
        return {ability.value: value for ability, value in self._values.items()}

    def __repr__(self) -> str:
        return f"StatBlock({self.to_dict()})"
