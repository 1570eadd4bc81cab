"""Immutable game rule values injected into combatants and the resolver."""

import math

from pydantic import BaseModel, ConfigDict, Field

from elfarena.config import (
    DEFAULT_BASE_CRITICAL_CHANCE,
    DEFAULT_BASE_EVASION_RATE,
    DEFAULT_BASE_EXP_TO_NEXT_LEVEL,
    DEFAULT_BASE_HIT_CHANCE,
    DEFAULT_CRITICAL_MULTIPLIER,
    DEFAULT_EXP_MULTIPLIER_PER_LEVEL,
    DEFAULT_PLAYER_BASE_HP,
    DEFAULT_PLAYER_NAME,
    DEFAULT_PLAYER_STATS,
)


class CombatRules(BaseModel):
    """Base combat rates (percent) and the critical damage multiplier."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    base_hit_chance: float = Field(default=DEFAULT_BASE_HIT_CHANCE, description="Base hit chance in percent")
    base_evasion_rate: float = Field(default=DEFAULT_BASE_EVASION_RATE, description="Base evasion rate in percent")
    base_critical_chance: float = Field(
        default=DEFAULT_BASE_CRITICAL_CHANCE, description="Base critical chance in percent"
    )
    critical_multiplier: float = Field(
        default=DEFAULT_CRITICAL_MULTIPLIER, ge=1.0, description="Damage multiplier on a critical hit"
    )


class LevelCurve(BaseModel):
    """Experience curve: threshold = floor(base_exp * level * multiplier)."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    base_exp: int = Field(default=DEFAULT_BASE_EXP_TO_NEXT_LEVEL, ge=1, description="Base experience per level")
    multiplier: float = Field(default=DEFAULT_EXP_MULTIPLIER_PER_LEVEL, gt=0, description="Multiplier per level")

    def threshold(self, level: int) -> int:
        """Experience needed to advance from `level` to the next one."""
        return math.floor(self.base_exp * (level * self.multiplier))


class PlayerDefaults(BaseModel):
    """Starting values for a new player character."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(default=DEFAULT_PLAYER_NAME, description="Player name")
    base_hp: int = Field(default=DEFAULT_PLAYER_BASE_HP, ge=1, description="HP before level and CON scaling")
    stats: dict[str, int] = Field(
        default_factory=lambda: dict(DEFAULT_PLAYER_STATS), description="Starting ability scores"
    )


DEFAULT_COMBAT_RULES = CombatRules()
DEFAULT_LEVEL_CURVE = LevelCurve()
