"""Outcome records and state snapshots emitted to the display sink."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class AttackOutcome(BaseModel):
    """Result of one attack resolved by the combat resolver."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    attacker: str = Field(description="Attacker name")
    defender: str = Field(description="Defender name")
    hit: bool = Field(default=False, description="Whether the hit test passed")
    critical: bool = Field(default=False, description="Whether the critical test passed")
    evaded: bool = Field(default=False, description="Whether the defender evaded")
    damage: int = Field(default=0, ge=0, description="Damage applied to the defender")
    defeated: bool = Field(default=False, description="Whether this attack defeated the defender")


class CombatantSnapshot(BaseModel):
    """Point-in-time view of a combatant for display."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Combatant name")
    hp: str = Field(description='HP bar as "current/max"')
    mp: Optional[str] = Field(default=None, description='MP bar as "current/max" (player only)')
    level: Optional[int] = Field(default=None, description="Level (player only)")
    experience: Optional[str] = Field(default=None, description='Experience as "exp/threshold" (player only)')
    gold: Optional[int] = Field(default=None, description="Gold (player only)")
    weapon: Optional[str] = Field(default=None, description="Equipped weapon (player only)")
    stats: dict[str, tuple[Union[int, float], int]] = Field(
        default_factory=dict, description="Ability -> (value, bonus)"
    )
    attack_power: int = Field(description="Derived attack power")
    defense: float = Field(description="Derived defense")
    hit_chance: float = Field(description="Hit chance in percent")
    evasion_rate: float = Field(description="Evasion rate in percent")
    critical_chance: float = Field(description="Critical chance in percent")


class EncounterResult(BaseModel):
    """Summary of one finished encounter."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    monster_name: str = Field(description="Name of the monster fought")
    victory: bool = Field(description="Whether the player won")
    turns: int = Field(ge=0, description="Number of turns played")
    experience_gained: int = Field(default=0, ge=0, description="Experience awarded")
    gold_gained: int = Field(default=0, ge=0, description="Gold awarded")
    leveled_up: bool = Field(default=False, description="Whether the player gained a level")
    item_name: Optional[str] = Field(default=None, description="Dropped item, if any")
    item_equipped: bool = Field(default=False, description="Whether the dropped item was equipped")
