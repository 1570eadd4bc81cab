"""Structured records returned by the content generators."""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from elfarena.models.stats import Ability


class MonsterActionType(str, Enum):
    """Action vocabulary that drives the combat resolver."""

    ATTACK = "attack"
    DEFEND = "defend"
    OTHER = "other"

    @classmethod
    def interpret(cls, raw: object) -> "MonsterActionType":
        """Map free-form generator output onto the vocabulary; unknown means attack."""
        if isinstance(raw, cls):
            return raw
        text = str(raw or "").strip().lower()
        if text == cls.DEFEND.value or "defense" in text:
            return cls.DEFEND
        if text == cls.OTHER.value:
            return cls.OTHER
        return cls.ATTACK


PLAYER_TARGET = "player"


class MonsterRecord(BaseModel):
    """Monster content as produced by the monster generator."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(min_length=1, description="Monster name")
    description: str = Field(default="An ordinary monster.", description="Short description")
    hp: int = Field(gt=0, description="Maximum and starting HP")
    base_exp: int = Field(default=10, ge=0, description="Experience granted on defeat")
    drop_chance: float = Field(default=0.5, ge=0.0, le=1.0, description="Probability of an item drop")
    stats: dict[Ability, int] = Field(default_factory=dict, description="Supplied ability scores")
    special_abilities: list[str] = Field(default_factory=list, description="Opaque ability descriptions")

    @field_validator("stats", mode="before")
    @classmethod
    def normalize_stats(cls, value: Any) -> Any:
        """Map "STR"/"strength" keys onto abilities, dropping the rest (e.g. "HP")."""
        if not isinstance(value, dict):
            return value
        normalized = {}
        for key, score in value.items():
            ability = Ability.parse(key)
            if ability is not None:
                normalized[ability] = score
        return normalized

    @field_validator("stats")
    @classmethod
    def non_negative_stats(cls, value: dict[Ability, int]) -> dict[Ability, int]:
        for ability, score in value.items():
            if score < 0:
                raise ValueError(f"{ability.value} must be non-negative, got {score}")
        return value

    @field_validator("special_abilities", mode="before")
    @classmethod
    def abilities_as_text(cls, value: Any) -> Any:
        """Accept {"name": ..., "description": ...} entries as well as strings."""
        if not isinstance(value, list):
            return value
        abilities = []
        for entry in value:
            if isinstance(entry, dict):
                name = entry.get("name", "")
                description = entry.get("description", "")
                abilities.append(f"{name}: {description}" if name and description else str(name or description))
            else:
                abilities.append(str(entry))
        return abilities

    @field_validator("description", mode="before")
    @classmethod
    def default_description(cls, value: Any) -> Any:
        return value or "An ordinary monster."


class MonsterAction(BaseModel):
    """A monster's chosen action for one turn."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    action_type: MonsterActionType = Field(default=MonsterActionType.ATTACK, description="Action category")
    description: str = Field(default="", description="Narrative text for the action")
    target: Optional[str] = Field(default=None, description="Action target (attacks target the player)")

    @field_validator("action_type", mode="before")
    @classmethod
    def interpret_action_type(cls, value: Any) -> MonsterActionType:
        return MonsterActionType.interpret(value)

    @field_validator("description", mode="before")
    @classmethod
    def description_as_text(cls, value: Any) -> str:
        return "" if value is None else str(value)

    @model_validator(mode="before")
    @classmethod
    def attacks_target_player(cls, data: Any) -> Any:
        """Attacks without an explicit target are aimed at the player."""
        if isinstance(data, dict) and MonsterActionType.interpret(data.get("action_type")) == MonsterActionType.ATTACK:
            if data.get("target") is None:
                data = {**data, "target": PLAYER_TARGET}
        return data


FALLBACK_ACTION = MonsterAction(
    action_type=MonsterActionType.ATTACK,
    description="The monster lunges forward with a basic attack.",
    target=PLAYER_TARGET,
)
