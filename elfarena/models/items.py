"""Item models."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from elfarena.engine.dice import DiceRoller


class ItemType(str, Enum):
    """Item categories that carry game logic."""

    WEAPON = "Weapon"


class ItemRecord(BaseModel):
    """An item produced by the item generator (or the starting weapon)."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)  # Immutable model

    name: str = Field(min_length=1, description="Item name")
    item_type: str = Field(alias="type", description='Item type, "Weapon" or anything else')
    damage: Optional[str] = Field(default=None, description="Damage dice notation (weapons only)")
    effect: str = Field(default="None", description="Free-text special effect")

    @field_validator("item_type")
    @classmethod
    def normalize_type(cls, value: str) -> str:
        """Accept "weapon" in any case as the canonical weapon type."""
        value = value.strip()
        if value.lower() == ItemType.WEAPON.value.lower():
            return ItemType.WEAPON.value
        return value

    @field_validator("effect", mode="before")
    @classmethod
    def effect_as_text(cls, value):
        """Generators sometimes return effects as lists."""
        if value is None:
            return "None"
        if isinstance(value, (list, tuple)):
            return ", ".join(str(part) for part in value)
        return value

    @model_validator(mode="after")
    def check_weapon_damage(self) -> "ItemRecord":
        """Weapons must carry parseable damage dice."""
        if self.is_weapon:
            if not self.damage:
                raise ValueError("Weapon items require a damage notation")
            DiceRoller.parse_notation(self.damage)
        return self

    @property
    def is_weapon(self) -> bool:
        return self.item_type == ItemType.WEAPON.value

    @property
    def damage_die(self) -> int:
        """Sides of the damage die ("1d6" -> 6), 0 if the item has no damage."""
        return DiceRoller.die_sides(self.damage)


DEFAULT_WEAPON = ItemRecord(name="Worn Dagger", type=ItemType.WEAPON.value, damage="1d4", effect="None")
