"""Difficulty tiers derived from the player level."""

from pydantic import BaseModel, ConfigDict, Field

from elfarena.models.generation import MonsterRecord


class DifficultyTier(BaseModel):
    """Ranges the monster generator is asked to respect."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    name: str = Field(description="Tier name")
    hint: str = Field(description="Difficulty guidance for the generator")
    min_hp: int = Field(ge=1, description="Suggested minimum HP")
    max_hp: int = Field(ge=1, description="Suggested maximum HP")
    min_stat: int = Field(ge=0, description="Suggested minimum ability score")
    max_stat: int = Field(ge=0, description="Suggested maximum ability score")
    base_exp: int = Field(ge=0, description="Suggested experience reward")

    @property
    def example_hp(self) -> int:
        return self.min_hp + (self.max_hp - self.min_hp) // 2


def tier_for_level(player_level: int) -> DifficultyTier:
    """Pick the tier for `player_level` (novice up to 3, intermediate up to 7)."""
    if player_level <= 3:
        return DifficultyTier(
            name="novice",
            hint="Please create a monster with low HP and stats, easy for a novice player to handle.",
            min_hp=10,
            max_hp=25,
            min_stat=5,
            max_stat=12,
            base_exp=10 + (player_level - 1) * 5,
        )
    if player_level <= 7:
        return DifficultyTier(
            name="intermediate",
            hint="Please create a monster with moderate HP and stats, suitable for an intermediate player.",
            min_hp=25,
            max_hp=50,
            min_stat=8,
            max_stat=15,
            base_exp=20 + (player_level - 3) * 10,
        )
    return DifficultyTier(
        name="veteran",
        hint="Please create a challenging monster with high HP and stats for an experienced player.",
        min_hp=50,
        max_hp=100,
        min_stat=12,
        max_stat=18,
        base_exp=50 + (player_level - 7) * 15,
    )


def fallback_monster_record(player_level: int) -> MonsterRecord:
    """Deterministic minimal monster used when generation fails."""
    tier = tier_for_level(player_level)
    physical = 5 + player_level // 2
    return MonsterRecord(
        name="Error Monster",
        description="A monster that failed to generate from the LLM. (Default Fallback)",
        hp=min(tier.max_hp, 15 + player_level * 2),
        base_exp=tier.base_exp,
        drop_chance=0.3,
        stats={"STR": physical, "DEX": physical, "CON": physical, "INT": 5, "WIS": 5, "CHA": 5},
        special_abilities=[],
    )
