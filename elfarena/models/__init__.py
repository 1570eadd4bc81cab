"""Data models module for ElfArena."""

# Stats
from elfarena.models.stats import LUCK, Ability, StatBlock

# Bars and progression
from elfarena.models.bar import BarSnapshot, ResourceBar
from elfarena.models.progression import ProgressionTrack

# Items
from elfarena.models.items import DEFAULT_WEAPON, ItemRecord, ItemType

# Generator records
from elfarena.models.generation import (
    FALLBACK_ACTION,
    MonsterAction,
    MonsterActionType,
    MonsterRecord,
)

# Outcomes
from elfarena.models.outcomes import AttackOutcome, CombatantSnapshot, EncounterResult

# Combatants
from elfarena.models.combatants import Combatant, Monster, Player

__all__ = [
    # Stats
    "Ability",
    "LUCK",
    "StatBlock",
    # Bars and progression
    "BarSnapshot",
    "ResourceBar",
    "ProgressionTrack",
    # Items
    "DEFAULT_WEAPON",
    "ItemRecord",
    "ItemType",
    # Generator records
    "FALLBACK_ACTION",
    "MonsterAction",
    "MonsterActionType",
    "MonsterRecord",
    # Outcomes
    "AttackOutcome",
    "CombatantSnapshot",
    "EncounterResult",
    # Combatants
    "Combatant",
    "Monster",
    "Player",
]
