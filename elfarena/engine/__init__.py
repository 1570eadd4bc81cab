"""Game engine package."""

from elfarena.engine.dice import DiceRoller

# Lazy imports to avoid circular dependencies (models import the dice helpers)
__all__ = [
    "CombatResolver",
    "DiceRoller",
    "DisplaySink",
    "GameEngine",
    "InventoryManager",
    "LoggingDisplay",
]


def __getattr__(name: str):
    """Lazy import for engine components that depend on the models package."""
    if name == "CombatResolver":
        from elfarena.engine.combat import CombatResolver
        return CombatResolver
    if name == "GameEngine":
        from elfarena.engine.game_engine import GameEngine
        return GameEngine
    if name == "InventoryManager":
        from elfarena.engine.inventory_manager import InventoryManager
        return InventoryManager
    if name in ("DisplaySink", "LoggingDisplay"):
        from elfarena.engine import display
        return getattr(display, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
