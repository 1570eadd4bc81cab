"""Runtime configuration models."""

from elfarena.settings.game_config import CombatRules, LevelCurve, PlayerDefaults
from elfarena.settings.llm_config import LLMConfig, LLMConfigManager

__all__ = [
    "CombatRules",
    "LevelCurve",
    "PlayerDefaults",
    "LLMConfig",
    "LLMConfigManager",
]
