"""Monster agent: generates a monster for each encounter."""

import logging
from typing import Optional

from elfarena import helpers
from elfarena.agents.base import JSONGenerationAgent
from elfarena.agents.prompts import MONSTER_PROMPT
from elfarena.config import DEFAULT_MONSTER_AGENT_TEMPERATURE, DEFAULT_MONSTER_HINT
from elfarena.engine.difficulty import fallback_monster_record, tier_for_level
from elfarena.models.combatants import Monster
from elfarena.models.generation import MonsterRecord
from elfarena.settings.game_config import CombatRules

logger = logging.getLogger(__name__)


class MonsterAgent(JSONGenerationAgent):
    """Asks the LLM for monster content scaled to the player's level."""

    agent_name = "Monster agent"
    default_temperature = DEFAULT_MONSTER_AGENT_TEMPERATURE

    @helpers.log_call
    def generate_record(self, player_level: int, hint: str = DEFAULT_MONSTER_HINT) -> MonsterRecord:
        """
        Generate monster data for the player's difficulty tier.

        Args:
            player_level: Current player level (selects the tier)
            hint: Free-text description of the wanted monster

        Returns:
            The generated record, or the tier's fallback monster on failure
        """
        tier = tier_for_level(player_level)
        messages = MONSTER_PROMPT.format_messages(
            player_level=player_level,
            hint=hint,
            difficulty_hint=tier.hint,
            min_hp=tier.min_hp,
            max_hp=tier.max_hp,
            min_stat=tier.min_stat,
            max_stat=tier.max_stat,
            base_exp=tier.base_exp,
            example_hp=tier.example_hp,
        )
        record = self._generate(messages, MonsterRecord)
        if record is None:
            logger.warning(f"Using fallback monster for level {player_level}")
            return fallback_monster_record(player_level)

        logger.info(f"LLM generated monster data: {record.name}")
        return record

    def generate_monster(
        self, player_level: int, hint: str = DEFAULT_MONSTER_HINT, rules: Optional[CombatRules] = None
    ) -> Monster:
        """Generate a ready-to-fight monster (never fails, see `generate_record`)."""
        return Monster(self.generate_record(player_level, hint), rules=rules)
