"""Monster action agent: picks the monster's move each turn."""

import logging

from elfarena.agents.base import JSONGenerationAgent
from elfarena.agents.prompts import ACTION_PROMPT
from elfarena.agents.state_serializer import StateSerializer
from elfarena.config import DEFAULT_ACTION_AGENT_TEMPERATURE
from elfarena.models.combatants import Monster, Player
from elfarena.models.generation import FALLBACK_ACTION, MonsterAction

logger = logging.getLogger(__name__)


class MonsterActionAgent(JSONGenerationAgent):
    """Lets the LLM describe the monster's action; the type drives combat."""

    agent_name = "Monster action agent"
    default_temperature = DEFAULT_ACTION_AGENT_TEMPERATURE

    def choose_action(self, monster: Monster, player: Player) -> MonsterAction:
        """
        Choose the monster's action for this turn.

        Args:
            monster: Acting monster
            player: Player being fought

        Returns:
            The generated action, or a basic attack on the player on failure
        """
        context = StateSerializer.extract_combat_context(monster, player)
        messages = ACTION_PROMPT.format_messages(**context)
        action = self._generate(messages, MonsterAction)
        if action is None:
            logger.warning(f"Falling back to a basic attack for {monster.name}")
            return FALLBACK_ACTION
        return action
