"""Item agent: generates loot dropped by defeated monsters."""

from typing import Optional

from elfarena.agents.base import JSONGenerationAgent
from elfarena.agents.prompts import ITEM_PROMPT
from elfarena.config import DEFAULT_ITEM_AGENT_TEMPERATURE
from elfarena.models.items import ItemRecord


class ItemAgent(JSONGenerationAgent):
    """Asks the LLM for a single item."""

    agent_name = "Item agent"
    default_temperature = DEFAULT_ITEM_AGENT_TEMPERATURE

    def generate_item(self) -> Optional[ItemRecord]:
        """Generate one item; None when the reply is unusable."""
        return self._generate(ITEM_PROMPT.format_messages(), ItemRecord)
