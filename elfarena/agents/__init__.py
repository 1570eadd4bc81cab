"""Agents package."""

from elfarena.agents.action_agent import MonsterActionAgent
from elfarena.agents.base import JSONGenerationAgent
from elfarena.agents.item_agent import ItemAgent
from elfarena.agents.monster_agent import MonsterAgent
from elfarena.agents.output_validator import OutputValidator
from elfarena.agents.state_serializer import StateSerializer

__all__ = [
    "JSONGenerationAgent",
    "MonsterAgent",
    "MonsterActionAgent",
    "ItemAgent",
    "OutputValidator",
    "StateSerializer",
]
