"""ElfArena: a turn-based combat loop with LLM-generated monsters and loot."""

__version__ = "0.1.0"
