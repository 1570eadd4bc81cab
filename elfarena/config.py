"""Central configuration defaults and constants for ElfArena."""

import os

# LLM Provider Defaults
DEFAULT_LLM_PROVIDER = os.getenv("ELFARENA_LLM_PROVIDER", "ollama")
DEFAULT_OLLAMA_BASE_URL = os.getenv("ELFARENA_OLLAMA_BASE_URL", "http://localhost:11434/")
DEFAULT_OPENAI_BASE_URL = os.getenv("ELFARENA_OPENAI_BASE_URL", "")
DEFAULT_OPENAI_API_KEY = os.getenv("ELFARENA_OPENAI_API_KEY", "")
DEFAULT_LLM_MODEL = os.getenv("ELFARENA_LLM_MODEL", "gemma3:latest")
DEFAULT_LLM_TEMPERATURE = float(os.getenv("ELFARENA_LLM_TEMPERATURE", "0.7"))
DEFAULT_LLM_TIMEOUT = int(os.getenv("ELFARENA_LLM_TIMEOUT", "60"))
DEFAULT_LLM_NUM_CTX = int(os.getenv("ELFARENA_LLM_NUM_CTX", str(2**13)))  # 8192 tokens context window

# Agent-Specific LLM Defaults
DEFAULT_MONSTER_AGENT_TEMPERATURE = float(os.getenv("ELFARENA_MONSTER_AGENT_TEMPERATURE", "0.9"))  # Varied monsters
DEFAULT_ACTION_AGENT_TEMPERATURE = float(os.getenv("ELFARENA_ACTION_AGENT_TEMPERATURE", "0.7"))
DEFAULT_ITEM_AGENT_TEMPERATURE = float(os.getenv("ELFARENA_ITEM_AGENT_TEMPERATURE", "0.8"))

# Combat Defaults (percentages)
DEFAULT_BASE_HIT_CHANCE = float(os.getenv("ELFARENA_BASE_HIT_CHANCE", "75"))
DEFAULT_BASE_EVASION_RATE = float(os.getenv("ELFARENA_BASE_EVASION_RATE", "5"))
DEFAULT_BASE_CRITICAL_CHANCE = float(os.getenv("ELFARENA_BASE_CRITICAL_CHANCE", "5"))
DEFAULT_CRITICAL_MULTIPLIER = float(os.getenv("ELFARENA_CRITICAL_MULTIPLIER", "1.5"))

# Leveling Defaults
DEFAULT_BASE_EXP_TO_NEXT_LEVEL = int(os.getenv("ELFARENA_BASE_EXP_TO_NEXT_LEVEL", "100"))
DEFAULT_EXP_MULTIPLIER_PER_LEVEL = float(os.getenv("ELFARENA_EXP_MULTIPLIER_PER_LEVEL", "1.5"))

# Player Defaults
DEFAULT_PLAYER_NAME = os.getenv("ELFARENA_PLAYER_NAME", "Arwen")
DEFAULT_PLAYER_BASE_HP = int(os.getenv("ELFARENA_PLAYER_BASE_HP", "20"))
DEFAULT_PLAYER_STATS = {
    "STR": int(os.getenv("ELFARENA_PLAYER_STR", "12")),
    "DEX": int(os.getenv("ELFARENA_PLAYER_DEX", "16")),
    "CON": int(os.getenv("ELFARENA_PLAYER_CON", "12")),
    "INT": int(os.getenv("ELFARENA_PLAYER_INT", "14")),
    "WIS": int(os.getenv("ELFARENA_PLAYER_WIS", "12")),
    "CHA": int(os.getenv("ELFARENA_PLAYER_CHA", "10")),
}

# Game Loop Defaults
DEFAULT_TURN_DELAY_SECONDS = float(os.getenv("ELFARENA_TURN_DELAY_SECONDS", "1.0"))
DEFAULT_MONSTER_HINT = os.getenv("ELFARENA_MONSTER_HINT", "A monster roaming the forest")
DEFAULT_LOG_LEVEL = os.getenv("ELFARENA_LOG_LEVEL", "INFO").upper()
