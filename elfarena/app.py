"""Console entry point: an endless series of LLM-generated fights."""

import argparse
import logging
from typing import Optional

from elfarena.agents.action_agent import MonsterActionAgent
from elfarena.agents.item_agent import ItemAgent
from elfarena.agents.monster_agent import MonsterAgent
from elfarena.config import (
    DEFAULT_ACTION_AGENT_TEMPERATURE,
    DEFAULT_ITEM_AGENT_TEMPERATURE,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MONSTER_AGENT_TEMPERATURE,
    DEFAULT_MONSTER_HINT,
    DEFAULT_TURN_DELAY_SECONDS,
)
from elfarena.engine.game_engine import GameEngine
from elfarena.models.combatants import Player
from elfarena.settings.llm_config import LLMConfig, LLMConfigManager

logger = logging.getLogger("elfarena")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Elf D&D adventure: fight LLM-generated monsters.")
    parser.add_argument("--encounters", type=int, default=None, help="Stop after this many fights")
    parser.add_argument("--delay", type=float, default=DEFAULT_TURN_DELAY_SECONDS, help="Seconds between turns")
    parser.add_argument("--hint", default=DEFAULT_MONSTER_HINT, help="Description of the monsters to generate")
    parser.add_argument("--provider", choices=["ollama", "openai"], default=None, help="LLM provider")
    parser.add_argument("--model", default=None, help="LLM model name")
    parser.add_argument("--base-url", default=None, help="LLM server base URL")
    parser.add_argument("--name", default=None, help="Player name")
    return parser


def build_engine(args: argparse.Namespace) -> GameEngine:
    """Wire the player, the three agents and the engine from CLI arguments."""
    overrides = {key: value for key, value in (
        ("provider", args.provider),
        ("model", args.model),
        ("base_url", args.base_url),
    ) if value is not None}
    manager = LLMConfigManager(initial_config=LLMConfig(**overrides))

    def llm_for(temperature: float):
        return manager.with_temperature(temperature).get_llm()

    return GameEngine(
        player=Player(name=args.name),
        monster_agent=MonsterAgent(llm=llm_for(DEFAULT_MONSTER_AGENT_TEMPERATURE)),
        action_agent=MonsterActionAgent(llm=llm_for(DEFAULT_ACTION_AGENT_TEMPERATURE)),
        item_agent=ItemAgent(llm=llm_for(DEFAULT_ITEM_AGENT_TEMPERATURE)),
        turn_delay=args.delay,
    )


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(level=DEFAULT_LOG_LEVEL, format="[%(name)-19s - %(levelname)5s] %(message)s")
    # Keep HTTP client chatter out of the combat log
    logging.getLogger("httpx").setLevel(logging.WARNING)

    args = build_parser().parse_args(argv)
    logger.info("Starting the Elf D&D Adventure Game...")
    engine = build_engine(args)
    try:
        results = engine.run(max_encounters=args.encounters, hint=args.hint)
    except KeyboardInterrupt:
        logger.info("Game interrupted.")
        return 130

    victories = sum(1 for result in results if result.victory)
    logger.info(f"Encounters: {len(results)}, victories: {victories}, final level: {engine.player.level}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
