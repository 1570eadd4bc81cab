"""Main game engine: the encounter loop and victory rewards."""

import logging
import random
import time
from typing import TYPE_CHECKING, Callable, Optional

from elfarena.config import DEFAULT_MONSTER_HINT, DEFAULT_TURN_DELAY_SECONDS
from elfarena.engine.combat import CombatResolver
from elfarena.engine.dice import DiceRoller
from elfarena.engine.display import DisplaySink, LoggingDisplay
from elfarena.engine.inventory_manager import InventoryManager
from elfarena.models.combatants import Monster, Player
from elfarena.models.outcomes import EncounterResult

if TYPE_CHECKING:
    from elfarena.agents.action_agent import MonsterActionAgent
    from elfarena.agents.item_agent import ItemAgent
    from elfarena.agents.monster_agent import MonsterAgent

logger = logging.getLogger(__name__)

MIN_GOLD_REWARD = 5
MAX_GOLD_REWARD = 15


class GameEngine:
    """Runs encounters between the persistent player and generated monsters."""

    def __init__(
        self,
        player: Player,
        monster_agent: "MonsterAgent",
        action_agent: "MonsterActionAgent",
        item_agent: Optional["ItemAgent"] = None,
        resolver: Optional[CombatResolver] = None,
        display: Optional[DisplaySink] = None,
        rng: Optional[random.Random] = None,
        turn_delay: float = DEFAULT_TURN_DELAY_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """
        Initialize game engine.

        Args:
            player: The player character (persists across encounters)
            monster_agent: Generates the monster for each encounter
            action_agent: Chooses the monster's action each turn
            item_agent: Generates dropped items (no loot if omitted)
            resolver: Combat resolver (shares `rng` if omitted)
            display: Sink for outcome records and snapshots
            rng: Random source for rewards, drops and combat
            turn_delay: Pause between turns in seconds
            sleep: Function used to pause
        """
        self._player = player
        self._monster_agent = monster_agent
        self._action_agent = action_agent
        self._item_agent = item_agent
        self._rng = rng or random.Random()
        self._resolver = resolver or CombatResolver(rules=player.rules, rng=self._rng)
        self._display = display or LoggingDisplay()
        self._turn_delay = turn_delay
        self._sleep = sleep
        self._encounter_count = 0

    @property
    def player(self) -> Player:
        return self._player

    @property
    def encounter_count(self) -> int:
        return self._encounter_count

    def run(self, max_encounters: Optional[int] = None, hint: str = DEFAULT_MONSTER_HINT) -> list[EncounterResult]:
        """
        Fight encounters until the player falls or `max_encounters` is reached.

        Returns:
            Results of every encounter played
        """
        results: list[EncounterResult] = []
        self._display.show_message("Brave elf, are you ready for a relentless fight?")
        self._display.show_stats(self._player.snapshot())
        while max_encounters is None or len(results) < max_encounters:
            result = self.run_encounter(hint)
            results.append(result)
            if not result.victory:
                self._display.show_message(f"{self._player.name} has fallen in battle! Game Over.")
                break
            self._pause(2)
        return results

    def run_encounter(self, hint: str = DEFAULT_MONSTER_HINT) -> EncounterResult:
        """Generate a monster and fight it to the end."""
        self._encounter_count += 1
        self._display.show_message(f"--- New Combat #{self._encounter_count} ---")

        monster = self._monster_agent.generate_monster(self._player.level, hint, rules=self._player.rules)
        self._display.show_message(f"A battle with {monster.name} (HP: {monster.hp_bar}) begins!")
        self._display.show_message(f"Description: {monster.description}")

        turns = self._fight(monster)

        if self._player.is_defeated:
            result = EncounterResult(monster_name=monster.name, victory=False, turns=turns)
        else:
            result = self._grant_rewards(monster, turns)
        self._display.show_result(result)
        return result

    def _fight(self, monster: Monster) -> int:
        """Alternate player and monster turns until one side is defeated."""
        turn = 0
        while not self._player.is_defeated and not monster.is_defeated:
            turn += 1
            self._display.show_message(f"--- Turn {turn} ---")

            self._display.show_outcome(self._resolver.resolve_attack(self._player, monster))
            if monster.is_defeated:
                break

            action = self._action_agent.choose_action(monster, self._player)
            self._display.show_action(monster.name, action)
            outcome = self._resolver.resolve_monster_action(monster, self._player, action)
            if outcome is not None:
                self._display.show_outcome(outcome)

            self._display.show_snapshot(self._player.snapshot())
            if self._player.is_defeated:
                break
            self._pause()
        return turn

    def _grant_rewards(self, monster: Monster, turns: int) -> EncounterResult:
        """Experience, gold, full restore and a possible item drop."""
        leveled_up = self._player.gain_experience(monster.base_exp)
        gold = self._rng.randint(MIN_GOLD_REWARD, MAX_GOLD_REWARD)
        self._player.gold += gold

        self._player.restore()
        self._display.show_message(f"Victory! {self._player.name}'s health and mana are restored.")

        item_name = None
        item_equipped = False
        if DiceRoller.odds(monster.drop_chance, self._rng):
            self._display.show_message(f"{monster.name} dropped an item!")
            item = self._item_agent.generate_item() if self._item_agent else None
            if item is not None:
                item_name = item.name
                item_equipped = InventoryManager.acquire(self._player, item)
        else:
            self._display.show_message(f"{monster.name} did not drop anything.")

        if leveled_up or item_equipped:
            self._display.show_stats(self._player.snapshot())
        self._display.show_snapshot(self._player.snapshot())

        return EncounterResult(
            monster_name=monster.name,
            victory=True,
            turns=turns,
            experience_gained=monster.base_exp,
            gold_gained=gold,
            leveled_up=leveled_up,
            item_name=item_name,
            item_equipped=item_equipped,
        )

    def _pause(self, multiplier: float = 1) -> None:
        if self._turn_delay > 0:
            self._sleep(self._turn_delay * multiplier)
