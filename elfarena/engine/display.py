"""Display sinks that render outcome records and snapshots."""

import logging
from typing import Protocol

from elfarena.models.generation import MonsterAction, MonsterActionType
from elfarena.models.outcomes import AttackOutcome, CombatantSnapshot, EncounterResult

logger = logging.getLogger(__name__)


class DisplaySink(Protocol):
    """Receives structured records from the game engine; formatting is up to the sink."""

    def show_message(self, text: str) -> None: ...

    def show_outcome(self, outcome: AttackOutcome) -> None: ...

    def show_action(self, monster_name: str, action: MonsterAction) -> None: ...

    def show_snapshot(self, snapshot: CombatantSnapshot) -> None: ...

    def show_stats(self, snapshot: CombatantSnapshot) -> None: ...

    def show_result(self, result: EncounterResult) -> None: ...


class LoggingDisplay:
    """Writes everything through the logging module."""

    def __init__(self, log: logging.Logger = logger) -> None:
        self._log = log

    def show_message(self, text: str) -> None:
        self._log.info(text)

    def show_outcome(self, outcome: AttackOutcome) -> None:
        if not outcome.hit:
            self._log.info(f"{outcome.attacker}'s attack on {outcome.defender} missed!")
            return
        if outcome.critical:
            self._log.info("Critical Hit!")
        if outcome.evaded:
            self._log.info(f"{outcome.defender} dodged the attack from {outcome.attacker}!")
            return
        self._log.info(f"{outcome.attacker} dealt {outcome.damage} damage to {outcome.defender}.")
        if outcome.defeated:
            self._log.info(f"{outcome.defender} has been defeated!")

    def show_action(self, monster_name: str, action: MonsterAction) -> None:
        if action.description:
            self._log.info(action.description)
        if action.action_type == MonsterActionType.DEFEND:
            self._log.info(f"{monster_name} takes a defensive stance!")

    def show_snapshot(self, snapshot: CombatantSnapshot) -> None:
        self._log.info(f"{snapshot.name} HP: {snapshot.hp}")
        if snapshot.mp is not None:
            self._log.info(f"MP: {snapshot.mp}")
        if snapshot.experience is not None:
            self._log.info(f"Lv.{snapshot.level} EXP: {snapshot.experience}")
        if snapshot.gold is not None:
            self._log.info(f"Gold: {snapshot.gold}")

    def show_stats(self, snapshot: CombatantSnapshot) -> None:
        """Full stat table, used when a player is created or levels up."""
        self._log.info("--- Stats ---")
        for name, (value, bonus) in snapshot.stats.items():
            self._log.info(f"{name}: {value} ({bonus:+d})")
        self._log.info("-------------")
        self._log.info(f"Attack Power: {snapshot.attack_power}, Defense: {snapshot.defense}")
        self._log.info(
            f"Hit: {snapshot.hit_chance:.1f}%, Evasion: {snapshot.evasion_rate:.1f}%, "
            f"Critical: {snapshot.critical_chance:.1f}%"
        )
        if snapshot.weapon:
            self._log.info(f"Equipped Weapon: {snapshot.weapon}")

    def show_result(self, result: EncounterResult) -> None:
        if not result.victory:
            self._log.error(f"Fell in battle against {result.monster_name} after {result.turns} turns.")
            return
        self._log.info(
            f"Victory over {result.monster_name} in {result.turns} turns: "
            f"+{result.experience_gained} EXP, +{result.gold_gained} gold"
        )
        if result.item_name:
            verb = "equipped" if result.item_equipped else "stored"
            self._log.info(f"Loot: {result.item_name} ({verb})")
