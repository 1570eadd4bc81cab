"""Combat system for turn-based combat."""

import logging
import math
import random
from typing import Optional

from elfarena.models.combatants import Combatant, Monster, Player
from elfarena.models.generation import MonsterAction, MonsterActionType
from elfarena.models.outcomes import AttackOutcome
from elfarena.settings.game_config import DEFAULT_COMBAT_RULES, CombatRules

logger = logging.getLogger(__name__)


class CombatResolver:
    """Resolves a single directed attack between two combatants.

    Each stage draws independently from `rng` in a fixed order: hit, critical,
    evasion. The evasion draw happens after damage is computed and overrides it.
    """

    def __init__(self, rules: Optional[CombatRules] = None, rng: Optional[random.Random] = None) -> None:
        """
        Initialize the resolver.

        Args:
            rules: Combat rules (critical multiplier)
            rng: Source of uniform draws in [0, 1); anything with a `random()` method
        """
        self._rules = rules or DEFAULT_COMBAT_RULES
        self._rng = rng or random.Random()

    @property
    def rules(self) -> CombatRules:
        return self._rules

    def resolve_attack(self, attacker: Combatant, defender: Combatant) -> AttackOutcome:
        """
        Resolve one attack from `attacker` against `defender` and apply damage.

        Args:
            attacker: Attacking combatant
            defender: Defending combatant

        Returns:
            AttackOutcome describing hit, critical, evasion, damage and defeat
        """
        names = {"attacker": attacker.name, "defender": defender.name}

        if self._rng.random() >= attacker.hit_chance / 100:
            logger.debug(f"{attacker.name}'s attack on {defender.name} missed")
            return AttackOutcome(**names, hit=False)

        critical = self._rng.random() < attacker.critical_chance / 100

        damage = attacker.attack_power
        if critical:
            damage = math.floor(damage * self._rules.critical_multiplier)

        if self._rng.random() < defender.evasion_rate / 100:
            logger.debug(f"{defender.name} evaded {attacker.name}'s attack")
            return AttackOutcome(**names, hit=True, critical=critical, evaded=True, damage=0)

        final_damage = max(1, damage - math.floor(defender.defense))
        defeated = defender.take_damage(final_damage)
        logger.debug(f"{attacker.name} dealt {final_damage} damage to {defender.name} (critical={critical})")
        return AttackOutcome(**names, hit=True, critical=critical, damage=final_damage, defeated=defeated)

    def resolve_monster_action(
        self, monster: Monster, player: Player, action: MonsterAction
    ) -> Optional[AttackOutcome]:
        """
        Execute a monster's chosen action.

        Only attacks have mechanical effect; defend and other actions are
        descriptive and yield no outcome.
        """
        if action.action_type == MonsterActionType.ATTACK:
            return self.resolve_attack(monster, player)
        logger.debug(f"{monster.name} chose a non-attack action: {action.action_type.value}")
        return None
