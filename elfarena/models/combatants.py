"""Player and monster combatants with derived combat attributes."""

import logging
import math
from typing import Mapping, Optional

from elfarena.models.bar import ResourceBar
from elfarena.models.generation import MonsterRecord
from elfarena.models.items import DEFAULT_WEAPON, ItemRecord
from elfarena.models.outcomes import CombatantSnapshot
from elfarena.models.progression import ProgressionTrack
from elfarena.models.stats import Ability, AbilityKey, StatBlock
from elfarena.settings.game_config import DEFAULT_COMBAT_RULES, CombatRules, LevelCurve, PlayerDefaults

logger = logging.getLogger(__name__)


class Combatant:
    """Shared shape of everything that fights: stats, an HP bar and combat rules.

    Derived attributes are properties recomputed on every read, so changes to
    stats or equipment are visible immediately.
    """

    def __init__(self, name: str, stats: StatBlock, hp_bar: ResourceBar, rules: Optional[CombatRules] = None) -> None:
        self.name = name
        self.stats = stats
        self.hp_bar = hp_bar
        self.rules = rules or DEFAULT_COMBAT_RULES

    @property
    def attack_power(self) -> int:
        raise NotImplementedError

    @property
    def defense(self) -> float:
        raise NotImplementedError

    @property
    def hit_chance(self) -> float:
        return self.rules.base_hit_chance

    @property
    def evasion_rate(self) -> float:
        return self.rules.base_evasion_rate

    @property
    def critical_chance(self) -> float:
        return self.rules.base_critical_chance

    @property
    def is_defeated(self) -> bool:
        return self.hp_bar.is_empty()

    def take_damage(self, amount: float) -> bool:
        """
        Reduce HP by `amount`.

        Returns:
            True only for the hit that empties the bar, so defeat triggers once
        """
        was_standing = not self.hp_bar.is_empty()
        self.hp_bar.adjust(-amount)
        logger.debug(f"{self.name} took {amount} damage. Remaining HP: {self.hp_bar}")
        if was_standing and self.hp_bar.is_empty():
            logger.debug(f"{self.name} has fallen.")
            return True
        return False

    def heal(self, amount: float) -> None:
        self.hp_bar.adjust(amount)
        logger.debug(f"{self.name} healed for {amount} HP. Remaining HP: {self.hp_bar}")

    def snapshot(self) -> CombatantSnapshot:
        return CombatantSnapshot(
            name=self.name,
            hp=str(self.hp_bar),
            stats=self.stats.as_table(),
            attack_power=self.attack_power,
            defense=self.defense,
            hit_chance=self.hit_chance,
            evasion_rate=self.evasion_rate,
            critical_chance=self.critical_chance,
        )


class Monster(Combatant):
    """A monster built from generator output; lives for one encounter."""

    def __init__(self, record: MonsterRecord, rules: Optional[CombatRules] = None) -> None:
        super().__init__(
            name=record.name,
            stats=StatBlock(record.stats),
            hp_bar=ResourceBar(record.hp),
            rules=rules,
        )
        self.description = record.description
        self.base_exp = record.base_exp
        self.drop_chance = record.drop_chance
        self.special_abilities = list(record.special_abilities)
        # Abilities the generator actually provided (the rest are defaults)
        self.supplied_abilities = frozenset(record.stats)

    @property
    def attack_power(self) -> int:
        if Ability.STRENGTH not in self.supplied_abilities:
            return 5
        return max(1, self.stats.bonus(Ability.STRENGTH))

    @property
    def defense(self) -> float:
        # Raw CON at half weight, unlike the player's bonus-based defense
        if Ability.CONSTITUTION not in self.supplied_abilities:
            return 0
        return max(0, self.stats.get(Ability.CONSTITUTION) / 2)

    def __repr__(self) -> str:
        return f"Monster({self.name!r}, hp={self.hp_bar})"


class Player(Combatant):
    """The persistent player character."""

    def __init__(
        self,
        name: Optional[str] = None,
        stats: Optional[Mapping[AbilityKey, float]] = None,
        level: int = 1,
        experience: float = 0,
        gold: int = 0,
        inventory: Optional[list[ItemRecord]] = None,
        equipped_weapon: Optional[ItemRecord] = None,
        rules: Optional[CombatRules] = None,
        curve: Optional[LevelCurve] = None,
        defaults: Optional[PlayerDefaults] = None,
    ) -> None:
        """
        Create a player.

        Args:
            name: Player name (defaults to the configured player name)
            stats: Ability scores (defaults to the configured starting stats)
            level: Starting level
            experience: Experience toward the next level
            gold: Starting gold
            inventory: Carried items
            equipped_weapon: Weapon in hand (defaults to a worn dagger)
            rules: Combat rules
            curve: Leveling curve
            defaults: Player defaults (name, base HP, stats)
        """
        self.defaults = defaults or PlayerDefaults()
        self.progression = ProgressionTrack(level=level, experience=experience, curve=curve)
        self.stats = StatBlock(stats if stats is not None else self.defaults.stats)
        self.gold = gold
        self.inventory: list[ItemRecord] = list(inventory or [])
        if equipped_weapon is not None and not equipped_weapon.is_weapon:
            logger.warning(f"{equipped_weapon.name} is not a weapon; starting with {DEFAULT_WEAPON.name} instead.")
            equipped_weapon = None
        self.equipped_weapon: Optional[ItemRecord] = equipped_weapon or DEFAULT_WEAPON
        super().__init__(
            name=name or self.defaults.name,
            stats=self.stats,
            hp_bar=ResourceBar(self.max_hp),
            rules=rules,
        )
        self.mp_bar = ResourceBar(self.max_mp)
        logger.info(f"New player {self.name} (Elf Warrior, Lv.{self.level}) has been created.")

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def max_hp(self) -> int:
        return max(1, self.defaults.base_hp + self.level * 5 + self.stats.bonus(Ability.CONSTITUTION) * 2)

    @property
    def max_mp(self) -> int:
        return 10 + self.level * 2 + self.stats.bonus(Ability.INTELLIGENCE)

    @property
    def weapon_die(self) -> int:
        """Die size of the equipped weapon, 0 when unarmed."""
        if self.equipped_weapon is None:
            return 0
        return self.equipped_weapon.damage_die

    @property
    def attack_power(self) -> int:
        return math.floor(max(1, 5 + self.stats.bonus(Ability.STRENGTH) + self.weapon_die / 2 + 1))

    @property
    def defense(self) -> float:
        return 2 + self.stats.bonus(Ability.DEXTERITY)

    @property
    def hit_chance(self) -> float:
        return self.rules.base_hit_chance + self.stats.bonus(Ability.DEXTERITY) * 2

    @property
    def evasion_rate(self) -> float:
        return self.rules.base_evasion_rate + self.stats.bonus(Ability.DEXTERITY)

    @property
    def critical_chance(self) -> float:
        return self.rules.base_critical_chance + self.stats.bonus(Ability.DEXTERITY) * 0.5

    def gain_experience(self, amount: float) -> bool:
        """Add experience; each level-up raises and refills HP and MP."""
        leveled_up = self.progression.gain_experience(amount)
        logger.info(f"{self.name} gained {amount} experience. Current EXP: {self.progression}")
        if leveled_up:
            self._apply_level_up()
        return leveled_up

    def _apply_level_up(self) -> None:
        logger.info(f"Congratulations! {self.name} has reached Level {self.level}!")
        self.hp_bar.set_maximum(self.max_hp)
        self.hp_bar.refill()
        self.mp_bar.set_maximum(self.max_mp)
        self.mp_bar.refill()

    def restore(self) -> None:
        """Refill HP and MP."""
        self.hp_bar.refill()
        self.mp_bar.refill()

    def equip_weapon(self, weapon: ItemRecord) -> bool:
        """
        Equip a weapon, returning the previous one to the inventory.

        Returns:
            False if the item is not a weapon
        """
        if not weapon.is_weapon:
            logger.warning(f"{weapon.name} is not a weapon and cannot be equipped.")
            return False

        if self.equipped_weapon is not None:
            self.inventory.append(self.equipped_weapon)
            logger.info(f"Returning {self.equipped_weapon.name} to inventory.")

        self.equipped_weapon = weapon
        if weapon in self.inventory:
            self.inventory.remove(weapon)
        logger.info(f"{self.name} equipped {weapon.name}!")
        return True

    def snapshot(self) -> CombatantSnapshot:
        base = super().snapshot()
        return base.model_copy(
            update={
                "mp": str(self.mp_bar),
                "level": self.level,
                "experience": str(self.progression),
                "gold": self.gold,
                "weapon": (
                    f"{self.equipped_weapon.name} ({self.equipped_weapon.damage})" if self.equipped_weapon else None
                ),
            }
        )

    def __repr__(self) -> str:
        return f"Player({self.name!r}, level={self.level}, hp={self.hp_bar})"
