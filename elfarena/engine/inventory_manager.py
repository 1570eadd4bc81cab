"""Inventory management system."""

import logging

from elfarena.models.combatants import Player
from elfarena.models.items import ItemRecord

logger = logging.getLogger(__name__)


class InventoryManager:
    """Handles loot pickup and weapon upgrades."""

    @staticmethod
    def is_upgrade(player: Player, item: ItemRecord) -> bool:
        """A weapon is an upgrade when nothing is equipped or its die is larger."""
        if not item.is_weapon:
            return False
        if player.equipped_weapon is None:
            return True
        return item.damage_die > player.equipped_weapon.damage_die

    @staticmethod
    def acquire(player: Player, item: ItemRecord) -> bool:
        """
        Give a looted item to the player.

        Args:
            player: Receiving player
            item: Looted item

        Returns:
            True if the item was equipped, False if it went to the inventory
        """
        if InventoryManager.is_upgrade(player, item):
            return player.equip_weapon(item)

        player.inventory.append(item)
        logger.info(f"{player.name} acquired {item.name}! (Inventory: {len(player.inventory)} items)")
        return False
