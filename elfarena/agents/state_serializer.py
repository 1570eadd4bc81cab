"""Combat state serialization for agent consumption."""

from typing import Any

from elfarena.models.combatants import Monster, Player


class StateSerializer:
    """Serializes combatants to the subset of state a generator needs."""

    @staticmethod
    def serialize_player(player: Player) -> dict[str, Any]:
        """
        Serialize the full player snapshot (for debugging/logging).

        Args:
            player: Player to serialize

        Returns:
            Snapshot as a JSON-compatible dict
        """
        return player.snapshot().model_dump(mode="json")

    @staticmethod
    def extract_combat_context(monster: Monster, player: Player) -> dict[str, Any]:
        """
        Extract context for the monster action agent (principle of least privilege).

        The action agent only needs names, HP strings and the monster's
        special abilities.

        Args:
            monster: Acting monster
            player: Player being fought

        Returns:
            Context dict with prompt variables
        """
        return {
            "monster_name": monster.name,
            "monster_hp": str(monster.hp_bar),
            "player_name": player.name,
            "player_hp": str(player.hp_bar),
            "special_abilities": ", ".join(monster.special_abilities) or "none",
        }
