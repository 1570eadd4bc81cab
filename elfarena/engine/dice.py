"""Dice rolling system for DnD mechanics."""

import random
import re
from typing import Optional

DICE_NOTATION = re.compile(r"^\s*(\d*)\s*[dD]\s*(\d+)\s*$")


class DiceRoller:
    """Handles DnD dice mechanics."""

    @staticmethod
    def roll(dice_type: int, modifier: int = 0, count: int = 1, rng: Optional[random.Random] = None) -> dict[str, int]:
        """
        Roll dice with modifier.

        Args:
            dice_type: Type of dice (e.g., 20 for d20, 6 for d6)
            modifier: Modifier to add to result
            count: Number of dice to roll
            rng: Random source (module-level random if omitted)

        Returns:
            Dictionary with 'total', 'rolls', and 'modifier' keys
        """
        rng = rng or random
        rolls = [rng.randint(1, dice_type) for _ in range(count)]
        total = sum(rolls) + modifier
        return {
            "total": total,
            "rolls": rolls,
            "modifier": modifier,
            "dice_type": dice_type,
            "count": count,
        }

    @staticmethod
    def parse_notation(notation: str) -> tuple[int, int]:
        """
        Parse "NdM" notation.

        Args:
            notation: Dice string such as "1d6" or "d8" (count defaults to 1)

        Returns:
            Tuple of (count, sides)

        Raises:
            ValueError: If the notation is malformed or has zero sides
        """
        if not isinstance(notation, str):
            raise ValueError(f"Dice notation must be a string, got {type(notation)}")
        match = DICE_NOTATION.match(notation)
        if not match:
            raise ValueError(f"Invalid dice notation: {notation!r}")
        count = int(match.group(1)) if match.group(1) else 1
        sides = int(match.group(2))
        if count < 1 or sides < 1:
            raise ValueError(f"Invalid dice notation: {notation!r}")
        return count, sides

    @staticmethod
    def die_sides(notation: Optional[str]) -> int:
        """Sides of the die in `notation`, 0 when there is none."""
        if not notation:
            return 0
        return DiceRoller.parse_notation(notation)[1]

    @staticmethod
    def roll_notation(notation: str, rng: Optional[random.Random] = None) -> dict[str, int]:
        """Roll dice given in "NdM" notation."""
        count, sides = DiceRoller.parse_notation(notation)
        return DiceRoller.roll(sides, 0, count, rng=rng)

    @staticmethod
    def roll_ability_score(rng: Optional[random.Random] = None) -> int:
        """Roll 4d6 and drop the lowest die."""
        rolls = sorted(DiceRoller.roll(6, count=4, rng=rng)["rolls"])
        return sum(rolls[1:])

    @staticmethod
    def odds(probability: float, rng: Optional[random.Random] = None) -> bool:
        """True with the given probability (uniform draw in [0, 1))."""
        return (rng or random).random() < probability
