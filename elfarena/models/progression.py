"""Experience accumulation and the level-up curve."""

from typing import Optional

from elfarena.settings.game_config import DEFAULT_LEVEL_CURVE, LevelCurve


class ProgressionTrack:
    """Tracks level and experience toward the next level."""

    def __init__(self, level: int = 1, experience: float = 0, curve: Optional[LevelCurve] = None) -> None:
        self._curve = curve or DEFAULT_LEVEL_CURVE
        self.level = level
        self.experience = experience
        self.exp_to_next_level = self._curve.threshold(self.level)

    @property
    def remaining(self) -> float:
        """Experience still needed for the next level."""
        return self.exp_to_next_level - self.experience

    def gain_experience(self, amount: float) -> bool:
        """
        Add experience and process every level-up it pays for.

        Args:
            amount: Non-negative experience amount

        Returns:
            True if at least one level was gained
        """
        self.experience += amount
        leveled_up = False
        # Surplus carries over, so a large gain may cross several thresholds
        while self.experience >= self.exp_to_next_level:
            self._level_up()
            leveled_up = True
        return leveled_up

    def _level_up(self) -> None:
        self.experience -= self.exp_to_next_level
        self.level += 1
        self.exp_to_next_level = self._curve.threshold(self.level)

    def __str__(self) -> str:
        return f"{self.experience}/{self.exp_to_next_level}"
