"""Clamped current/maximum counter used for HP and MP."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from elfarena.exceptions import InvalidRangeError


class BarSnapshot(BaseModel):
    """Serialized form of a ResourceBar."""

    model_config = ConfigDict(frozen=True)  # Immutable model

    maximum: Union[int, float] = Field(gt=0, description="Maximum value")
    position: Union[int, float] = Field(ge=0, description="Current value")


class ResourceBar:
    """Keeps a position within [0, maximum]."""

    def __init__(self, maximum: float, initial_position: Optional[float] = None) -> None:
        """
        Create a bar.

        Args:
            maximum: Maximum value, must be greater than 0
            initial_position: Starting value (defaults to maximum), clamped into range
        """
        if not maximum > 0:
            raise InvalidRangeError(maximum)
        self._max = maximum
        if initial_position is None:
            initial_position = maximum
        self._position = self._clamp(initial_position)

    @classmethod
    def from_snapshot(cls, snapshot: BarSnapshot) -> "ResourceBar":
        return cls(snapshot.maximum, snapshot.position)

    def _clamp(self, position: float) -> float:
        return min(max(0, position), self._max)

    @property
    def value(self) -> float:
        """Current position."""
        return self._position

    @value.setter
    def value(self, new_position: float) -> None:
        self._position = self._clamp(new_position)

    @property
    def maximum(self) -> float:
        return self._max

    @maximum.setter
    def maximum(self, new_max: float) -> None:
        self.set_maximum(new_max)

    def adjust(self, delta: float) -> float:
        """Move the position by `delta`, clamped. Returns the new position."""
        self._position = self._clamp(self._position + delta)
        return self._position

    def set_maximum(self, new_max: float) -> None:
        """Reassign the maximum; a position above it is pulled down."""
        if not new_max > 0:
            raise InvalidRangeError(new_max)
        self._max = new_max
        if self._position > self._max:
            self._position = self._max

    def refill(self) -> None:
        self._position = self._max

    def is_full(self) -> bool:
        return self._position >= self._max

    def is_empty(self) -> bool:
        return self._position <= 0

    def percentage(self) -> float:
        return self._position / self._max * 100

    def snapshot(self) -> BarSnapshot:
        return BarSnapshot(maximum=self._max, position=self._position)

    def __str__(self) -> str:
        return f"{self._position}/{self._max}"

    def __repr__(self) -> str:
        return f"ResourceBar({self._max}, {self._position})"
