"""Validation errors raised by the character model."""


class ElfArenaError(ValueError):
    """Base exception for invalid character data."""


class InvalidAbilityError(ElfArenaError):
    """Raised when an ability key is not part of the recognized set."""

    def __init__(self, ability: object):
        super().__init__(f"Invalid stat type: {ability}")
        self.ability = ability


class InvalidValueError(ElfArenaError):
    """Raised when an ability value is not a non-negative number."""

    def __init__(self, value: object):
        super().__init__(f"Stat value must be a non-negative number: {value!r}")
        self.value = value


class InvalidRangeError(ElfArenaError):
    """Raised when a bar maximum is not strictly positive."""

    def __init__(self, maximum: object):
        super().__init__(f"The maximum value of a bar must be greater than 0, got {maximum!r}")
        self.maximum = maximum
