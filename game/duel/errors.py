"""
Exceptions raised by the duel command surface
"""


class DuelError(Exception):
    """Base class for duel simulation errors."""


class InvalidHeroError(DuelError, IndexError):
    """Raised when a hero index does not name an existing hero."""

    def __init__(self, index, n_heroes: int) -> None:
        self.index = index
        self.n_heroes = n_heroes
        super().__init__(f"hero index {index!r} out of range (have {n_heroes} heroes)")


class ConfigurationError(DuelError, ValueError):
    """Raised when a configure patch names an unknown field or an out-of-range value."""
