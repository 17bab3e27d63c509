"""Letter-case selection for the character pool.

This module centralizes which letter cases may contribute to a pool. Keeping
it in the domain layer lets the CLI (mode letters) and the pool builder share
a single source of truth.
"""

from __future__ import annotations

from enum import Enum


class CharacterClass(str, Enum):
    """Which letter case(s) contribute to the pool."""

    LOWER = "lower"
    UPPER = "upper"
    LOWER_AND_UPPER = "lower_and_upper"

    @classmethod
    def default(cls) -> "CharacterClass":
        """Return the class used when no letter case was requested."""

        return cls.LOWER_AND_UPPER

    @classmethod
    def from_flags(cls, *, upper: bool, lower: bool) -> "CharacterClass":
        """Derive a class from independent upper/lower switches.

        Neither switch set falls back to `default()`: a pool without any
        letters is only reachable by disabling numbers and symbols too.
        """

        if upper and lower:
            return cls.LOWER_AND_UPPER
        if upper:
            return cls.UPPER
        if lower:
            return cls.LOWER
        return cls.default()

    @property
    def includes_lower(self) -> bool:
        return self in (CharacterClass.LOWER, CharacterClass.LOWER_AND_UPPER)

    @property
    def includes_upper(self) -> bool:
        return self in (CharacterClass.UPPER, CharacterClass.LOWER_AND_UPPER)
