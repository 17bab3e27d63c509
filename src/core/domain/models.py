"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict validation happens once, at construction; afterwards every model is
  frozen and can be passed around without defensive copies.
- Serialization for `--json` output comes for free (`model_dump`).

Note:
- These models describe *what* a password request and its result are, not
  *how* they are produced (see `core.services`).
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

from core.domain.character_class import CharacterClass
from core.domain.charsets import (
    DEFAULT_EXCLUDE_SIMILAR,
    DEFAULT_INCLUDE_NUMBERS,
    DEFAULT_INCLUDE_SYMBOLS,
    DEFAULT_LENGTH,
)


class StrengthLabel(str, Enum):
    """Discrete strength bucket derived from entropy."""

    WEAK = "weak"
    FAIR = "fair"
    GOOD = "good"
    STRONG = "strong"


class PasswordConfig(BaseModel):
    """Fully-resolved request for one password.

    Why frozen:
    - The pool is derived from this object; allowing mutation after the pool
      was built would make the two silently disagree.
    """

    model_config = ConfigDict(frozen=True)

    length: int = Field(
        default=DEFAULT_LENGTH,
        ge=0,
        description="Number of characters to draw.",
    )
    character_class: CharacterClass = Field(
        default_factory=CharacterClass.default,
        description="Letter case(s) contributing to the pool.",
    )
    include_numbers: bool = Field(
        default=DEFAULT_INCLUDE_NUMBERS,
        description="Append 0-9 to the pool.",
    )
    include_symbols: bool = Field(
        default=DEFAULT_INCLUDE_SYMBOLS,
        description="Append the fixed symbol set to the pool.",
    )
    exclude_similar: bool = Field(
        default=DEFAULT_EXCLUDE_SIMILAR,
        description="Drop visually similar glyphs from the base sets (not from extras).",
    )
    extra_characters: tuple[str, ...] = Field(
        default=(),
        description="Characters appended verbatim, duplicates included.",
    )

    @field_validator("extra_characters", mode="before")
    @classmethod
    def _split_extra_characters(cls, value: Any) -> Any:
        if value is None:
            return ()
        if isinstance(value, str):
            return tuple(value)
        return value

    @field_validator("extra_characters")
    @classmethod
    def _check_single_characters(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        for ch in value:
            if len(ch) != 1:
                raise ValueError(f"extra characters must be single characters, got {ch!r}")
        return value

    @classmethod
    def builder(cls) -> "PasswordConfigBuilder":
        return PasswordConfigBuilder()


class PasswordConfigBuilder:
    """Fluent construction of a `PasswordConfig`.

    Every setter returns the builder; `build()` validates once and returns the
    frozen model. Unset fields keep the model defaults.
    """

    def __init__(self) -> None:
        self._values: dict[str, Any] = {}

    def length(self, length: int) -> "PasswordConfigBuilder":
        self._values["length"] = length
        return self

    def character_class(self, character_class: CharacterClass) -> "PasswordConfigBuilder":
        self._values["character_class"] = character_class
        return self

    def include_numbers(self, yes: bool = True) -> "PasswordConfigBuilder":
        self._values["include_numbers"] = yes
        return self

    def include_symbols(self, yes: bool = True) -> "PasswordConfigBuilder":
        self._values["include_symbols"] = yes
        return self

    def exclude_similar(self, yes: bool = True) -> "PasswordConfigBuilder":
        self._values["exclude_similar"] = yes
        return self

    def extra_characters(self, chars: str | Iterable[str]) -> "PasswordConfigBuilder":
        self._values["extra_characters"] = chars if isinstance(chars, str) else tuple(chars)
        return self

    def build(self) -> PasswordConfig:
        return PasswordConfig(**self._values)


class EntropyEstimate(BaseModel):
    """Post-hoc strength of a generated string.

    Computed from the string alone, never from the configuration that
    produced it.
    """

    model_config = ConfigDict(frozen=True)

    bits: float = Field(
        ...,
        ge=0.0,
        description="Shannon estimate from observed character diversity.",
    )
    label: StrengthLabel = Field(
        ...,
        description="Bucket for `bits`.",
    )
    ratio: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Share of the display cap reached by `bits` (0..1).",
    )


class PasswordReport(BaseModel):
    """Result of one pipeline run."""

    model_config = ConfigDict(frozen=True)

    password: str = Field(
        ...,
        description="Generated password (empty for length 0 or an empty pool).",
    )
    pool_size: int = Field(
        ...,
        ge=0,
        description="Characters in the sampled pool, duplicates counted.",
    )
    estimate: EntropyEstimate
