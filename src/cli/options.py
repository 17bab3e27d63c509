"""Mapping of CLI flags onto a `PasswordConfig`.

Mode letters:
- `u` uppercase, `l` lowercase (neither: both)
- `n` numbers, `s` symbols
- `e` exclude similar-looking characters
"""

from __future__ import annotations

import logging

from core.domain.character_class import CharacterClass
from core.domain.models import PasswordConfig

logger = logging.getLogger(__name__)

MODE_LETTERS = "ulnse"


def config_from_mode(*, length: int, mode: str, extra: str = "") -> PasswordConfig:
    """Build a config from a length, mode letters and extra characters.

    Raises `pydantic.ValidationError` for a negative length.
    """

    unknown = sorted({ch for ch in mode if ch not in MODE_LETTERS})
    if unknown:
        logger.warning("Ignoring unknown mode letters: %s", "".join(unknown))

    return (
        PasswordConfig.builder()
        .length(length)
        .character_class(CharacterClass.from_flags(upper="u" in mode, lower="l" in mode))
        .include_numbers("n" in mode)
        .include_symbols("s" in mode)
        .exclude_similar("e" in mode)
        .extra_characters(extra)
        .build()
    )
