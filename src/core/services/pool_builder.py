"""Character pool assembly.

The construction order is fixed; the similar-character exclusion runs before
extras are appended so that user-supplied extras are never filtered.
"""

from __future__ import annotations

import logging

from core.domain.charsets import (
    LETTERS_LOWER,
    LETTERS_UPPER,
    NUMBERS,
    SIMILAR_CHARACTERS,
    SYMBOLS,
)
from core.domain.models import PasswordConfig

logger = logging.getLogger(__name__)


def build_pool(config: PasswordConfig) -> str:
    """Return the ordered pool of characters eligible for sampling.

    The pool may be empty, and may hold duplicates when extras repeat a base
    character; duplicates weight the sampling and are kept on purpose.
    """

    parts: list[str] = []
    if config.character_class.includes_lower:
        parts.append(LETTERS_LOWER)
    if config.character_class.includes_upper:
        parts.append(LETTERS_UPPER)
    if config.include_numbers:
        parts.append(NUMBERS)
    if config.include_symbols:
        parts.append(SYMBOLS)

    pool = "".join(parts)
    if config.exclude_similar:
        pool = "".join(ch for ch in pool if ch not in SIMILAR_CHARACTERS)

    pool += "".join(config.extra_characters)

    logger.debug(
        "Built pool: %d characters (%d distinct), class=%s numbers=%s symbols=%s "
        "exclude_similar=%s extras=%d",
        len(pool),
        len(set(pool)),
        config.character_class.value,
        config.include_numbers,
        config.include_symbols,
        config.exclude_similar,
        len(config.extra_characters),
    )
    return pool
