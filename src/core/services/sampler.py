"""Uniform sampling over a character pool."""

from __future__ import annotations

import logging
import random

from core.interfaces.random_source import RandomSource

logger = logging.getLogger(__name__)


def default_random_source() -> RandomSource:
    """OS-backed generator (`os.urandom`); no seeding, no shared state."""

    return random.SystemRandom()


def generate(pool: str, length: int, rng: RandomSource | None = None) -> str:
    """Draw `length` independent, uniformly chosen characters from `pool`.

    Repetition across positions is allowed. A zero length or an empty pool
    yields `""` without consulting the random source.
    """

    if length <= 0 or not pool:
        logger.debug("Nothing to sample (length=%d, pool=%d)", length, len(pool))
        return ""

    if rng is None:
        rng = default_random_source()
    width = len(pool)
    assert width > 0, "invalid uniform range"

    password = "".join(pool[rng.randrange(width)] for _ in range(length))
    logger.debug("Sampled %d characters from a pool of %d", length, width)
    return password
