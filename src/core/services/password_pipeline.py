"""Password generation orchestration.

The CLI delegates the whole configuration -> pool -> password -> estimate flow
to this module, which keeps side effects (printing, clipboard) out of the core
and makes the pipeline reusable from tests or other entry points.
"""

from __future__ import annotations

import logging

from core.domain.models import PasswordConfig, PasswordReport
from core.interfaces.random_source import RandomSource
from core.services.pool_builder import build_pool
from core.services.sampler import generate
from core.services.strength import estimate

logger = logging.getLogger(__name__)


def generate_password(config: PasswordConfig, rng: RandomSource | None = None) -> PasswordReport:
    """Run the full pipeline for one password."""

    pool = build_pool(config)
    password = generate(pool, config.length, rng)
    report = PasswordReport(password=password, pool_size=len(pool), estimate=estimate(password))
    logger.debug(
        "Estimate: %.2f bits (%s)", report.estimate.bits, report.estimate.label.value
    )
    return report
