"""Post-hoc strength estimation.

Entropy is measured from the realized string's distinct characters, not from
the size of the pool it was drawn from. A 16-character password that happens
to repeat symbols scores lower than the pool would suggest; that is the
intended, conservative reading.
"""

from __future__ import annotations

import math

from core.domain.models import EntropyEstimate, StrengthLabel

# Display cap for the strength bar (bits).
ENTROPY_CAP_BITS = 90.0

# Inclusive lower bounds, highest first.
_THRESHOLDS: tuple[tuple[float, StrengthLabel], ...] = (
    (60.0, StrengthLabel.STRONG),
    (36.0, StrengthLabel.GOOD),
    (28.0, StrengthLabel.FAIR),
)


def entropy_bits(password: str) -> float:
    """Shannon estimate assuming independent uniform choice per position."""

    distinct = len(set(password))
    if not password or distinct <= 1:
        return 0.0
    return len(password) * math.log2(distinct)


def strength_label(bits: float) -> StrengthLabel:
    """<28 weak, [28, 36) fair, [36, 60) good, >=60 strong."""

    for lower_bound, label in _THRESHOLDS:
        if bits >= lower_bound:
            return label
    return StrengthLabel.WEAK


def strength_ratio(bits: float, cap: float = ENTROPY_CAP_BITS) -> float:
    """Share of `cap` reached by `bits`, clamped to [0, 1]."""

    return min(max(bits / cap, 0.0), 1.0)


def estimate(password: str) -> EntropyEstimate:
    bits = entropy_bits(password)
    return EntropyEstimate(bits=bits, label=strength_label(bits), ratio=strength_ratio(bits))
