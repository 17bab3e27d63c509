"""Random source contract for the sampler.

`random.Random`, `random.SystemRandom` and test doubles all satisfy it
structurally, without inheritance.
"""

from __future__ import annotations

from typing import Protocol


class RandomSource(Protocol):
    """Minimal contract for drawing pool indices.

    Design rules:
    - `randrange(n)` returns an integer uniformly distributed over `[0, n)`.
    - Successive calls are independent; the sampler never asks for more than
      one index per call.
    """

    def randrange(self, stop: int) -> int:
        ...
