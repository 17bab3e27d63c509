"""CLI UI components (Rich).

Why separate components:
- Keeps command logic apart from visual details.
- The strength bar is reused by the generator and by `doctor`.
"""

from __future__ import annotations

import math

from rich.table import Table
from rich.text import Text

from core.domain.models import EntropyEstimate, StrengthLabel

FILLED_BLOCK = "█"
EMPTY_BLOCK = "░"

STRENGTH_STYLES: dict[StrengthLabel, str] = {
    StrengthLabel.WEAK: "red",
    StrengthLabel.FAIR: "yellow",
    StrengthLabel.GOOD: "cyan",
    StrengthLabel.STRONG: "green",
}

STRENGTH_EMOJI: dict[StrengthLabel, str] = {
    StrengthLabel.WEAK: "😬",
    StrengthLabel.FAIR: "😐",
    StrengthLabel.GOOD: "🙂",
    StrengthLabel.STRONG: "😎",
}


def render_strength_bar(estimate: EntropyEstimate, *, width: int = 24, color: bool = True) -> Text:
    """Render `[████░░░░] 69.5% strong 😎` for an estimate.

    Filled cells are `ratio * width` rounded half up; the percentage is the
    unrounded ratio.
    """

    filled = min(width, math.floor(estimate.ratio * width + 0.5))
    bar = FILLED_BLOCK * filled + EMPTY_BLOCK * (width - filled)
    style = STRENGTH_STYLES[estimate.label] if color else ""

    return Text.assemble(
        (f"[{bar}] ", style),
        f"{estimate.ratio * 100:>5.1f}% {estimate.label.value} {STRENGTH_EMOJI[estimate.label]}",
    )


def build_settings_table(title: str) -> Table:
    table = Table(title=title)
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")
    return table
