"""ANSI colouring of table cells."""

from __future__ import annotations

import sys
from dataclasses import dataclass

GREEN = "\033[0;32m"
YELLOW = "\033[1;33m"
RED = "\033[0;31m"
RESET = "\033[0m"


def _pick(value: float, green_max: float, yellow_max: float) -> str:
    if value <= green_max:
        return GREEN
    if value <= yellow_max:
        return YELLOW
    return RED


@dataclass(frozen=True)
class ColorConfig:
    """Whether ANSI colours are written."""

    enabled: bool

    def colorize_load(self, load_percent: int) -> str:
        """Format a load as "%02d%%": green up to 60, yellow up to 80, red above."""
        formatted = f"{load_percent:02d}%"
        if not self.enabled:
            return formatted
        return _pick(load_percent, 60, 80) + formatted + RESET

    def colorize_green(self, s: str) -> str:
        """Wrap s in green when colours are enabled."""
        return GREEN + s + RESET if self.enabled else s

    def colorize_ratio(self, s: str, numerator: float, denominator: float) -> str:
        """Colour s by numerator/denominator: green up to 5, yellow up to 10, red above.

        Nothing is coloured when the ratio does not exceed 1.
        """
        if not self.enabled or denominator <= 0 or numerator <= denominator:
            return s
        return _pick(numerator / denominator, 5, 10) + s + RESET

    def colorize_overcommit_pct(self, s: str, numerator: float, denominator: float) -> str:
        """Colour s by how far numerator exceeds denominator, in percent.

        Green up to 30%, yellow up to 50%, red above.
        """
        if not self.enabled or denominator <= 0 or numerator <= denominator:
            return s
        pct = (numerator - denominator) / denominator * 100
        return _pick(pct, 30, 50) + s + RESET


def detect_color_support() -> bool:
    """Return True when standard output is a terminal."""
    stream = sys.stdout
    if stream is None:
        return False
    try:
        return bool(stream.isatty())
    except (AttributeError, ValueError, OSError):
        return False


def new_color_config(force_color: bool | None) -> ColorConfig:
    """Use force_color when given, otherwise detect terminal support."""
    if force_color is not None:
        return ColorConfig(enabled=force_color)
    return ColorConfig(enabled=detect_color_support())