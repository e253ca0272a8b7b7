"""Theme system for the Castscore CLI.

Provides centralized colors for severities, star ratings and improvement
potential, with dark/light mode support.

Usage:
    from castscore.ui import get_theme

    theme = get_theme()
    console.print(theme.stars_text(result.stars))
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Literal

from castscore.scoring.models import Severity


class ThemeMode(str, Enum):
    """Available theme modes."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


@dataclass(frozen=True)
class Theme:
    """Color theme for terminal output.

    All colors are rich-compatible color names.
    """

    mode: str

    # Status colors
    success: str
    error: str
    warning: str
    info: str
    muted: str

    # Rating colors
    rating_low: str  # 1-2 stars
    rating_mid: str  # 3 stars
    rating_high: str  # 4-5 stars

    table_header: str

    def success_text(self, text: str) -> str:
        """Format text with success color and checkmark."""
        return f"[{self.success}]✓[/{self.success}] {text}"

    def error_text(self, text: str) -> str:
        """Format text with error color and X mark."""
        return f"[{self.error}]✗[/{self.error}] {text}"

    def muted_text(self, text: str) -> str:
        return f"[{self.muted}]{text}[/{self.muted}]"

    def severity_color(self, severity: Severity) -> str:
        if severity == Severity.CRITICAL:
            return self.error
        if severity == Severity.WARNING:
            return self.warning
        return self.info

    def stars_color(self, stars: int) -> str:
        if stars <= 2:
            return self.rating_low
        if stars == 3:
            return self.rating_mid
        return self.rating_high

    def stars_text(self, stars: int) -> str:
        """Render a rating as filled and empty stars."""
        color = self.stars_color(stars)
        return f"[{color}]{'★' * stars}{'☆' * (5 - stars)}[/{color}]"

    def potential_text(self, potential: int) -> str:
        """Highlight large improvement potentials."""
        if potential >= 60:
            return f"[bold {self.rating_high}]+{potential}[/bold {self.rating_high}]"
        if potential >= 40:
            return f"[{self.rating_mid}]+{potential}[/{self.rating_mid}]"
        return self.muted_text(f"+{potential}")


# Dark theme - optimized for dark terminal backgrounds
DARK_THEME = Theme(
    mode="dark",
    success="green",
    error="red",
    warning="yellow",
    info="cyan",
    muted="dim",
    rating_low="red",
    rating_mid="yellow",
    rating_high="green",
    table_header="bold cyan",
)

# Light theme - optimized for light terminal backgrounds
LIGHT_THEME = Theme(
    mode="light",
    success="green",
    error="red",
    warning="dark_orange",  # Better contrast on light bg
    info="dark_cyan",
    muted="grey50",
    rating_low="red",
    rating_mid="dark_orange",
    rating_high="dark_green",
    table_header="bold dark_cyan",
)


def detect_terminal_theme() -> Literal["light", "dark"]:
    """Attempt to detect if terminal has light or dark background.

    Defaults to dark.
    """
    colorfgbg = os.environ.get("COLORFGBG", "")
    if colorfgbg:
        # Format is "foreground;background" where 15=white bg, 0=black bg
        parts = colorfgbg.split(";")
        if len(parts) >= 2:
            try:
                bg = int(parts[-1])
                return "light" if bg >= 7 else "dark"
            except ValueError:
                pass

    if os.environ.get("CASTSCORE_THEME", "").lower() == "light":
        return "light"

    return "dark"


_current_theme: Theme | None = None


def set_theme(mode: ThemeMode | str) -> Theme:
    """Set and cache the current theme.

    Args:
        mode: Theme mode ('light', 'dark', or 'auto')

    Returns:
        The active Theme instance
    """
    global _current_theme

    if isinstance(mode, str):
        mode = ThemeMode(mode.lower())

    if mode == ThemeMode.AUTO:
        detected = detect_terminal_theme()
        _current_theme = LIGHT_THEME if detected == "light" else DARK_THEME
    elif mode == ThemeMode.LIGHT:
        _current_theme = LIGHT_THEME
    else:
        _current_theme = DARK_THEME

    return _current_theme


def get_theme() -> Theme:
    """Get the current theme, auto-detecting on first use."""
    if _current_theme is None:
        return set_theme(ThemeMode.AUTO)
    return _current_theme


def reset_theme() -> None:
    """Reset the theme cache, forcing re-detection on next access."""
    global _current_theme
    _current_theme = None
