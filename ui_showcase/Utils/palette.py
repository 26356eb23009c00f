# palette.py
# Description: Extended color palette derived from a Textual theme
#
"""
Extended Palette
----------------

Button styling needs more tones than a Textual ``Theme`` names directly: a
"strong" variant of each accent and a ramp of background strengths. This
module derives them from any theme so that every theme registered with the
app can be used without code changes.

- Pair: a fill color and the text color drawn on it
- Accent: ``base`` and ``strong`` pairs for one accent color
- BackgroundRamp: ``weakest`` .. ``strong`` pairs around the base background
- ExtendedPalette: everything above, built with ``ExtendedPalette.from_theme``
"""

from dataclasses import dataclass
from typing import Optional

from textual.color import Color
from textual.theme import Theme

# Fallbacks used by Textual's own color system when a theme leaves a slot empty
DARK_BACKGROUND = "#121212"
LIGHT_BACKGROUND = "#efefef"
DEFAULT_ERROR = "#ba3c5b"

TRANSPARENT = Color(0, 0, 0, 0)


def scale_alpha(color: Color, factor: float) -> Color:
    """Multiply the alpha channel of a color, leaving r/g/b untouched."""
    return color.with_alpha(color.a * factor)


def is_dark(color: Color) -> bool:
    return color.brightness < 0.5


def deviate(color: Color, amount: float) -> Color:
    """Move a color away from its own lightness: lighter if dark, darker if light."""
    if is_dark(color):
        return color.lighten(amount)
    return color.darken(amount)


@dataclass(frozen=True)
class Pair:
    color: Color
    text: Color

    @classmethod
    def readable(cls, color: Color) -> "Pair":
        """Pair a fill with whichever of black or white reads best on it."""
        return cls(color, color.get_contrast_text(alpha=1.0))


@dataclass(frozen=True)
class Accent:
    base: Pair
    strong: Pair

    @classmethod
    def generate(cls, base: Color) -> "Accent":
        return cls(base=Pair.readable(base), strong=Pair.readable(deviate(base, 0.1)))


@dataclass(frozen=True)
class BackgroundRamp:
    weakest: Pair
    weaker: Pair
    weak: Pair
    base: Pair
    strong: Pair

    @classmethod
    def generate(cls, base: Color, text: Color) -> "BackgroundRamp":
        return cls(
            weakest=Pair(deviate(base, 0.03), text),
            weaker=Pair(deviate(base, 0.07), text),
            weak=Pair(deviate(base, 0.1), text),
            base=Pair(base, text),
            strong=Pair(deviate(base, 0.2), text),
        )


@dataclass(frozen=True)
class ExtendedPalette:
    """Named tones consumed by button style resolution."""

    primary: Accent
    danger: Accent
    background: BackgroundRamp

    @classmethod
    def from_theme(cls, theme: Theme) -> "ExtendedPalette":
        """
        Build the extended palette for a Textual theme.

        Args:
            theme: Any Textual theme. Only ``primary`` is mandatory; a missing
                ``background``, ``foreground`` or ``error`` falls back to the
                defaults Textual itself would use.

        Returns:
            The derived palette
        """
        background = _parse_or(
            theme.background, DARK_BACKGROUND if theme.dark else LIGHT_BACKGROUND
        )
        foreground = (
            Color.parse(theme.foreground)
            if theme.foreground
            else background.get_contrast_text(alpha=1.0)
        )
        return cls(
            primary=Accent.generate(Color.parse(theme.primary)),
            danger=Accent.generate(_parse_or(theme.error, DEFAULT_ERROR)),
            background=BackgroundRamp.generate(background, foreground),
        )


def _parse_or(value: Optional[str], fallback: str) -> Color:
    return Color.parse(value if value else fallback)
