# button_style.py
# Description: Pure style resolution for the styled button
#
"""
Maps a button's logical attributes and interaction status to concrete
colors. Nothing here touches a widget; the widget asks for a style whenever
its status or the app theme changes.

Resolution runs in two stages:

1. Base colors by variant, independent of status.
2. Status override: hovered buttons move to a stronger tone, disabled ones
   are drawn at half opacity, active and pressed ones keep the base colors.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from textual.color import Color
from typing_extensions import assert_never

from ..Utils.palette import ExtendedPalette, TRANSPARENT, scale_alpha

BORDER_WIDTH = 1.0
BORDER_RADIUS = 8.0
HOVER_FILL_ALPHA = 0.1
DISABLED_ALPHA = 0.5
BOLD_TEXT_SIZE = 16.0

# Terminal cells are roughly twice as tall as they are wide.
CELL_WIDTH_PX = 8
CELL_HEIGHT_PX = 16


class Variant(Enum):
    PRIMARY = "primary"
    SECONDARY = "secondary"
    DANGER = "danger"
    SUBTLE = "subtle"


class ButtonSize(Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


class ButtonStatus(Enum):
    """Interaction phase of a button, as reported by event dispatch."""

    ACTIVE = "active"
    PRESSED = "pressed"
    HOVERED = "hovered"
    DISABLED = "disabled"


@dataclass(frozen=True)
class BorderStyle:
    width: float
    radius: float
    color: Color


@dataclass(frozen=True)
class ButtonStyle:
    """Resolved look of a button. ``background`` is None when nothing is painted."""

    background: Optional[Color]
    text_color: Color
    border: BorderStyle


@dataclass(frozen=True)
class ButtonMetrics:
    padding: Tuple[float, float]  # (vertical, horizontal) in logical pixels
    text_size: float

    @property
    def bold(self) -> bool:
        """A terminal has one font size, so larger text is drawn bold instead."""
        return self.text_size >= BOLD_TEXT_SIZE


_METRICS = {
    ButtonSize.SMALL: ButtonMetrics(padding=(4.0, 8.0), text_size=12.0),
    ButtonSize.MEDIUM: ButtonMetrics(padding=(8.0, 16.0), text_size=14.0),
    ButtonSize.LARGE: ButtonMetrics(padding=(12.0, 24.0), text_size=16.0),
}

Colors = Tuple[Color, Color, Optional[Color]]


def metrics_for(size: ButtonSize) -> ButtonMetrics:
    return _METRICS[size]


def padding_cells(padding: Tuple[float, float]) -> Tuple[int, int]:
    """Convert a (vertical, horizontal) pixel padding to terminal cells."""
    vertical, horizontal = padding
    return round(vertical / CELL_HEIGHT_PX), round(horizontal / CELL_WIDTH_PX)


def base_colors(variant: Variant, palette: ExtendedPalette) -> Colors:
    """Background, text and optional border color for a variant at rest."""
    match variant:
        case Variant.PRIMARY:
            return palette.primary.base.color, palette.primary.base.text, None
        case Variant.SECONDARY:
            return (
                TRANSPARENT,
                palette.background.base.text,
                palette.background.strong.color,
            )
        case Variant.DANGER:
            return palette.danger.base.color, palette.danger.base.text, None
        case Variant.SUBTLE:
            return palette.background.weakest.color, palette.background.base.text, None
        case _:
            assert_never(variant)


def hovered_colors(variant: Variant, palette: ExtendedPalette, base: Colors) -> Colors:
    _background, text, border = base
    match variant:
        case Variant.PRIMARY:
            return palette.primary.strong.color, palette.primary.strong.text, None
        case Variant.SECONDARY:
            # Faint wash of the border tone; text and border stay as they are.
            return (
                scale_alpha(palette.background.strong.color, HOVER_FILL_ALPHA),
                text,
                border,
            )
        case Variant.DANGER:
            return palette.danger.strong.color, palette.danger.strong.text, None
        case Variant.SUBTLE:
            return palette.background.weaker.color, text, None
        case _:
            assert_never(variant)


def resolve_style(
    variant: Variant,
    size: ButtonSize,
    palette: ExtendedPalette,
    status: ButtonStatus,
) -> ButtonStyle:
    """
    Resolve the style of a button.

    Args:
        variant: Semantic role of the button
        size: Button size. Accepted so every button resolves through the same
            signature; colors do not depend on it.
        palette: Extended palette of the current theme
        status: Current interaction status

    Returns:
        The resolved ButtonStyle
    """
    colors = base_colors(variant, palette)
    match status:
        case ButtonStatus.ACTIVE | ButtonStatus.PRESSED:
            pass
        case ButtonStatus.HOVERED:
            colors = hovered_colors(variant, palette, colors)
        case ButtonStatus.DISABLED:
            background, text, border = colors
            colors = (
                scale_alpha(background, DISABLED_ALPHA),
                scale_alpha(text, DISABLED_ALPHA),
                scale_alpha(border, DISABLED_ALPHA) if border is not None else None,
            )
        case _:
            assert_never(status)

    background, text, border = colors
    return ButtonStyle(
        background=None if background.a == 0 else background,
        text_color=text,
        border=BorderStyle(
            width=BORDER_WIDTH if border is not None else 0.0,
            radius=BORDER_RADIUS,
            color=border if border is not None else TRANSPARENT,
        ),
    )
