"""
Tests for the extended palette derived from Textual themes.
"""

import pytest
from textual.color import Color
from textual.theme import BUILTIN_THEMES, Theme

from ui_showcase.Utils.palette import (
    DARK_BACKGROUND,
    DEFAULT_ERROR,
    ExtendedPalette,
    TRANSPARENT,
    deviate,
    is_dark,
    scale_alpha,
)


pytestmark = pytest.mark.unit


def test_scale_alpha_only_touches_alpha():
    color = Color(10, 20, 30, 0.8)
    scaled = scale_alpha(color, 0.5)
    assert scaled.rgb == color.rgb
    assert scaled.a == pytest.approx(0.4)


def test_scale_alpha_of_transparent_stays_transparent():
    assert scale_alpha(TRANSPARENT, 0.5).a == 0


def test_deviate_lightens_dark_and_darkens_light():
    dark = Color.parse("#101010")
    light = Color.parse("#f0f0f0")
    assert deviate(dark, 0.2).brightness > dark.brightness
    assert deviate(light, 0.2).brightness < light.brightness


# ANSI themes name terminal colors rather than RGB values.
RGB_THEMES = sorted(name for name in BUILTIN_THEMES if not name.endswith("-ansi"))


@pytest.mark.parametrize("theme_name", RGB_THEMES)
def test_every_builtin_theme_produces_a_palette(theme_name):
    palette = ExtendedPalette.from_theme(BUILTIN_THEMES[theme_name])
    assert palette.primary.base.color == Color.parse(BUILTIN_THEMES[theme_name].primary)
    assert palette.primary.strong.color != palette.primary.base.color
    assert palette.danger.strong.color != palette.danger.base.color


def test_background_ramp_moves_away_from_base():
    palette = ExtendedPalette.from_theme(BUILTIN_THEMES["textual-dark"])
    ramp = palette.background
    base = ramp.base.color.brightness
    assert is_dark(ramp.base.color)
    assert base < ramp.weakest.color.brightness < ramp.weaker.color.brightness
    assert ramp.weaker.color.brightness < ramp.weak.color.brightness < ramp.strong.color.brightness


def test_background_ramp_shares_foreground_text():
    theme = BUILTIN_THEMES["textual-light"]
    palette = ExtendedPalette.from_theme(theme)
    foreground = Color.parse(theme.foreground) if theme.foreground else palette.background.base.text
    for pair in (
        palette.background.weakest,
        palette.background.weaker,
        palette.background.weak,
        palette.background.strong,
    ):
        assert pair.text == foreground


def test_minimal_theme_falls_back_to_defaults():
    palette = ExtendedPalette.from_theme(Theme(name="bare", primary="#0178D4"))
    assert palette.background.base.color == Color.parse(DARK_BACKGROUND)
    assert palette.danger.base.color == Color.parse(DEFAULT_ERROR)
    # Light text on a dark background
    assert palette.background.base.text.brightness > 0.5


def test_accent_text_contrasts_with_fill():
    palette = ExtendedPalette.from_theme(Theme(name="bright", primary="#ffff00", dark=False))
    assert palette.primary.base.text == Color(0, 0, 0)
