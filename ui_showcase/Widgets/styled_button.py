# styled_button.py
# Description: Button widget whose look is derived from variant, size and status
#
"""
Styled Button
-------------

Two pieces make up the component:

- ButtonDescriptor: an immutable description (label, variant, size, ...)
  built with a fluent chain of setters, then consumed by ``build()``.
- StyledButton: the Textual widget ``build()`` produces. It keeps no state
  between view passes; its colors are re-resolved whenever its interaction
  status or the app theme changes.
"""

from dataclasses import dataclass, replace
from functools import partial
from typing import Any, Callable, Optional, Union

from rich.text import Text
from textual import events
from textual.widgets import Button

from .button_style import (
    ButtonSize,
    ButtonStatus,
    ButtonStyle,
    Variant,
    metrics_for,
    padding_cells,
    resolve_style,
)
from ..Utils.palette import ExtendedPalette, TRANSPARENT

StyleResolver = Callable[[ExtendedPalette, ButtonStatus], ButtonStyle]
Dimension = Union[int, str]
Icon = Union[str, Text]


@dataclass(frozen=True)
class ButtonDescriptor:
    """
    Logical description of a styled button.

    Every setter returns a new descriptor, so a descriptor can be shared or
    branched freely while building a view:

        ButtonDescriptor("Back").with_variant(Variant.DANGER).on_press(Pop())
    """

    label: str
    variant: Variant = Variant.PRIMARY
    size: ButtonSize = ButtonSize.MEDIUM
    disabled: bool = False
    action: Optional[Any] = None
    icon: Optional[Icon] = None
    width: Optional[Dimension] = None  # None shrinks to content
    height: Optional[Dimension] = None

    def with_variant(self, variant: Variant) -> "ButtonDescriptor":
        return replace(self, variant=variant)

    def with_size(self, size: ButtonSize) -> "ButtonDescriptor":
        return replace(self, size=size)

    def with_disabled(self, disabled: bool) -> "ButtonDescriptor":
        return replace(self, disabled=disabled)

    def on_press(self, action: Any) -> "ButtonDescriptor":
        return replace(self, action=action)

    def with_icon(self, icon: Icon) -> "ButtonDescriptor":
        return replace(self, icon=icon)

    def with_width(self, width: Dimension) -> "ButtonDescriptor":
        return replace(self, width=width)

    def with_height(self, height: Dimension) -> "ButtonDescriptor":
        return replace(self, height=height)

    def style_resolver(self) -> StyleResolver:
        """Style callback for this button, taking (palette, status)."""
        return partial(resolve_style, self.variant, self.size)

    def build(self, id: Optional[str] = None, classes: Optional[str] = None) -> "StyledButton":
        return StyledButton(self, id=id, classes=classes)


class StyledButton(Button):
    """
    A Textual button painted from a ButtonDescriptor.

    Pressing posts ``Button.Pressed`` only when the button is enabled and has
    an action attached; ``press_message`` carries that action to the handler.
    """

    DEFAULT_CSS = """
    StyledButton {
        width: auto;
        min-width: 0;
        height: auto;
        margin: 0 1 0 0;
        text-style: none;
    }

    StyledButton.-text-bold {
        text-style: bold;
    }

    StyledButton:focus {
        text-style: underline;
    }

    StyledButton.-text-bold:focus {
        text-style: bold underline;
    }
    """

    def __init__(
        self,
        descriptor: ButtonDescriptor,
        *,
        id: Optional[str] = None,
        classes: Optional[str] = None,
    ):
        label = descriptor.label
        if descriptor.icon:
            label = Text.assemble(descriptor.icon, " ", descriptor.label)
        size_class = f"-size-{descriptor.size.value}"
        if metrics_for(descriptor.size).bold:
            size_class += " -text-bold"
        super().__init__(
            label,
            id=id,
            classes=f"{size_class} {classes}" if classes else size_class,
            disabled=descriptor.disabled,
        )
        self.descriptor = descriptor
        self.press_message = descriptor.action
        self.resolver = descriptor.style_resolver()
        self._hovered = False
        self._pressed = False

    @property
    def status(self) -> ButtonStatus:
        if self.disabled:
            return ButtonStatus.DISABLED
        if self._pressed:
            return ButtonStatus.PRESSED
        if self._hovered:
            return ButtonStatus.HOVERED
        return ButtonStatus.ACTIVE

    def press(self) -> "StyledButton":
        if self.press_message is None:
            return self
        return super().press()

    def on_mount(self) -> None:
        self.watch(self.app, "theme", self._on_theme_changed, init=False)
        self._apply_sizing()
        self.restyle()

    def _on_theme_changed(self, _theme: str) -> None:
        self.restyle()

    def on_enter(self, event: events.Enter) -> None:
        self._hovered = True
        self.restyle()

    def on_leave(self, event: events.Leave) -> None:
        self._hovered = False
        self._pressed = False
        self.restyle()

    def on_mouse_down(self, event: events.MouseDown) -> None:
        self._pressed = True
        self.restyle()

    def on_mouse_up(self, event: events.MouseUp) -> None:
        self._pressed = False
        self.restyle()

    def current_style(self) -> ButtonStyle:
        palette = ExtendedPalette.from_theme(self.app.current_theme)
        return self.resolver(palette, self.status)

    def restyle(self) -> None:
        """Resolve the style for the current status and paint it."""
        style = self.current_style()
        styles = self.styles
        styles.background = style.background if style.background is not None else TRANSPARENT
        styles.color = style.text_color
        # Dimming is already part of the resolved colors.
        styles.text_opacity = 1.0
        styles.tint = TRANSPARENT
        if style.border.width > 0:
            styles.border = ("round", style.border.color)
        else:
            styles.border = ("none", style.border.color)

    def _apply_sizing(self) -> None:
        descriptor = self.descriptor
        self.styles.padding = padding_cells(metrics_for(descriptor.size).padding)
        if descriptor.width is not None:
            self.styles.width = descriptor.width
        if descriptor.height is not None:
            self.styles.height = descriptor.height
