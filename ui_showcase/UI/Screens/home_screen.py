"""Home screen: owns the HomeState and re-derives its view after each message."""

from typing import Optional

from loguru import logger
from textual import on
from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Button, Input

from ..Views.home_view import view
from ...state.home_state import FieldChanged, HomeMessage, HomeState, Pop, update


class HomeScreen(Screen):
    """
    The single screen of the showcase.

    Messages flow one way: a button or input produces a HomeMessage, the
    reducer applies it to ``state``, and the widget tree is rebuilt from the
    new state.
    """

    DEFAULT_CSS = """
    #home-root {
        height: 1fr;
    }

    #tab-selector {
        width: 16;
        height: 1fr;
        padding: 1 1;
        background: $panel;
    }

    #main-column {
        width: 1fr;
        height: 1fr;
        padding: 1 2;
    }

    #list-view, #detail-view {
        height: auto;
    }

    .view-heading {
        text-style: bold;
        margin-bottom: 1;
    }

    .button-row {
        height: auto;
        margin-bottom: 1;
    }

    #detail-title {
        margin-bottom: 1;
    }
    """

    BINDINGS = [
        Binding("escape", "pop_page", "Back"),
    ]

    def __init__(self, state: Optional[HomeState] = None, **kwargs):
        super().__init__(**kwargs)
        self.state = state if state is not None else HomeState()

    def compose(self) -> ComposeResult:
        yield view(self.state)

    def apply_message(self, message: HomeMessage) -> None:
        """Run a message through the reducer and refresh the view."""
        logger.debug(f"Applying {message!r}")
        update(self.state, message)
        if isinstance(message, FieldChanged):
            # The input already shows the edit; rebuilding it would drop the cursor.
            return
        self.refresh(recompose=True)

    @on(Button.Pressed)
    def handle_button_press(self, event: Button.Pressed) -> None:
        event.stop()
        message = getattr(event.button, "press_message", None)
        if message is not None:
            self.apply_message(message)

    @on(Input.Changed, "#field-input")
    def handle_field_changed(self, event: Input.Changed) -> None:
        event.stop()
        if event.value != self.state.field_content:
            self.apply_message(FieldChanged(event.value))

    def action_pop_page(self) -> None:
        self.apply_message(Pop())
