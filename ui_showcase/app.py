"""Main showcase application following Textual patterns."""

from typing import Optional

from loguru import logger
from textual.app import App
from textual.binding import Binding

from .Constants import APP_TITLE, DEFAULT_THEME
from .UI.Screens.home_screen import HomeScreen
from .config import get_cli_setting
from .logging_config import configure_logging
from .state.home_state import HomeState


class ShowcaseApp(App):
    """
    Hosts the home screen and applies the configured theme.

    Args:
        state: Initial home state; a fresh default state when omitted
        theme_name: Textual theme to use; read from the config when omitted
    """

    TITLE = APP_TITLE

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
    ]

    def __init__(self, state: Optional[HomeState] = None, theme_name: Optional[str] = None):
        super().__init__()
        self._initial_state = state
        self._theme_name = theme_name

    def on_mount(self) -> None:
        self.apply_theme(self._theme_name or get_cli_setting("general", "theme", DEFAULT_THEME))
        self.push_screen(HomeScreen(self._initial_state))
        logger.info("Application mounted")

    def apply_theme(self, theme_name: str) -> bool:
        """Switch to a registered theme; unknown names keep the current one."""
        if theme_name not in self.available_themes:
            logger.warning(f"Unknown theme '{theme_name}', keeping '{self.theme}'")
            return False
        self.theme = theme_name
        logger.debug(f"Theme set to {theme_name}")
        return True

    @property
    def home_state(self) -> Optional[HomeState]:
        screen = self.screen
        if isinstance(screen, HomeScreen):
            return screen.state
        return None


def run():
    """Run the showcase application."""
    configure_logging()
    app = ShowcaseApp()
    app.run()


if __name__ == "__main__":
    run()
