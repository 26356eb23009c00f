"""
Home screen state and reducer.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

from typing_extensions import assert_never

from ..Constants import DETAIL_SUFFIX


class RootTab(Enum):
    """Root views reachable from the side tab selector."""

    LIST = "list"
    STATS = "stats"


@dataclass(frozen=True)
class DetailPage:
    """A drill-down page identified only by its label."""

    label: str


# Pages that can sit on the navigation stack. New page kinds join this union.
Page = DetailPage


# --- Messages ---

@dataclass(frozen=True)
class SwitchTab:
    tab: RootTab


@dataclass(frozen=True)
class PushDetail:
    label: str


@dataclass(frozen=True)
class Pop:
    pass


@dataclass(frozen=True)
class FieldChanged:
    text: str


HomeMessage = Union[SwitchTab, PushDetail, Pop, FieldChanged]


@dataclass
class HomeState:
    """
    State behind the home screen.

    When ``stack`` is empty the root view for ``active_tab`` is shown along
    with the tab selector; otherwise only the top page is shown.
    """

    active_tab: RootTab = RootTab.LIST
    stack: List[Page] = field(default_factory=list)
    field_content: str = ""

    @property
    def depth(self) -> int:
        return len(self.stack)

    def top(self) -> Optional[Page]:
        """Return the visible page, or None when a root view is showing."""
        if self.stack:
            return self.stack[-1]
        return None


def next_detail_label(label: str) -> str:
    """Label of the page opened by "Open Next" from a detail page."""
    return f"{label}{DETAIL_SUFFIX}"


def update(state: HomeState, message: HomeMessage) -> HomeState:
    """
    Apply a message to the state.

    The state is mutated in place and returned for convenience. Every
    message is valid in every state; popping an empty stack does nothing.
    """
    match message:
        case SwitchTab(tab=tab):
            state.active_tab = tab
        case PushDetail(label=label):
            state.stack.append(DetailPage(label))
        case Pop():
            if state.stack:
                state.stack.pop()
        case FieldChanged(text=text):
            state.field_content = text
        case _:
            assert_never(message)
    return state
