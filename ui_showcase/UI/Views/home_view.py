# home_view.py
# Description: Widget tree for the home screen, derived from HomeState
#
# Imports
from typing_extensions import assert_never
#
# Third-Party Imports
from textual.containers import Horizontal, Vertical
from textual.widget import Widget
from textual.widgets import Input, Static
#
# Local Imports
from ...Constants import INPUT_PLACEHOLDER, LIST_HEADING, STATS_PLACEHOLDER
from ...Widgets.button_style import ButtonSize, Variant
from ...Widgets.styled_button import ButtonDescriptor
from ...state.home_state import (
    DetailPage,
    HomeState,
    Page,
    Pop,
    PushDetail,
    RootTab,
    SwitchTab,
    next_detail_label,
)
#
#######################################################################################################################
#
# Functions:

def view(state: HomeState) -> Widget:
    """
    Build the home screen's widget tree for a state.

    With pages on the stack only the top page is built, at full width.
    Otherwise the tab selector sits beside the root view for the active tab.
    """
    top = state.top()
    if top is not None:
        return Horizontal(
            Vertical(page_view(top, state.depth), id="main-column"),
            id="home-root",
        )
    return Horizontal(
        tab_selector(),
        Vertical(root_view(state), id="main-column"),
        id="home-root",
    )


def tab_selector() -> Widget:
    return Vertical(
        ButtonDescriptor("List")
        .with_variant(Variant.PRIMARY)
        .on_press(SwitchTab(RootTab.LIST))
        .build(id="tab-list"),
        ButtonDescriptor("Stats")
        .with_variant(Variant.SECONDARY)
        .on_press(SwitchTab(RootTab.STATS))
        .build(id="tab-stats"),
        id="tab-selector",
    )


def detail_title(label: str, depth: int) -> str:
    return f"Detail: {label} (depth {depth})"


def page_view(page: Page, depth: int) -> Widget:
    match page:
        case DetailPage(label=label):
            return Vertical(
                Static(detail_title(label, depth), id="detail-title"),
                ButtonDescriptor("Open Next")
                .with_variant(Variant.PRIMARY)
                .on_press(PushDetail(next_detail_label(label)))
                .build(id="detail-open-next"),
                ButtonDescriptor("Back")
                .with_variant(Variant.DANGER)
                .on_press(Pop())
                .build(id="detail-back"),
                id="detail-view",
            )
        case _:
            assert_never(page)


def root_view(state: HomeState) -> Widget:
    match state.active_tab:
        case RootTab.LIST:
            return list_view(state)
        case RootTab.STATS:
            return Static(STATS_PLACEHOLDER, id="stats-view")
        case _:
            assert_never(state.active_tab)


def list_view(state: HomeState) -> Widget:
    return Vertical(
        Static(LIST_HEADING, classes="view-heading"),
        Horizontal(
            ButtonDescriptor("Primary")
            .with_variant(Variant.PRIMARY)
            .with_size(ButtonSize.SMALL)
            .on_press(PushDetail("A"))
            .build(id="demo-primary"),
            ButtonDescriptor("Secondary")
            .with_variant(Variant.SECONDARY)
            .on_press(PushDetail("B"))
            .build(id="demo-secondary"),
            ButtonDescriptor("Danger")
            .with_variant(Variant.DANGER)
            .with_size(ButtonSize.LARGE)
            .on_press(PushDetail("C"))
            .build(id="demo-danger"),
            classes="button-row",
        ),
        Horizontal(
            ButtonDescriptor("Subtle")
            .with_variant(Variant.SUBTLE)
            .on_press(PushDetail("D"))
            .build(id="demo-subtle"),
            # Keeps its action; being disabled is what stops it from firing.
            ButtonDescriptor("Disabled")
            .with_disabled(True)
            .on_press(PushDetail("E"))
            .build(id="demo-disabled"),
            ButtonDescriptor("No Action")
            .with_variant(Variant.SECONDARY)
            .build(id="demo-no-action"),
            classes="button-row",
        ),
        Input(value=state.field_content, placeholder=INPUT_PLACEHOLDER, id="field-input"),
        id="list-view",
    )


#
# End of home_view.py
#######################################################################################################################
