"""
Property-based tests for the home screen reducer using Hypothesis.
"""

import copy

from hypothesis import given, strategies as st

from ui_showcase.state.home_state import (
    DetailPage,
    FieldChanged,
    HomeState,
    Pop,
    PushDetail,
    RootTab,
    SwitchTab,
    update,
)


labels = st.text(max_size=20)


@st.composite
def home_states(draw, min_depth=0):
    """Generate arbitrary reachable home states."""
    return HomeState(
        active_tab=draw(st.sampled_from(list(RootTab))),
        stack=draw(st.lists(st.builds(DetailPage, labels), min_size=min_depth, max_size=8)),
        field_content=draw(st.text(max_size=40)),
    )


@given(state=home_states(), label=labels)
def test_push_then_pop_restores_stack(state, label):
    original = list(state.stack)
    update(update(state, PushDetail(label)), Pop())
    assert state.stack == original


@given(state=home_states())
def test_pop_on_empty_stack_is_identity(state):
    state.stack.clear()
    before = copy.deepcopy(state)
    update(state, Pop())
    assert state == before


@given(state=home_states(min_depth=1))
def test_pop_shrinks_by_one(state):
    depth = state.depth
    update(state, Pop())
    assert state.depth == depth - 1


@given(state=home_states(), tab=st.sampled_from(list(RootTab)))
def test_switch_tab_leaves_stack_and_field_alone(state, tab):
    stack = list(state.stack)
    field_content = state.field_content
    update(state, SwitchTab(tab))
    assert state.active_tab == tab
    assert state.stack == stack
    assert state.field_content == field_content


@given(state=home_states(), text=st.text(max_size=40))
def test_field_changed_replaces_whole_value(state, text):
    update(state, FieldChanged(text))
    assert state.field_content == text


@given(state=home_states(), pushes=st.lists(labels, max_size=10))
def test_stack_grows_one_entry_per_push(state, pushes):
    depth = state.depth
    for label in pushes:
        update(state, PushDetail(label))
    assert state.depth == depth + len(pushes)
    assert [page.label for page in state.stack[depth:]] == pushes
