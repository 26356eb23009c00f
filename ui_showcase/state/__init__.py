"""
State management module for the showcase application.
The home screen state and its reducer live here.
"""

from .home_state import (
    RootTab,
    DetailPage,
    Page,
    SwitchTab,
    PushDetail,
    Pop,
    FieldChanged,
    HomeMessage,
    HomeState,
    next_detail_label,
    update,
)

__all__ = [
    'RootTab',
    'DetailPage',
    'Page',
    'SwitchTab',
    'PushDetail',
    'Pop',
    'FieldChanged',
    'HomeMessage',
    'HomeState',
    'next_detail_label',
    'update',
]
