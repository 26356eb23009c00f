"""
ui_showcase - A Textual TUI demonstrating a styled button component.

A small terminal application built with the Textual framework: a side tab
selector, a list view full of button variants, a stats placeholder and a
drill-down stack of detail pages. Screen state is driven by a pure reducer
and the view is re-derived from that state after every message.
"""

__version__ = "0.1.0"
