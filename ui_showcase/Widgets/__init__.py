"""
Widgets used by the showcase screens.
"""

from .button_style import ButtonSize, ButtonStatus, ButtonStyle, Variant, resolve_style
from .styled_button import ButtonDescriptor, StyledButton

__all__ = [
    'ButtonDescriptor',
    'ButtonSize',
    'ButtonStatus',
    'ButtonStyle',
    'StyledButton',
    'Variant',
    'resolve_style',
]
