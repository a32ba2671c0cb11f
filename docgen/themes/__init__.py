"""
Theming Module for the Document Generator.

This module provides functionality for:
    - Stamp rendering (eight shapes, five colours, three sizes)
    - Background themes for preview surfaces

Author: Document Tools Team
"""

from .stamp import (
    StampThemeEngine,
    StampConfig,
    StampVariant,
    ColorTheme,
    SizeClass,
    ColorPalette,
    PALETTES,
    coerce_selector,
)
from .background import BackgroundThemeEngine, BackgroundTheme, coerce_background

__all__ = [
    'StampThemeEngine',
    'StampConfig',
    'StampVariant',
    'ColorTheme',
    'SizeClass',
    'ColorPalette',
    'PALETTES',
    'coerce_selector',
    'BackgroundThemeEngine',
    'BackgroundTheme',
    'coerce_background',
]
