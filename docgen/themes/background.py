"""
Background Theme Engine Module.

Associates one of six named background motifs (or none) with a preview
surface. Themes are mutually exclusive: applying a theme first clears
whatever theme the surface carried.

Author: Document Tools Team
"""

from enum import Enum
from typing import List, Optional, Tuple, Union

from docgen.utils.logger import get_logger
from docgen.presentation.surface import SurfaceRegistry
from .stamp import coerce_selector

logger = get_logger(__name__)


class BackgroundTheme(Enum):
    MINIMALIST = "minimalist"
    PROFESSIONAL = "professional"
    MODERN = "modern"
    CLASSIC = "classic"
    GEOMETRIC = "geometric"
    WATERMARK = "watermark"

    @property
    def css_class(self) -> str:
        """Decoration identifier set on the surface and the finished fragment."""
        return f"bg-{self.value}"

    @property
    def display_name(self) -> str:
        return _THEME_NAMES[self]


_THEME_NAMES = {
    BackgroundTheme.MINIMALIST: "Minimalis",
    BackgroundTheme.PROFESSIONAL: "Profesional",
    BackgroundTheme.MODERN: "Modern",
    BackgroundTheme.CLASSIC: "Klasik",
    BackgroundTheme.GEOMETRIC: "Geometris",
    BackgroundTheme.WATERMARK: "Watermark",
}


def coerce_background(theme: Union[BackgroundTheme, str, None]) -> Optional[BackgroundTheme]:
    """
    Normalize a background selector; None and "" mean no background.

    Raises:
        UnknownThemeSelectorError: If the value is not a known theme.
    """
    if theme is None or theme == "":
        return None
    return coerce_selector(BackgroundTheme, theme, "background theme")


class BackgroundThemeEngine:
    """
    Applies background themes to presentation surfaces.

    The engine only decorates the surface. The owning document must be
    recomposed afterwards so that the finished fragment carries the theme
    too (DocumentGenerator does this).

    Example:
        >>> engine = BackgroundThemeEngine(registry)
        >>> engine.apply("invoice-preview", "modern")
        >>> registry.get("invoice-preview").decoration
        'bg-modern'
    """

    def __init__(self, surfaces: SurfaceRegistry) -> None:
        self.surfaces = surfaces

    def apply(
        self,
        surface_id: str,
        theme: Union[BackgroundTheme, str, None]
    ) -> Optional[BackgroundTheme]:
        """
        Set exactly one theme (or none) on a surface.

        Raises:
            SurfaceNotFoundError: If the surface is not registered.
            UnknownThemeSelectorError: If the theme is unknown.
        """
        resolved = coerce_background(theme)
        surface = self.surfaces.get(surface_id)

        previous = surface.decoration
        surface.set_decoration(None)
        if resolved is not None:
            surface.set_decoration(resolved.css_class)

        logger.info(
            f"Background on {surface_id}: {previous or 'none'} -> "
            f"{surface.decoration or 'none'}"
        )
        return resolved

    def clear(self, surface_id: str) -> None:
        self.apply(surface_id, None)

    @staticmethod
    def gallery() -> List[Tuple[BackgroundTheme, str]]:
        """Themes with their display names, in picker order."""
        return [(theme, theme.display_name) for theme in BackgroundTheme]
