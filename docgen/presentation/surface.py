"""
Presentation Surface Module.

A presentation surface is the addressable preview area of one document
type. It holds the finished fragment last written to it and exactly one
decoration (background theme identifier) or none.

Author: Document Tools Team
"""

from typing import Dict, Iterable, Iterator, Optional

from docgen.utils.logger import get_logger
from docgen.utils.exceptions import SurfaceNotFoundError

logger = get_logger(__name__)


class PresentationSurface:
    """
    In-memory preview surface.

    Attributes:
        surface_id: Identifier, e.g. "invoice-preview"
        fragment: Finished fragment HTML ("" until something is composed)
        decoration: Active decoration identifier or None
    """

    def __init__(self, surface_id: str) -> None:
        self.surface_id = surface_id
        self.fragment = ""
        self.decoration: Optional[str] = None

    def write(self, fragment: str) -> None:
        self.fragment = fragment

    def set_decoration(self, decoration: Optional[str]) -> None:
        """Replace the active decoration; decorations never combine."""
        self.decoration = decoration

    def is_empty(self) -> bool:
        return not self.fragment.strip()

    def clear(self) -> None:
        self.fragment = ""
        self.decoration = None

    def __repr__(self) -> str:
        return (
            f"PresentationSurface(id={self.surface_id!r}, "
            f"decoration={self.decoration!r}, empty={self.is_empty()})"
        )


class SurfaceRegistry:
    """
    Surfaces addressable by identifier.

    Example:
        >>> registry = SurfaceRegistry(["receipt-preview"])
        >>> registry.get("receipt-preview").is_empty()
        True
    """

    def __init__(self, surface_ids: Iterable[str] = ()) -> None:
        self._surfaces: Dict[str, PresentationSurface] = {}
        for surface_id in surface_ids:
            self.register(surface_id)

    def register(self, surface_id: str) -> PresentationSurface:
        surface = self._surfaces.get(surface_id)
        if surface is None:
            surface = PresentationSurface(surface_id)
            self._surfaces[surface_id] = surface
            logger.debug(f"Registered surface {surface_id}")
        return surface

    def get(self, surface_id: str) -> PresentationSurface:
        """
        Look up a surface.

        Raises:
            SurfaceNotFoundError: If no surface has this identifier.
        """
        try:
            return self._surfaces[surface_id]
        except KeyError:
            raise SurfaceNotFoundError(surface_id)

    def find(self, surface_id: str) -> Optional[PresentationSurface]:
        return self._surfaces.get(surface_id)

    def __contains__(self, surface_id: str) -> bool:
        return surface_id in self._surfaces

    def __iter__(self) -> Iterator[PresentationSurface]:
        return iter(self._surfaces.values())
