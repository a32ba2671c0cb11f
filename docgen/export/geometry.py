"""
Page-Fit Geometry Module.

Computes where a raster snapshot goes on a fixed portrait page so that the
whole capture is visible, its aspect ratio is preserved, it is centred
horizontally and it starts at a fixed top inset.

All lengths are in millimetres.

Author: Document Tools Team
"""

from dataclasses import dataclass

from config import get_config


@dataclass(frozen=True)
class PageSize:
    """
    Output page with a uniform margin on all sides.

    Example:
        >>> page = PageSize(210, 297, 10)
        >>> page.available_width, page.available_height
        (190, 277)
    """
    width: float
    height: float
    margin: float

    @property
    def available_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def available_height(self) -> float:
        return self.height - 2 * self.margin

    @classmethod
    def from_config(cls) -> 'PageSize':
        """A4 portrait with a 10 mm margin unless configured otherwise."""
        return cls(
            width=get_config("export.page.width_mm", 210),
            height=get_config("export.page.height_mm", 297),
            margin=get_config("export.page.margin_mm", 10),
        )


@dataclass(frozen=True)
class Placement:
    """Origin (top-left, y growing downwards) and size of the image on the page."""
    x: float
    y: float
    width: float
    height: float


def compute_page_fit(capture_width: int, capture_height: int, page: PageSize) -> Placement:
    """
    Fit a capture onto the page.

    The image first takes the full available width; if that makes it
    taller than the available height it is height-constrained instead.

    Args:
        capture_width: Snapshot width in pixels.
        capture_height: Snapshot height in pixels.
        page: Target page.

    Returns:
        Placement of the image.

    Raises:
        ValueError: If the capture has no area.

    Example:
        >>> compute_page_fit(2000, 1000, PageSize(210, 297, 10))
        Placement(x=10.0, y=10, width=190, height=95.0)
    """
    if capture_width <= 0 or capture_height <= 0:
        raise ValueError(f"Capture has no area: {capture_width}x{capture_height}")

    aspect_ratio = capture_width / capture_height

    width = page.available_width
    height = width / aspect_ratio

    if height > page.available_height:
        height = page.available_height
        width = height * aspect_ratio

    x = (page.width - width) / 2
    y = page.margin

    return Placement(x=x, y=y, width=width, height=height)
