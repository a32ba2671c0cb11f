"""
Raster Capture Module.

Turns the finished fragment held by a presentation surface into a raster
snapshot. The default service renders the fragment in headless Chromium
through Playwright at an oversampling factor, then flattens the
screenshot onto an opaque backdrop with Pillow so that translucent stamps
and backgrounds read correctly against white.

Author: Document Tools Team
"""

import io
from dataclasses import dataclass
from typing import Optional

from PIL import Image, ImageColor, UnidentifiedImageError
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from config import get_config
from docgen.utils.logger import get_logger
from docgen.utils.exceptions import CaptureError
from docgen.composer.composer import render_page
from docgen.presentation.surface import PresentationSurface

logger = get_logger(__name__)

# Shadows look muddy once rasterized; the capture drops them
CAPTURE_OVERRIDES = ".document-surface { box-shadow: none !important; }"


@dataclass(frozen=True)
class Snapshot:
    """
    Encoded raster image of a surface.

    Attributes:
        width: Pixel width
        height: Pixel height
        data: Encoded image bytes
        image_format: Encoding of `data` (Pillow format name)
    """
    width: int
    height: int
    data: bytes
    image_format: str = "JPEG"

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height


def flatten_to_backdrop(
    image_bytes: bytes,
    backdrop: str = "#ffffff",
    quality: int = 95
) -> Snapshot:
    """
    Composite an image onto an opaque backdrop and encode it as JPEG.

    Args:
        image_bytes: Encoded source image (any format Pillow reads).
        backdrop: CSS colour of the backdrop.
        quality: JPEG quality.

    Returns:
        Opaque JPEG snapshot with the source's pixel dimensions.

    Raises:
        UnidentifiedImageError: If the bytes are not an image.
    """
    with Image.open(io.BytesIO(image_bytes)) as image:
        image.load()
        flattened = Image.new("RGB", image.size, ImageColor.getrgb(backdrop))

        has_alpha = image.mode in ("RGBA", "LA") or (
            image.mode == "P" and "transparency" in image.info
        )
        if has_alpha:
            rgba = image.convert("RGBA")
            flattened.paste(rgba, mask=rgba.getchannel("A"))
        else:
            flattened.paste(image.convert("RGB"))

    buffer = io.BytesIO()
    flattened.save(buffer, format="JPEG", quality=quality)

    return Snapshot(
        width=flattened.width,
        height=flattened.height,
        data=buffer.getvalue(),
        image_format="JPEG",
    )


class PlaywrightCaptureService:
    """
    Captures surfaces with headless Chromium.

    A browser is launched per capture; captures are rare, user-triggered
    events and nothing is kept alive between them.

    Example:
        >>> service = PlaywrightCaptureService()
        >>> snapshot = await service.capture(surface, scale=2, backdrop="#ffffff")
        >>> snapshot.width, snapshot.height
        (1588, 2104)
    """

    def __init__(
        self,
        browser_name: Optional[str] = None,
        jpeg_quality: Optional[int] = None
    ) -> None:
        self.browser_name = browser_name or get_config("capture.browser", "chromium")
        self.jpeg_quality = jpeg_quality or get_config("export.jpeg_quality", 95)
        self.viewport = {
            "width": get_config("capture.viewport_width", 900),
            "height": get_config("capture.viewport_height", 1200),
        }

    async def capture(
        self,
        surface: PresentationSurface,
        scale: float,
        backdrop: str
    ) -> Snapshot:
        """
        Rasterize a surface.

        Args:
            surface: Surface whose finished fragment is captured.
            scale: Oversampling factor (device scale factor).
            backdrop: Opaque colour placed under the capture.

        Returns:
            Snapshot encoded as JPEG.

        Raises:
            CaptureError: If rendering or screenshotting fails.
        """
        html = render_page(surface.fragment, title=surface.surface_id)
        logger.info(f"Capturing {surface.surface_id} at {scale}x")

        try:
            async with async_playwright() as playwright:
                browser_type = getattr(playwright, self.browser_name)
                browser = await browser_type.launch()
                try:
                    page = await browser.new_page(
                        viewport=self.viewport,
                        device_scale_factor=scale,
                    )
                    await page.set_content(html, wait_until="load")
                    await page.add_style_tag(content=CAPTURE_OVERRIDES)
                    image_bytes = await page.locator(".document-surface").first.screenshot(
                        type="png",
                        animations="disabled",
                    )
                finally:
                    await browser.close()
        except PlaywrightError as e:
            raise CaptureError(surface.surface_id, str(e)) from e

        try:
            snapshot = flatten_to_backdrop(image_bytes, backdrop, self.jpeg_quality)
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise CaptureError(surface.surface_id, f"Unreadable screenshot: {e}") from e

        logger.debug(f"Captured {surface.surface_id}: {snapshot.width}x{snapshot.height}px")
        return snapshot
