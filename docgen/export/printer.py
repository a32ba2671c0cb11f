"""
Print Surface Module.

Native print fallback: the surface's fragment is re-rendered with print
styling (no borders or shadows, zero padding, forced A4 page) into an HTML
file that opens the print dialog as soon as the browser loads it.

Author: Document Tools Team
"""

import webbrowser
from pathlib import Path
from typing import Callable, Optional, Union

from config import get_config
from docgen.utils.logger import get_logger
from docgen.utils.helpers import ensure_directory, safe_filename
from docgen.utils.exceptions import PrintError
from docgen.composer.composer import render_print_page
from docgen.presentation.surface import PresentationSurface

logger = get_logger(__name__)


class BrowserPrintSurface:
    """
    Opens print jobs through the platform web browser.

    Attributes:
        print_dir: Directory receiving the print HTML files
        opener: Callable opening a URL, returning False on failure
    """

    def __init__(
        self,
        print_dir: Optional[Union[str, Path]] = None,
        opener: Callable[[str], bool] = webbrowser.open
    ) -> None:
        self.print_dir = Path(print_dir or get_config("paths.print_dir", "outputs/print"))
        self.opener = opener

    def print(self, surface: PresentationSurface) -> Path:
        """
        Open a print job for a surface.

        Returns:
            Path of the print HTML file.

        Raises:
            PrintError: If the file cannot be written or the browser
                cannot be opened.
        """
        html = render_print_page(surface.fragment)
        filepath = ensure_directory(self.print_dir) / safe_filename(f"{surface.surface_id}-print.html")

        try:
            filepath.write_text(html, encoding="utf-8")
        except OSError as e:
            raise PrintError(surface.surface_id, str(e)) from e

        if not self.opener(filepath.resolve().as_uri()):
            raise PrintError(surface.surface_id, "No browser available to print")

        logger.info(f"Print job opened for {surface.surface_id}: {filepath}")
        return filepath
