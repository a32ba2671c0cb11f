"""
Shared fixtures for the document generator tests.

Provides sample forms for the three document types, a fake raster capture
service (no browser needed) and a fake print surface.
"""

import asyncio
import io
from datetime import date
from pathlib import Path
from typing import Callable, List, Optional

import pytest
from PIL import Image

from config import ConfigurationManager
from docgen.utils.exceptions import CaptureError
from docgen.presentation.surface import PresentationSurface
from docgen.export.capture import Snapshot, flatten_to_backdrop
from docgen.generator.generator import DocumentGenerator


class FakeCaptureService:
    """
    Capture service producing a blank snapshot of a fixed pixel size.

    Attributes:
        width / height: Pixel size of every snapshot
        fail: Raise CaptureError instead of capturing
        on_capture: Called with the surface while the capture runs
        captured: Surfaces captured so far
    """

    def __init__(
        self,
        width: int = 1588,
        height: int = 2104,
        fail: bool = False,
        on_capture: Optional[Callable[[PresentationSurface], None]] = None
    ):
        self.width = width
        self.height = height
        self.fail = fail
        self.on_capture = on_capture
        self.captured: List[PresentationSurface] = []
        self.scales: List[float] = []

    async def capture(self, surface, scale, backdrop):
        self.captured.append(surface)
        self.scales.append(scale)
        if self.on_capture is not None:
            self.on_capture(surface)

        # Give other exports a chance to run
        await asyncio.sleep(0)

        if self.fail:
            raise CaptureError(surface.surface_id, "renderer crashed")

        image = Image.new("RGBA", (self.width, self.height), (0, 0, 0, 0))
        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        return flatten_to_backdrop(buffer.getvalue(), backdrop)


class FakePrintSurface:
    """Print surface recording the surfaces it was asked to print."""

    def __init__(self, print_dir: Path):
        self.print_dir = print_dir
        self.printed: List[PresentationSurface] = []

    def print(self, surface):
        self.printed.append(surface)
        return self.print_dir / f"{surface.surface_id}-print.html"


@pytest.fixture(autouse=True)
def reset_config():
    """Every test starts from the bundled settings.yaml."""
    ConfigurationManager.reset()
    yield
    ConfigurationManager.reset()


@pytest.fixture
def capture():
    return FakeCaptureService()


@pytest.fixture
def printer(tmp_path):
    return FakePrintSurface(tmp_path)


@pytest.fixture
def generator(tmp_path, capture, printer):
    return DocumentGenerator(capture=capture, printer=printer, output_dir=tmp_path)


@pytest.fixture
def receipt_form():
    return {
        "number": "R-001",
        "date": "2026-10-19",
        "customer_name": "Budi Santoso",
        "customer_address": "Jl. Merdeka No. 1\nJakarta",
        "items": [
            {"description": "Jasa Konsultasi", "quantity": "1", "price": "100000"},
        ],
        "notes": "",
    }


@pytest.fixture
def invoice_form():
    return {
        "number": "INV-001",
        "date": date(2026, 10, 19),
        "due_date": date(2026, 11, 18),
        "payment_terms": "Net 30",
        "bill_to_name": "PT Maju Jaya",
        "bill_to_address": "Jl. Sudirman 5",
        "items": [
            {"description": "Desain Logo", "quantity": 1, "price": 1000},
        ],
        "tax_rate": 10,
        "discount_rate": 10,
        "notes": "Transfer ke rekening BCA",
    }


@pytest.fixture
def note_form():
    return {
        "number": "ND-007",
        "date": "2026-10-19",
        "to": "Seluruh Staf",
        "from": "",
        "subject": "Rapat Bulanan",
        "message": "Rapat diadakan hari Jumat.\nHarap hadir tepat waktu.",
    }
