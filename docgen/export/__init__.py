"""
Export Module.

Rasterize-then-paginate PDF export with a native print fallback.
"""

from .geometry import PageSize, Placement, compute_page_fit
from .capture import Snapshot, PlaywrightCaptureService, flatten_to_backdrop
from .writer import PdfPageWriter, export_filename
from .printer import BrowserPrintSurface
from .pipeline import (
    RasterCaptureService,
    PrintSurface,
    ExportStatus,
    ExportResult,
    ExportControl,
    ExportPipeline,
)

__all__ = [
    'PageSize',
    'Placement',
    'compute_page_fit',
    'Snapshot',
    'PlaywrightCaptureService',
    'flatten_to_backdrop',
    'PdfPageWriter',
    'export_filename',
    'BrowserPrintSurface',
    'RasterCaptureService',
    'PrintSurface',
    'ExportStatus',
    'ExportResult',
    'ExportControl',
    'ExportPipeline',
]
