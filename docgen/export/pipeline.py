"""
Export Pipeline Module.

Converts the finished fragment on a presentation surface into a single-page
PDF: snapshot at an oversampling factor onto an opaque backdrop, fit the
snapshot onto an A4 portrait page, embed it and save it under a file name
derived from the document.

Empty surfaces and capture/assembly failures are reported as ExportResult
variants; the caller decides whether to fall back to printing. Unexpected
errors raised while capturing or fitting are reported as CaptureError.

Author: Document Tools Team
"""

import asyncio
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Protocol

from config import get_config
from docgen.utils.logger import get_logger
from docgen.utils.exceptions import (
    CaptureError,
    CaptureOrAssemblyError,
    EmptySurfaceError,
    ExportError,
    ExportInProgressError,
)
from docgen.form_extractor.models import DocumentType
from docgen.presentation.surface import PresentationSurface, SurfaceRegistry
from .capture import PlaywrightCaptureService, Snapshot
from .geometry import PageSize, compute_page_fit
from .printer import BrowserPrintSurface
from .writer import PdfPageWriter, export_filename

logger = get_logger(__name__)


class RasterCaptureService(Protocol):
    """Anything able to rasterize a surface."""

    async def capture(
        self,
        surface: PresentationSurface,
        scale: float,
        backdrop: str
    ) -> Snapshot:
        ...


class PrintSurface(Protocol):
    """Anything able to open a print job for a surface."""

    def print(self, surface: PresentationSurface) -> Path:
        ...


class ExportStatus(Enum):
    SUCCESS = "success"
    EMPTY_SURFACE = "empty_surface"
    CAPTURE_FAILED = "capture_failed"


@dataclass(frozen=True)
class ExportResult:
    """
    Outcome of one export.

    Attributes:
        status: What happened
        surface_id: Surface that was exported
        path: Saved PDF (SUCCESS only)
        error: Why nothing was exported (EMPTY_SURFACE and CAPTURE_FAILED)
        message: User-facing notice
    """
    status: ExportStatus
    surface_id: str
    path: Optional[Path] = None
    error: Optional[ExportError] = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.status is ExportStatus.SUCCESS

    @classmethod
    def success(cls, surface_id: str, path: Path) -> 'ExportResult':
        return cls(ExportStatus.SUCCESS, surface_id, path=path)

    @classmethod
    def empty_surface(cls, surface_id: str) -> 'ExportResult':
        message = get_config(
            "export.messages.empty_surface",
            "Silakan buat pratinjau terlebih dahulu!"
        )
        return cls(
            ExportStatus.EMPTY_SURFACE,
            surface_id,
            error=EmptySurfaceError(surface_id),
            message=message,
        )

    @classmethod
    def capture_failed(cls, surface_id: str, error: CaptureOrAssemblyError) -> 'ExportResult':
        message = get_config(
            "export.messages.fallback_prompt",
            "Gagal membuat PDF. Apakah Anda ingin menggunakan fungsi cetak "
            "browser sebagai gantinya?"
        )
        return cls(ExportStatus.CAPTURE_FAILED, surface_id, error=error, message=message)


class ExportControl:
    """
    The user-facing trigger of an export.

    While an export runs the control is disabled and shows the busy label;
    both are restored on every exit path.

    Example:
        >>> control = ExportControl("invoice")
        >>> with control.busy():
        ...     control.label
        'Membuat PDF...'
        >>> control.label, control.disabled
        ('Unduh PDF', False)
    """

    def __init__(
        self,
        name: str,
        idle_label: Optional[str] = None,
        busy_label: Optional[str] = None
    ) -> None:
        self.name = name
        self.idle_label = idle_label or get_config("export.messages.idle_label", "Unduh PDF")
        self.busy_label = busy_label or get_config("export.messages.busy_label", "Membuat PDF...")
        self.label = self.idle_label
        self.disabled = False

    @contextmanager
    def busy(self) -> Iterator['ExportControl']:
        """
        Hold the busy state for the duration of the block.

        Raises:
            ExportInProgressError: If the control is already busy.
        """
        if self.disabled:
            raise ExportInProgressError(self.name)

        previous_label = self.label
        self.label = self.busy_label
        self.disabled = True
        try:
            yield self
        finally:
            self.label = previous_label
            self.disabled = False

    def __repr__(self) -> str:
        return f"ExportControl(name={self.name!r}, label={self.label!r}, disabled={self.disabled})"


class ExportPipeline:
    """
    Rasterize-then-paginate exporter.

    Attributes:
        surfaces: Registry the surfaces are looked up in
        capture: Raster capture service
        writer: PDF page writer
        printer: Print surface used by the fallback
        scale: Oversampling factor of the snapshot
        backdrop: Opaque colour under the snapshot

    Example:
        >>> pipeline = ExportPipeline(surfaces)
        >>> result = asyncio.run(pipeline.export("invoice-preview", DocumentType.INVOICE,
        ...                                      document_number="INV-001"))
        >>> result.path.name
        'faktur-INV-001.pdf'
    """

    def __init__(
        self,
        surfaces: SurfaceRegistry,
        capture: Optional[RasterCaptureService] = None,
        writer: Optional[PdfPageWriter] = None,
        printer: Optional[PrintSurface] = None,
        scale: Optional[float] = None,
        backdrop: Optional[str] = None
    ) -> None:
        self.surfaces = surfaces
        self.capture = capture or PlaywrightCaptureService()
        self.writer = writer or PdfPageWriter()
        self.printer = printer or BrowserPrintSurface()
        self.scale = scale or get_config("export.scale", 2)
        self.backdrop = backdrop or get_config("export.backdrop", "#ffffff")

    @property
    def page(self) -> PageSize:
        return self.writer.page

    async def export(
        self,
        surface_id: str,
        document_type: DocumentType,
        control: Optional[ExportControl] = None,
        document_number: Optional[str] = None
    ) -> ExportResult:
        """
        Export one surface to PDF.

        Args:
            surface_id: Surface holding the finished fragment.
            document_type: Type of the document, used in the file name.
            control: Trigger held busy during the export.
            document_number: Number used in the file name; today's date
                when blank.

        Returns:
            ExportResult with status SUCCESS, EMPTY_SURFACE or CAPTURE_FAILED.

        Raises:
            ExportInProgressError: If the control is already busy.
        """
        surface = self.surfaces.find(surface_id)
        if surface is None or surface.is_empty():
            logger.warning(f"Nothing to export on {surface_id}")
            return ExportResult.empty_surface(surface_id)

        control = control or ExportControl(document_type.value)

        with control.busy():
            logger.info(f"Exporting {surface_id} as {document_type.label}")
            try:
                snapshot = await self.capture.capture(surface, self.scale, self.backdrop)
                placement = compute_page_fit(snapshot.width, snapshot.height, self.page)
                filename = export_filename(document_type, document_number)
                path = await asyncio.to_thread(self.writer.write, snapshot, placement, filename)
            except CaptureOrAssemblyError as e:
                logger.error(f"Export of {surface_id} failed: {e}")
                return ExportResult.capture_failed(surface_id, e)
            except Exception as e:
                logger.exception(f"Unexpected error exporting {surface_id}: {e}")
                return ExportResult.capture_failed(surface_id, CaptureError(surface_id, str(e)))

        return ExportResult.success(surface_id, path)

    def print_fallback(self, surface_id: str) -> Path:
        """
        Open a print job for a surface instead of a PDF export.

        Raises:
            SurfaceNotFoundError: If the surface is not registered.
            PrintError: If the print surface cannot be opened.
        """
        surface = self.surfaces.get(surface_id)
        logger.info(f"Falling back to print for {surface_id}")
        return self.printer.print(surface)
