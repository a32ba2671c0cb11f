"""
PDF Page Writer Module.

Embeds a snapshot into a single PDF page at a computed placement using
reportlab, and names export files after the document.

Author: Document Tools Team
"""

import io
from datetime import date
from pathlib import Path
from typing import Optional, Union

from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from config import get_config
from docgen.utils.logger import get_logger
from docgen.utils.helpers import ensure_directory, generate_timestamp, safe_filename
from docgen.utils.exceptions import PageAssemblyError
from docgen.form_extractor.models import DocumentType
from .capture import Snapshot
from .geometry import PageSize, Placement

logger = get_logger(__name__)


def export_filename(
    document_type: DocumentType,
    document_number: Optional[str] = None,
    today: Optional[date] = None
) -> str:
    """
    Build the export file name.

    Uses the document number, or the ISO date when the number is blank.

    Example:
        >>> export_filename(DocumentType.INVOICE, "INV-001")
        "faktur-INV-001.pdf"
        >>> export_filename(DocumentType.NOTE, "", date(2026, 10, 19))
        "nota-2026-10-19.pdf"
    """
    suffix = (document_number or "").strip()
    if not suffix:
        suffix = today.isoformat() if today else generate_timestamp("%Y-%m-%d")
    return safe_filename(f"{document_type.label}-{suffix}.pdf")


class PdfPageWriter:
    """
    Writes one-page PDFs holding a single image.

    Attributes:
        page: Page size and margin in millimetres
        output_dir: Directory receiving the PDF files

    Example:
        >>> writer = PdfPageWriter(PageSize.from_config(), "outputs")
        >>> writer.write(snapshot, placement, "kwitansi-R-001.pdf")
        PosixPath('outputs/kwitansi-R-001.pdf')
    """

    def __init__(
        self,
        page: Optional[PageSize] = None,
        output_dir: Optional[Union[str, Path]] = None
    ) -> None:
        self.page = page or PageSize.from_config()
        self.output_dir = Path(output_dir or get_config("paths.output_dir", "outputs"))

    def write(self, snapshot: Snapshot, placement: Placement, filename: str) -> Path:
        """
        Place the snapshot on a new page and save the file.

        Args:
            snapshot: Encoded image to embed.
            placement: Where the image goes (top-left origin, mm).
            filename: Name of the PDF inside output_dir.

        Returns:
            Path of the saved PDF.

        Raises:
            PageAssemblyError: If embedding or saving fails.
        """
        filepath = self.output_dir / filename

        try:
            ensure_directory(self.output_dir)
            pdf = canvas.Canvas(
                str(filepath),
                pagesize=(self.page.width * mm, self.page.height * mm),
            )
            pdf.setTitle(Path(filename).stem)

            # reportlab measures y from the bottom edge of the page
            bottom = self.page.height - placement.y - placement.height
            pdf.drawImage(
                ImageReader(io.BytesIO(snapshot.data)),
                placement.x * mm,
                bottom * mm,
                width=placement.width * mm,
                height=placement.height * mm,
            )
            pdf.showPage()
            pdf.save()
        except Exception as e:
            raise PageAssemblyError(str(filepath), str(e)) from e

        logger.info(f"PDF saved: {filepath}")
        return filepath
