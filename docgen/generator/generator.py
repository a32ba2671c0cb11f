"""
Document Generator Module.

Session-level orchestration of the composition and export engine. One
DocumentGenerator corresponds to one working session: it owns the preview
surfaces of the three document types, their stamp and background settings,
the last record generated for each type and one export control per type.

Workflow per document type:
    1. generate(): extract the form into a record and compose it
    2. apply_stamp() / apply_background(): change the type's config and
       recompose the current record, if any
    3. export(): rasterize the surface into a PDF, or print_fallback()

Author: Document Tools Team
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from docgen.utils.logger import get_logger
from docgen.form_extractor.extractor import FormDataExtractor
from docgen.form_extractor.models import DocumentType
from docgen.themes.stamp import StampConfig, StampThemeEngine
from docgen.themes.background import BackgroundTheme, BackgroundThemeEngine
from docgen.presentation.surface import PresentationSurface, SurfaceRegistry
from docgen.composer.session import SessionState
from docgen.composer.composer import DocumentComposer
from docgen.export.pipeline import (
    ExportControl,
    ExportPipeline,
    ExportResult,
    PrintSurface,
    RasterCaptureService,
)
from docgen.export.writer import PdfPageWriter

logger = get_logger(__name__)


class DocumentGenerator:
    """
    Entry point of the engine for one session.

    Attributes:
        session: Per-type configs and records
        surfaces: Preview surfaces, one per document type
        extractor: Form to record conversion
        stamps: Stamp renderer
        backgrounds: Background theme engine
        composer: Finished fragment assembly
        pipeline: PDF export and print fallback
        controls: Export control of every document type

    Example:
        >>> generator = DocumentGenerator()
        >>> generator.generate(DocumentType.RECEIPT, {
        ...     "number": "R-001", "date": "2026-10-19",
        ...     "customer_name": "Budi",
        ...     "items": [{"description": "Jasa", "quantity": 1, "price": 100000}],
        ... })
        >>> generator.apply_stamp(DocumentType.RECEIPT, {"main_text": "ACME"})
        >>> result = asyncio.run(generator.export(DocumentType.RECEIPT))
    """

    def __init__(
        self,
        capture: Optional[RasterCaptureService] = None,
        printer: Optional[PrintSurface] = None,
        output_dir: Optional[Union[str, Path]] = None
    ) -> None:
        self.session = SessionState()
        self.surfaces = SurfaceRegistry(
            document_type.surface_id for document_type in DocumentType
        )

        self.extractor = FormDataExtractor()
        self.stamps = StampThemeEngine()
        self.backgrounds = BackgroundThemeEngine(self.surfaces)
        self.composer = DocumentComposer(stamps=self.stamps)
        self.pipeline = ExportPipeline(
            self.surfaces,
            capture=capture,
            writer=PdfPageWriter(output_dir=output_dir),
            printer=printer,
        )

        self.controls: Dict[DocumentType, ExportControl] = {
            document_type: ExportControl(document_type.value)
            for document_type in DocumentType
        }

        logger.info("Document generator initialized")

    def surface(self, document_type: DocumentType) -> PresentationSurface:
        return self.surfaces.get(document_type.surface_id)

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def generate(self, document_type: DocumentType, form: Mapping[str, Any]) -> str:
        """
        Extract a form and compose the document onto its surface.

        Args:
            document_type: Which document the form belongs to.
            form: Raw form values.

        Returns:
            Finished fragment.

        Raises:
            ValidationError: If a required field is missing or invalid. The
                session and the surface are left untouched.
        """
        record = self.extractor.extract(document_type, form)
        self.session.store_record(record)

        logger.info(f"Generating {document_type.value} #{record.number}")
        return self._compose(document_type)

    def recompose(self, document_type: DocumentType) -> Optional[str]:
        """
        Compose the current record again with the current config.

        Returns:
            Finished fragment, or None when nothing was generated yet.
        """
        if self.session.record_for(document_type) is None:
            logger.debug(f"No {document_type.value} generated yet, nothing to recompose")
            return None
        return self._compose(document_type)

    def _compose(self, document_type: DocumentType) -> str:
        record = self.session.record_for(document_type)
        config = self.session.config_for(document_type)

        fragment = self.composer.compose(document_type, record, config)
        self.surface(document_type).write(fragment)
        return fragment

    # -------------------------------------------------------------------------
    # Themes
    # -------------------------------------------------------------------------

    def apply_stamp(
        self,
        document_type: DocumentType,
        stamp: Union[StampConfig, Mapping[str, Any]]
    ) -> StampConfig:
        """
        Set the stamp of a document type and recompose it.

        Args:
            document_type: Target document type.
            stamp: Full config, or loose values completed from the
                configured stamp defaults.

        Returns:
            The stamp now in effect.

        Raises:
            UnknownThemeSelectorError: If variant, color or size is unknown.
        """
        if not isinstance(stamp, StampConfig):
            stamp = StampConfig.from_dict(stamp)

        self.session.config_for(document_type).stamp = stamp
        logger.info(
            f"Stamp on {document_type.value}: {stamp.variant.value} "
            f"{stamp.color.value} {stamp.size.value}"
        )

        self.recompose(document_type)
        return stamp

    def clear_stamp(self, document_type: DocumentType) -> None:
        self.session.config_for(document_type).stamp = None
        logger.info(f"Stamp cleared on {document_type.value}")
        self.recompose(document_type)

    def stamp_preview(self, document_type: DocumentType) -> str:
        """Small rendering of the current stamp, "" when none is set."""
        stamp = self.session.config_for(document_type).stamp
        if stamp is None:
            return ""
        return self.stamps.preview(stamp)

    def apply_background(
        self,
        document_type: DocumentType,
        theme: Union[BackgroundTheme, str, None]
    ) -> Optional[BackgroundTheme]:
        """
        Set the background of a document type (None clears it) and
        recompose it.

        Raises:
            UnknownThemeSelectorError: If the theme is unknown.
        """
        resolved = self.backgrounds.apply(document_type.surface_id, theme)
        self.session.config_for(document_type).background = resolved

        self.recompose(document_type)
        return resolved

    def clear_background(self, document_type: DocumentType) -> None:
        self.apply_background(document_type, None)

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    async def export(self, document_type: DocumentType) -> ExportResult:
        """
        Export the document on its surface to PDF.

        The file is named after the number of the current record.

        Raises:
            ExportInProgressError: If this document type is already exporting.
        """
        record = self.session.record_for(document_type)
        number = record.number if record is not None else None

        return await self.pipeline.export(
            document_type.surface_id,
            document_type,
            control=self.controls[document_type],
            document_number=number,
        )

    def print_fallback(self, document_type: DocumentType) -> Path:
        """
        Open the native print job for a document.

        Raises:
            PrintError: If the print surface cannot be opened.
        """
        return self.pipeline.print_fallback(document_type.surface_id)

    def reset(self) -> None:
        """Forget all records and themes and blank every surface."""
        self.session.reset()
        for surface in self.surfaces:
            surface.clear()
        logger.info("Session reset")
