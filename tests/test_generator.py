"""
Integration tests for the session-level document generator.
"""

import asyncio

import pytest

from docgen.export import ExportStatus
from docgen.form_extractor import DocumentType
from docgen.themes import BackgroundTheme, StampConfig, StampVariant
from docgen.utils.exceptions import ExportInProgressError, UnknownThemeSelectorError, ValidationError


class TestGenerate:
    """Test generating documents onto their surfaces."""

    def test_generate_writes_surface(self, generator, receipt_form):
        fragment = generator.generate(DocumentType.RECEIPT, receipt_form)

        surface = generator.surface(DocumentType.RECEIPT)
        assert surface.fragment == fragment
        assert "R-001" in fragment
        assert "Rp 100.000" in fragment

    def test_invalid_form_leaves_session_untouched(self, generator, receipt_form):
        """Test a validation error neither stores a record nor writes the surface."""
        receipt_form["number"] = ""

        with pytest.raises(ValidationError):
            generator.generate(DocumentType.RECEIPT, receipt_form)

        assert generator.session.record_for(DocumentType.RECEIPT) is None
        assert generator.surface(DocumentType.RECEIPT).is_empty()

    def test_invalid_form_keeps_previous_document(self, generator, receipt_form):
        first = generator.generate(DocumentType.RECEIPT, receipt_form)

        with pytest.raises(ValidationError):
            generator.generate(DocumentType.RECEIPT, {**receipt_form, "date": "never"})

        assert generator.surface(DocumentType.RECEIPT).fragment == first

    def test_recompose_without_record(self, generator):
        assert generator.recompose(DocumentType.NOTE) is None
        assert generator.surface(DocumentType.NOTE).is_empty()


class TestStamps:
    """Test stamp changes and recomposition."""

    def test_apply_stamp_recomposes(self, generator, receipt_form):
        generator.generate(DocumentType.RECEIPT, receipt_form)

        stamp = generator.apply_stamp(DocumentType.RECEIPT, {"main_text": "ACME", "color": "blue"})

        fragment = generator.surface(DocumentType.RECEIPT).fragment
        assert stamp.main_text == "ACME"
        assert "stamp-container" in fragment
        assert "ACME" in fragment
        assert "#2563eb" in fragment

    def test_stamp_before_generate_is_used_later(self, generator, receipt_form):
        """Test a stamp set before any document is kept for the next one."""
        generator.apply_stamp(DocumentType.RECEIPT, StampConfig(StampVariant.SHIELD, "ACME"))
        assert generator.surface(DocumentType.RECEIPT).is_empty()

        fragment = generator.generate(DocumentType.RECEIPT, receipt_form)
        assert 'data-stamp="shield"' in fragment

    def test_clear_stamp(self, generator, receipt_form):
        generator.generate(DocumentType.RECEIPT, receipt_form)
        generator.apply_stamp(DocumentType.RECEIPT, {"main_text": "ACME"})

        generator.clear_stamp(DocumentType.RECEIPT)

        assert "stamp-container" not in generator.surface(DocumentType.RECEIPT).fragment
        assert generator.stamp_preview(DocumentType.RECEIPT) == ""

    def test_stamps_are_per_document_type(self, generator, receipt_form, invoice_form):
        generator.generate(DocumentType.RECEIPT, receipt_form)
        generator.generate(DocumentType.INVOICE, invoice_form)

        generator.apply_stamp(DocumentType.RECEIPT, {"main_text": "ACME"})

        assert "stamp-container" in generator.surface(DocumentType.RECEIPT).fragment
        assert "stamp-container" not in generator.surface(DocumentType.INVOICE).fragment

    def test_stamp_preview_is_small(self, generator):
        generator.apply_stamp(DocumentType.NOTE, {"variant": "circular", "main_text": "ACME"})
        assert "width: 80px" in generator.stamp_preview(DocumentType.NOTE)

    def test_unknown_stamp_color_raises_error(self, generator):
        with pytest.raises(UnknownThemeSelectorError):
            generator.apply_stamp(DocumentType.NOTE, {"color": "orange"})
        assert generator.session.config_for(DocumentType.NOTE).stamp is None


class TestBackgrounds:
    """Test background changes and recomposition."""

    def test_apply_background(self, generator, invoice_form):
        generator.generate(DocumentType.INVOICE, invoice_form)

        theme = generator.apply_background(DocumentType.INVOICE, "modern")

        surface = generator.surface(DocumentType.INVOICE)
        assert theme is BackgroundTheme.MODERN
        assert surface.decoration == "bg-modern"
        assert "bg-modern" in surface.fragment

    def test_switching_background_replaces_it(self, generator, invoice_form):
        generator.generate(DocumentType.INVOICE, invoice_form)
        generator.apply_background(DocumentType.INVOICE, "modern")

        generator.apply_background(DocumentType.INVOICE, "classic")

        surface = generator.surface(DocumentType.INVOICE)
        assert surface.decoration == "bg-classic"
        assert "bg-modern" not in surface.fragment
        assert "bg-classic" in surface.fragment

    def test_clear_background(self, generator, invoice_form):
        generator.generate(DocumentType.INVOICE, invoice_form)
        generator.apply_background(DocumentType.INVOICE, "watermark")

        generator.clear_background(DocumentType.INVOICE)

        surface = generator.surface(DocumentType.INVOICE)
        assert surface.decoration is None
        assert "bg-" not in surface.fragment
        assert generator.session.config_for(DocumentType.INVOICE).background is None


class TestExport:
    """Test exporting through the generator."""

    def test_export_names_file_after_record(self, generator, invoice_form, tmp_path):
        generator.generate(DocumentType.INVOICE, invoice_form)

        result = asyncio.run(generator.export(DocumentType.INVOICE))

        assert result.status is ExportStatus.SUCCESS
        assert result.path == tmp_path / "faktur-INV-001.pdf"
        assert result.path.read_bytes().startswith(b"%PDF")
        assert not generator.controls[DocumentType.INVOICE].disabled

    def test_export_before_generate(self, generator, capture):
        result = asyncio.run(generator.export(DocumentType.NOTE))

        assert result.status is ExportStatus.EMPTY_SURFACE
        assert capture.captured == []

    def test_export_while_busy_raises_error(self, generator, note_form):
        generator.generate(DocumentType.NOTE, note_form)

        with generator.controls[DocumentType.NOTE].busy():
            with pytest.raises(ExportInProgressError):
                asyncio.run(generator.export(DocumentType.NOTE))

    def test_print_fallback(self, generator, printer, note_form):
        generator.generate(DocumentType.NOTE, note_form)

        generator.print_fallback(DocumentType.NOTE)

        assert printer.printed == [generator.surface(DocumentType.NOTE)]

    def test_reset(self, generator, receipt_form):
        generator.generate(DocumentType.RECEIPT, receipt_form)
        generator.apply_background(DocumentType.RECEIPT, "classic")

        generator.reset()

        surface = generator.surface(DocumentType.RECEIPT)
        assert surface.is_empty()
        assert surface.decoration is None
        assert generator.session.record_for(DocumentType.RECEIPT) is None
