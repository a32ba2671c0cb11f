"""
Tests for document composition.

Tests the finished fragments of the three document types, with and
without stamps and backgrounds, and the standalone page wrappers.
"""

import pytest

from docgen.composer import (
    DocumentComposer,
    DocumentConfig,
    SessionState,
    render_page,
    render_print_page,
)
from docgen.form_extractor import DocumentType, extract_form
from docgen.themes import BackgroundTheme, ColorTheme, SizeClass, StampConfig, StampVariant


@pytest.fixture
def composer():
    return DocumentComposer()


@pytest.fixture
def receipt(receipt_form):
    return extract_form(DocumentType.RECEIPT, receipt_form)


@pytest.fixture
def invoice(invoice_form):
    return extract_form(DocumentType.INVOICE, invoice_form)


@pytest.fixture
def note(note_form):
    return extract_form(DocumentType.NOTE, note_form)


@pytest.fixture
def acme_stamp():
    return StampConfig(StampVariant.CIRCULAR, "ACME", "", "", ColorTheme.BLUE, SizeClass.MEDIUM)


class TestReceiptComposition:
    """Test receipt fragments."""

    def test_plain_receipt(self, composer, receipt):
        """Test a receipt without stamp or background."""
        html = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig())

        assert "KWITANSI" in html
        assert "R-001" in html
        assert "Rp 100.000" in html
        assert "19 Oktober 2026" in html
        assert "Budi Santoso" in html
        assert 'id="receipt-preview"' in html
        assert "stamp-container" not in html
        assert 'class="stamp ' not in html
        assert "bg-" not in html
        assert "data-background" not in html

    def test_company_header_from_configuration(self, composer, receipt):
        html = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig())

        assert "GeneratorDok" in html
        assert "kontak@generatordok.com" in html
        assert "Terima kasih atas kepercayaan Anda!" in html

    def test_stamped_receipt(self, composer, receipt, acme_stamp):
        """Test the stamp is embedded full size in its container."""
        html = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig(stamp=acme_stamp))

        assert "stamp-container" in html
        assert "ACME" in html
        assert "#2563eb" in html
        assert "width: 96px" in html

    def test_background_on_root_element(self, composer, receipt):
        html = composer.compose(
            DocumentType.RECEIPT, receipt, DocumentConfig(background=BackgroundTheme.WATERMARK)
        )
        assert 'class="document-surface document-receipt bg-watermark"' in html
        assert 'data-background="watermark"' in html

    def test_empty_notes_are_omitted(self, composer, receipt):
        html = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig())
        assert "doc-notes" not in html

    def test_composition_is_idempotent(self, composer, receipt, acme_stamp):
        """Test the same record and config always give the same fragment."""
        config = DocumentConfig(stamp=acme_stamp, background=BackgroundTheme.MODERN)
        first = composer.compose(DocumentType.RECEIPT, receipt, config)
        second = composer.compose(DocumentType.RECEIPT, receipt, config)
        assert first == second

    def test_mismatched_record_raises_error(self, composer, receipt):
        with pytest.raises(ValueError):
            composer.compose(DocumentType.INVOICE, receipt, DocumentConfig())


class TestInvoiceComposition:
    """Test invoice fragments."""

    def test_summary_with_discount_and_tax(self, composer, invoice):
        """Test the summary block of 1000 with 10% discount and 10% tax."""
        html = composer.compose(DocumentType.INVOICE, invoice, DocumentConfig())

        assert "FAKTUR" in html
        assert "<span>Rp 1.000</span>" in html
        assert "Diskon (10%):" in html
        assert "<span>-Rp 100</span>" in html
        assert "Pajak (10%):" in html
        assert "<span>Rp 90</span>" in html
        assert "<span>Rp 990</span>" in html

    def test_metadata(self, composer, invoice):
        html = composer.compose(DocumentType.INVOICE, invoice, DocumentConfig())

        assert "INV-001" in html
        assert "18 November 2026" in html
        assert "30 Hari" in html
        assert "PT Maju Jaya" in html
        assert "Transfer ke rekening BCA" in html

    def test_quantity_and_rate_are_plain_numbers(self, composer, invoice_form):
        """Test fractional quantities and rates keep a decimal point and no grouping."""
        invoice_form["items"] = [{"description": "Kabel", "quantity": "12.5", "price": 1000}]
        invoice_form["discount_rate"] = "2.5"
        invoice_form["tax_rate"] = 11
        invoice = extract_form(DocumentType.INVOICE, invoice_form)

        html = composer.compose(DocumentType.INVOICE, invoice, DocumentConfig())

        assert '<td class="center">12.5</td>' in html
        assert "Diskon (2.5%):" in html
        assert "Pajak (11%):" in html
        assert "<span>Rp 12.500</span>" in html

    def test_zero_rates_hide_rows(self, composer, invoice_form):
        invoice_form["tax_rate"] = 0
        invoice_form["discount_rate"] = 0
        invoice = extract_form(DocumentType.INVOICE, invoice_form)

        html = composer.compose(DocumentType.INVOICE, invoice, DocumentConfig())

        assert "Diskon" not in html
        assert "Pajak" not in html
        assert "<span>Rp 1.000</span>" in html


class TestNoteComposition:
    """Test memo fragments."""

    def test_sender_defaults_to_company(self, composer, note):
        html = composer.compose(DocumentType.NOTE, note, DocumentConfig())

        assert "NOTA DINAS" in html
        assert "Seluruh Staf" in html
        assert "Rapat Bulanan" in html
        assert "<p>GeneratorDok</p>" in html
        assert "Dokumen ini dibuat secara elektronik" in html

    def test_message_is_escaped(self, composer, note_form):
        """Test text is inserted as typed, never as markup."""
        note_form["message"] = "<script>alert(1)</script>"
        note = extract_form(DocumentType.NOTE, note_form)

        html = composer.compose(DocumentType.NOTE, note, DocumentConfig())

        assert "&lt;script&gt;" in html
        assert "<script>" not in html


class TestSessionState:
    """Test per-type session configuration."""

    def test_configs_are_independent(self, acme_stamp):
        session = SessionState()
        session.config_for(DocumentType.RECEIPT).stamp = acme_stamp

        assert session.config_for(DocumentType.INVOICE).stamp is None

    def test_reset_clears_everything(self, acme_stamp, receipt):
        session = SessionState()
        session.config_for(DocumentType.RECEIPT).stamp = acme_stamp
        session.store_record(receipt)

        session.reset()

        assert session.config_for(DocumentType.RECEIPT).stamp is None
        assert session.record_for(DocumentType.RECEIPT) is None


class TestPageWrappers:
    """Test the standalone pages used for capture and printing."""

    def test_render_page(self, composer, receipt):
        fragment = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig())
        page = render_page(fragment, title="KWITANSI")

        assert page.startswith("<!DOCTYPE html>")
        assert fragment in page
        assert ".document-surface" in page
        assert "window.print()" not in page

    def test_render_print_page(self, composer, receipt):
        """Test the print page drops chrome and prints on load."""
        fragment = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig())
        page = render_print_page(fragment)

        assert fragment in page
        assert "@page { size: A4; margin: 20mm; }" in page
        assert "box-shadow: none !important" in page
        assert "window.print()" in page
        assert "<title>Cetak Dokumen</title>" in page
