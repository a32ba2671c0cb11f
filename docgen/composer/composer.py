"""
Document Composer Module.

Merges an extracted record, its computed totals, the stamp fragment and
the background theme into the finished fragment of one document.

Assembly rules:
    - Title block with the company header, metadata block (number, date and
      type-specific metadata) and an items/body block are always rendered.
    - The stamp is embedded full size as a floating element over the lower
      content region, and only when a stamp is configured.
    - The background theme decorates the root element of the fragment.
    - Notes/message blocks render only when non-empty.
    - Text is inserted as typed (HTML-escaped); dates and amounts go through
      the display formatters.

Composition is deterministic: the same record and config always give the
same fragment.

Author: Document Tools Team
"""

from typing import Any, Dict, List, Optional

from markupsafe import Markup

from config import get_config
from docgen.utils.logger import get_logger
from docgen.calculation.engine import CalculationEngine
from docgen.calculation.formatters import (
    format_long_date,
    format_quantity,
    format_rate,
    format_rupiah,
)
from docgen.form_extractor.extractor import DocumentData
from docgen.form_extractor.models import (
    DocumentType,
    InvoiceData,
    LineItem,
    ReceiptData,
)
from docgen.themes.stamp import StampThemeEngine
from .session import DocumentConfig
from .templates import STYLESHEET, environment, render_print_stylesheet

logger = get_logger(__name__)


class DocumentComposer:
    """
    Builds finished fragments for receipts, invoices and memos.

    Attributes:
        calculator: CalculationEngine used for totals
        stamps: StampThemeEngine used for the embedded stamp
        company: Company header values from configuration
        labels: Footer texts from configuration

    Example:
        >>> composer = DocumentComposer()
        >>> html = composer.compose(DocumentType.RECEIPT, receipt, DocumentConfig())
        >>> "Rp 100.000" in html
        True
    """

    def __init__(
        self,
        calculator: Optional[CalculationEngine] = None,
        stamps: Optional[StampThemeEngine] = None
    ) -> None:
        self.calculator = calculator or CalculationEngine()
        self.stamps = stamps or StampThemeEngine()

        self.company = {
            "name": get_config("company.name", "GeneratorDok"),
            "tagline": get_config("company.tagline", ""),
            "email": get_config("company.email", ""),
        }
        self.labels = {
            "thank_you": get_config("labels.thank_you", ""),
            "electronic_note": get_config("labels.electronic_note", ""),
        }

    def compose(
        self,
        document_type: DocumentType,
        data: DocumentData,
        config: DocumentConfig
    ) -> str:
        """
        Compose the finished fragment of one document.

        Args:
            document_type: Which document to compose.
            data: Record of that document type.
            config: Stamp and background of that document type.

        Returns:
            Finished fragment HTML.

        Raises:
            ValueError: If the record does not belong to document_type.
        """
        if data.document_type is not document_type:
            raise ValueError(
                f"Cannot compose {document_type.value} from a "
                f"{data.document_type.value} record"
            )

        context = self._base_context(document_type, data, config)

        if isinstance(data, ReceiptData):
            context.update(self._receipt_context(data))
        elif isinstance(data, InvoiceData):
            context.update(self._invoice_context(data))

        template = environment.get_template(f"{document_type.value}.html")
        fragment = template.render(**context)

        logger.debug(
            f"Composed {document_type.value} #{data.number} "
            f"(stamp={config.stamp is not None}, "
            f"background={config.background.value if config.background else None})"
        )
        return fragment

    # -------------------------------------------------------------------------
    # Context builders
    # -------------------------------------------------------------------------

    def _base_context(
        self,
        document_type: DocumentType,
        data: DocumentData,
        config: DocumentConfig
    ) -> Dict[str, Any]:
        stamp = None
        if config.stamp is not None:
            stamp = Markup(self.stamps.render_config(config.stamp))

        return {
            "document_type": document_type.value,
            "surface_id": document_type.surface_id,
            "title": document_type.title,
            "company": self.company,
            "labels": self.labels,
            "data": data,
            "date": format_long_date(data.date),
            "stamp": stamp,
            "background": config.background,
        }

    def _item_rows(self, items: List[LineItem]) -> List[Dict[str, str]]:
        line_totals = self.calculator.line_totals(items)
        return [
            {
                "description": item.description,
                "quantity": format_quantity(item.quantity),
                "unit_price": format_rupiah(item.unit_price),
                "line_total": format_rupiah(line_total),
            }
            for item, line_total in zip(items, line_totals)
        ]

    def _receipt_context(self, data: ReceiptData) -> Dict[str, Any]:
        totals = self.calculator.totals_for_receipt(data)
        return {
            "rows": self._item_rows(data.items),
            "totals": {"total": format_rupiah(totals.total)},
        }

    def _invoice_context(self, data: InvoiceData) -> Dict[str, Any]:
        totals = self.calculator.totals_for_invoice(data)
        return {
            "rows": self._item_rows(data.items),
            "due_date": format_long_date(data.due_date),
            "totals": {
                "subtotal": format_rupiah(totals.subtotal),
                "show_discount": totals.show_discount,
                "discount_rate": format_rate(totals.discount_rate),
                "discount_amount": format_rupiah(totals.discount_amount),
                "show_tax": totals.show_tax,
                "tax_rate": format_rate(totals.tax_rate),
                "tax_amount": format_rupiah(totals.tax_amount),
                "grand_total": format_rupiah(totals.grand_total),
            },
        }


def render_page(fragment: str, title: str = "") -> str:
    """
    Wrap a finished fragment into a standalone HTML page with the rendering
    stylesheet, ready for capture.
    """
    return environment.get_template("page.html").render(
        title=title,
        stylesheet=Markup(STYLESHEET),
        print_stylesheet=None,
        fragment=Markup(fragment),
        auto_print=False,
    )


def render_print_page(fragment: str, title: Optional[str] = None) -> str:
    """
    Wrap a finished fragment for the print path: no borders or shadows,
    zero padding, A4 page with the configured print margin, and a script
    opening the print dialog once loaded.
    """
    margin_mm = get_config("print.page_margin_mm", 20)
    return environment.get_template("page.html").render(
        title=title or get_config("print.title", "Cetak Dokumen"),
        stylesheet=Markup(STYLESHEET),
        print_stylesheet=Markup(render_print_stylesheet(margin_mm)),
        fragment=Markup(fragment),
        auto_print=True,
    )
