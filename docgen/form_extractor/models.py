"""
Document Record Data Classes.

This module defines the typed records produced from raw form input for
each of the three document types, together with the closed sets the
forms select from (document type, payment terms).

Author: Document Tools Team
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import List, Optional


class DocumentType(Enum):
    """
    The three document kinds the generator produces.

    Each kind carries the label used in export file names and the title
    printed at the top of the document.
    """
    RECEIPT = "receipt"
    INVOICE = "invoice"
    NOTE = "note"

    @property
    def label(self) -> str:
        """File name label, distinct from the internal identifier."""
        return _DOCUMENT_LABELS[self]

    @property
    def title(self) -> str:
        return _DOCUMENT_TITLES[self]

    @property
    def surface_id(self) -> str:
        """Identifier of the preview surface owned by this document type."""
        return f"{self.value}-preview"


_DOCUMENT_LABELS = {
    DocumentType.RECEIPT: "kwitansi",
    DocumentType.INVOICE: "faktur",
    DocumentType.NOTE: "nota",
}

_DOCUMENT_TITLES = {
    DocumentType.RECEIPT: "KWITANSI",
    DocumentType.INVOICE: "FAKTUR",
    DocumentType.NOTE: "NOTA DINAS",
}


class PaymentTerms(Enum):
    """Invoice payment terms as offered by the invoice form."""
    NET_30 = "Net 30"
    NET_15 = "Net 15"
    DUE_ON_RECEIPT = "Due on Receipt"
    CASH = "Cash"

    @property
    def display_name(self) -> str:
        return _PAYMENT_TERMS_DISPLAY[self]


_PAYMENT_TERMS_DISPLAY = {
    PaymentTerms.NET_30: "30 Hari",
    PaymentTerms.NET_15: "15 Hari",
    PaymentTerms.DUE_ON_RECEIPT: "Bayar Saat Diterima",
    PaymentTerms.CASH: "Tunai",
}


@dataclass(frozen=True)
class LineItem:
    """
    One billable row of a receipt or invoice.

    Only rows with a description, a positive quantity and a positive unit
    price ever become a LineItem (see FormDataExtractor).
    """
    description: str
    quantity: Decimal
    unit_price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.unit_price


@dataclass(frozen=True)
class ReceiptData:
    """
    Payment receipt record.

    Attributes:
        number: Receipt number as typed by the user
        date: Receipt date
        customer_name: Paying customer
        customer_address: Optional customer address
        items: Ordered line items
        notes: Optional free text printed under the totals
    """
    number: str
    date: date
    customer_name: str
    customer_address: str = ""
    items: List[LineItem] = field(default_factory=list)
    notes: str = ""

    document_type = DocumentType.RECEIPT


@dataclass(frozen=True)
class InvoiceData:
    """
    Invoice record.

    Attributes:
        number: Invoice number
        date: Issue date
        due_date: Payment due date
        payment_terms: Selected payment terms
        bill_to_name: Billed party
        bill_to_address: Optional billing address (may span several lines)
        items: Ordered line items
        tax_rate_percent: Tax rate applied after discount (>= 0)
        discount_rate_percent: Discount rate applied to the subtotal (>= 0)
        notes: Optional free text
    """
    number: str
    date: date
    due_date: date
    payment_terms: PaymentTerms
    bill_to_name: str
    bill_to_address: str = ""
    items: List[LineItem] = field(default_factory=list)
    tax_rate_percent: Decimal = Decimal("0")
    discount_rate_percent: Decimal = Decimal("0")
    notes: str = ""

    document_type = DocumentType.INVOICE


@dataclass(frozen=True)
class NoteData:
    """Internal memo record. `sender` is empty when the form left it blank."""
    number: str
    date: date
    to: str
    subject: str
    message: str
    sender: str = ""

    document_type = DocumentType.NOTE
