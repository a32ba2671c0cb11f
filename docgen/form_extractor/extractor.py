"""
Form Data Extractor Module.

Converts the raw field values of a document form (strings as typed by the
user, or numbers when the form came from a YAML/JSON file) into the typed
records consumed by the composer.

Rules:
    - Required fields must be non-blank, otherwise ValidationError.
    - Dates are parsed with dateutil; an unparseable date is a
      ValidationError.
    - Numbers may be typed with id-ID separators ("1.234,5"); numeric
      fields that do not parse count as 0.
    - Line items are kept only if description is non-empty AND
      quantity > 0 AND unit price > 0. Zero-priced rows are dropped.

Author: Document Tools Team
"""

import re
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Mapping, Union

from dateutil import parser as date_parser

from docgen.utils.logger import get_logger
from docgen.utils.exceptions import ValidationError
from .models import (
    DocumentType,
    InvoiceData,
    LineItem,
    NoteData,
    PaymentTerms,
    ReceiptData,
)

logger = get_logger(__name__)

DocumentData = Union[ReceiptData, InvoiceData, NoteData]


# "1.234.567" or "1.234,5": dots group thousands, comma marks decimals
ID_GROUPED_NUMBER = re.compile(r"^[+-]?\d{1,3}(\.\d{3})+(,\d+)?$")
# "12,5": comma as the only separator
ID_DECIMAL_NUMBER = re.compile(r"^[+-]?\d+,\d+$")


def parse_number(value: Any) -> Decimal:
    """
    Parse a numeric form value, treating anything unparseable as zero.

    Plain numbers use "." for decimals. Strings typed the Indonesian way
    ("100.000", "1.234,5", "12,5") are accepted as well.

    Example:
        >>> parse_number("1500.50")
        Decimal('1500.50')
        >>> parse_number("1.234,5")
        Decimal('1234.5')
        >>> parse_number("abc")
        Decimal('0')
    """
    if value is None or isinstance(value, bool):
        return Decimal("0")

    text = str(value).strip()
    if isinstance(value, str) and (ID_GROUPED_NUMBER.match(text) or ID_DECIMAL_NUMBER.match(text)):
        text = text.replace(".", "").replace(",", ".")

    try:
        number = Decimal(text)
    except InvalidOperation:
        number = None
    if number is None or not number.is_finite():
        if text:
            logger.info(f"Unparseable number '{value}' counts as 0")
        return Decimal("0")
    return number


class FormDataExtractor:
    """
    Builds typed document records from raw form values.

    Example:
        >>> extractor = FormDataExtractor()
        >>> receipt = extractor.extract(DocumentType.RECEIPT, {
        ...     "number": "R-001", "date": "2026-10-19",
        ...     "customer_name": "Budi",
        ...     "items": [{"description": "Service", "quantity": 1, "price": 100000}],
        ... })
        >>> receipt.items[0].line_total
        Decimal('100000')
    """

    def extract(self, document_type: DocumentType, form: Mapping[str, Any]) -> DocumentData:
        """
        Extract the record for one document type.

        Args:
            document_type: Which form the values come from.
            form: Raw field values keyed by field name.

        Returns:
            ReceiptData, InvoiceData or NoteData.

        Raises:
            ValidationError: If a required field is missing or invalid.
        """
        extractors = {
            DocumentType.RECEIPT: self.extract_receipt,
            DocumentType.INVOICE: self.extract_invoice,
            DocumentType.NOTE: self.extract_note,
        }
        record = extractors[document_type](form)
        logger.debug(f"Extracted {document_type.value} record #{record.number}")
        return record

    def extract_receipt(self, form: Mapping[str, Any]) -> ReceiptData:
        return ReceiptData(
            number=self._required_text(form, "number"),
            date=self._required_date(form, "date"),
            customer_name=self._required_text(form, "customer_name"),
            customer_address=self._optional_text(form, "customer_address"),
            items=self.extract_items(form.get("items") or []),
            notes=self._optional_text(form, "notes"),
        )

    def extract_invoice(self, form: Mapping[str, Any]) -> InvoiceData:
        return InvoiceData(
            number=self._required_text(form, "number"),
            date=self._required_date(form, "date"),
            due_date=self._required_date(form, "due_date"),
            payment_terms=self._payment_terms(form),
            bill_to_name=self._required_text(form, "bill_to_name"),
            bill_to_address=self._optional_text(form, "bill_to_address"),
            items=self.extract_items(form.get("items") or []),
            tax_rate_percent=self._rate(form, "tax_rate"),
            discount_rate_percent=self._rate(form, "discount_rate"),
            notes=self._optional_text(form, "notes"),
        )

    def extract_note(self, form: Mapping[str, Any]) -> NoteData:
        return NoteData(
            number=self._required_text(form, "number"),
            date=self._required_date(form, "date"),
            to=self._required_text(form, "to"),
            sender=self._optional_text(form, "from"),
            subject=self._required_text(form, "subject"),
            message=self._required_text(form, "message"),
        )

    def extract_items(self, rows: Iterable[Mapping[str, Any]]) -> List[LineItem]:
        """
        Convert item rows, dropping incomplete ones.

        A row survives only with a description, quantity > 0 and
        price > 0; free (zero-priced) rows are dropped as well.
        """
        items = []
        for index, row in enumerate(rows):
            description = str(row.get("description") or "")
            quantity = parse_number(row.get("quantity"))
            price = parse_number(row.get("price"))

            if description and quantity > 0 and price > 0:
                items.append(LineItem(description, quantity, price))
            else:
                logger.debug(f"Skipping item row {index}: incomplete or zero-valued")

        return items

    # -------------------------------------------------------------------------
    # Field helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _optional_text(form: Mapping[str, Any], name: str) -> str:
        value = form.get(name)
        return "" if value is None else str(value)

    def _required_text(self, form: Mapping[str, Any], name: str) -> str:
        value = self._optional_text(form, name)
        if not value.strip():
            raise ValidationError(name, value, "Field is required")
        return value

    def _required_date(self, form: Mapping[str, Any], name: str) -> date:
        value = form.get(name)
        if isinstance(value, datetime):
            return value.date()
        if isinstance(value, date):
            return value

        text = self._required_text(form, name)
        try:
            return date_parser.parse(text).date()
        except (ValueError, OverflowError) as e:
            raise ValidationError(name, text, f"Invalid date: {e}")

    @staticmethod
    def _payment_terms(form: Mapping[str, Any]) -> PaymentTerms:
        value = form.get("payment_terms")
        try:
            return PaymentTerms(value)
        except ValueError:
            allowed = ", ".join(t.value for t in PaymentTerms)
            raise ValidationError("payment_terms", value, f"Expected one of: {allowed}")

    @staticmethod
    def _rate(form: Mapping[str, Any], name: str) -> Decimal:
        rate = parse_number(form.get(name))
        if rate < 0:
            raise ValidationError(name, form.get(name), "Rate must not be negative")
        return rate


def extract_form(document_type: DocumentType, form: Dict[str, Any]) -> DocumentData:
    """Convenience wrapper around FormDataExtractor().extract()."""
    return FormDataExtractor().extract(document_type, form)
