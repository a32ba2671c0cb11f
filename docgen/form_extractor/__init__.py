"""
Form Extraction Module for the Document Generator.

This module provides functionality for:
    - Typed records for receipts, invoices and memos
    - Required-field validation
    - Line item parsing and filtering

Author: Document Tools Team
"""

from .models import (
    DocumentType,
    PaymentTerms,
    LineItem,
    ReceiptData,
    InvoiceData,
    NoteData,
)
from .extractor import FormDataExtractor, DocumentData, extract_form, parse_number

__all__ = [
    'DocumentType',
    'PaymentTerms',
    'LineItem',
    'ReceiptData',
    'InvoiceData',
    'NoteData',
    'DocumentData',
    'FormDataExtractor',
    'extract_form',
    'parse_number',
]
