"""
Calculation Module for the Document Generator.

This module provides functionality for:
    - Line totals, receipt totals and invoice summaries
    - Currency, quantity, rate and date display formatting

Author: Document Tools Team
"""

from .engine import CalculationEngine, ReceiptTotals, InvoiceTotals
from .formatters import (
    AmountFormatter,
    format_currency,
    format_rupiah,
    format_plain,
    format_quantity,
    format_rate,
    format_long_date,
)

__all__ = [
    'CalculationEngine',
    'ReceiptTotals',
    'InvoiceTotals',
    'AmountFormatter',
    'format_currency',
    'format_rupiah',
    'format_plain',
    'format_quantity',
    'format_rate',
    'format_long_date',
]
