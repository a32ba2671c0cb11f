"""
Calculation Engine Module.

Derives the financial figures printed on receipts and invoices.

Invoice totals are computed in a fixed order, with tax levied on the
post-discount amount:

    subtotal        = sum(line totals)
    discount_amount = subtotal * discount_rate / 100
    after_discount  = subtotal - discount_amount
    tax_amount      = after_discount * tax_rate / 100
    grand_total     = after_discount + tax_amount

Author: Document Tools Team
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import List, Sequence

from docgen.form_extractor.models import InvoiceData, LineItem, ReceiptData

HUNDRED = Decimal("100")


@dataclass(frozen=True)
class ReceiptTotals:
    """Line totals and grand total of a receipt."""
    line_totals: List[Decimal]
    total: Decimal


@dataclass(frozen=True)
class InvoiceTotals:
    """
    Every figure of the invoice summary block.

    Attributes:
        line_totals: quantity x unit price per item, in item order
        subtotal: Sum of line totals
        discount_rate: Discount percentage as entered
        discount_amount: Discount taken off the subtotal
        after_discount: Subtotal minus discount
        tax_rate: Tax percentage as entered
        tax_amount: Tax on the post-discount amount
        grand_total: Amount due
    """
    line_totals: List[Decimal]
    subtotal: Decimal
    discount_rate: Decimal
    discount_amount: Decimal
    after_discount: Decimal
    tax_rate: Decimal
    tax_amount: Decimal
    grand_total: Decimal

    @property
    def show_discount(self) -> bool:
        return self.discount_rate > 0

    @property
    def show_tax(self) -> bool:
        return self.tax_rate > 0


class CalculationEngine:
    """
    Pure functions over line items and rates.

    Example:
        >>> engine = CalculationEngine()
        >>> totals = engine.invoice_totals(items, tax_rate=Decimal(10),
        ...                                discount_rate=Decimal(10))
        >>> totals.grand_total
        Decimal('990')
    """

    @staticmethod
    def line_totals(items: Sequence[LineItem]) -> List[Decimal]:
        return [item.quantity * item.unit_price for item in items]

    def subtotal(self, items: Sequence[LineItem]) -> Decimal:
        return sum(self.line_totals(items), Decimal("0"))

    def receipt_totals(self, items: Sequence[LineItem]) -> ReceiptTotals:
        line_totals = self.line_totals(items)
        return ReceiptTotals(
            line_totals=line_totals,
            total=sum(line_totals, Decimal("0")),
        )

    def invoice_totals(
        self,
        items: Sequence[LineItem],
        tax_rate: Decimal,
        discount_rate: Decimal
    ) -> InvoiceTotals:
        """
        Compute the invoice summary, discount first and tax second.

        Args:
            items: Filtered line items.
            tax_rate: Tax percentage (>= 0).
            discount_rate: Discount percentage (>= 0).

        Returns:
            InvoiceTotals with every intermediate figure.
        """
        line_totals = self.line_totals(items)
        subtotal = sum(line_totals, Decimal("0"))

        discount_amount = subtotal * discount_rate / HUNDRED
        after_discount = subtotal - discount_amount
        tax_amount = after_discount * tax_rate / HUNDRED
        grand_total = after_discount + tax_amount

        return InvoiceTotals(
            line_totals=line_totals,
            subtotal=subtotal,
            discount_rate=discount_rate,
            discount_amount=discount_amount,
            after_discount=after_discount,
            tax_rate=tax_rate,
            tax_amount=tax_amount,
            grand_total=grand_total,
        )

    def totals_for_receipt(self, receipt: ReceiptData) -> ReceiptTotals:
        return self.receipt_totals(receipt.items)

    def totals_for_invoice(self, invoice: InvoiceData) -> InvoiceTotals:
        return self.invoice_totals(
            invoice.items,
            tax_rate=invoice.tax_rate_percent,
            discount_rate=invoice.discount_rate_percent,
        )
