"""
Unit tests for the calculation engine and display formatters.
"""

from datetime import date
from decimal import Decimal

import pytest

from docgen.calculation import (
    AmountFormatter,
    CalculationEngine,
    format_currency,
    format_long_date,
    format_quantity,
    format_rate,
    format_rupiah,
)
from docgen.form_extractor import LineItem


@pytest.fixture
def engine():
    return CalculationEngine()


def item(quantity, price, description="Item"):
    return LineItem(description, Decimal(str(quantity)), Decimal(str(price)))


class TestReceiptTotals:
    """Test receipt line totals and grand total."""

    def test_line_totals_and_total(self, engine):
        """Test 2 x 1000 and 1 x 500 give 2000, 500 and 2500."""
        totals = engine.receipt_totals([item(2, 1000), item(1, 500)])

        assert totals.line_totals == [Decimal("2000"), Decimal("500")]
        assert totals.total == Decimal("2500")

    def test_empty_receipt_totals_zero(self, engine):
        """Test a receipt without items totals 0."""
        totals = engine.receipt_totals([])
        assert totals.line_totals == []
        assert totals.total == Decimal("0")

    def test_fractional_quantities(self, engine):
        """Test quantities are not restricted to integers."""
        assert engine.subtotal([item("1.5", 2000)]) == Decimal("3000")


class TestInvoiceTotals:
    """Test the discount-then-tax invoice summary."""

    def test_discount_applied_before_tax(self, engine):
        """Test 1000 with 10% discount and 10% tax gives 990."""
        totals = engine.invoice_totals([item(1, 1000)], tax_rate=Decimal("10"), discount_rate=Decimal("10"))

        assert totals.subtotal == Decimal("1000")
        assert totals.discount_amount == Decimal("100")
        assert totals.after_discount == Decimal("900")
        assert totals.tax_amount == Decimal("90")
        assert totals.grand_total == Decimal("990")

    def test_no_rates(self, engine):
        """Test zero rates hide the discount and tax rows."""
        totals = engine.invoice_totals([item(3, 250)], tax_rate=Decimal("0"), discount_rate=Decimal("0"))

        assert totals.grand_total == Decimal("750")
        assert not totals.show_discount
        assert not totals.show_tax

    def test_grand_total_identity(self, engine):
        """Test grand total equals after-discount amount plus tax."""
        totals = engine.invoice_totals(
            [item(3, "333.33"), item(7, "19.99")],
            tax_rate=Decimal("11"),
            discount_rate=Decimal("12.5"),
        )
        assert totals.grand_total == totals.subtotal - totals.discount_amount + totals.tax_amount
        assert totals.show_discount
        assert totals.show_tax


class TestAmountFormatter:
    """Test id-ID amount formatting."""

    @pytest.mark.parametrize("amount, expected", [
        (Decimal("0"), "0"),
        (Decimal("999"), "999"),
        (Decimal("1000"), "1.000"),
        (Decimal("100000"), "100.000"),
        (Decimal("1234567"), "1.234.567"),
        (Decimal("1234.5"), "1.234,5"),
        (Decimal("990.00"), "990"),
        (Decimal("1.23456"), "1,235"),
        (Decimal("-1500"), "-1.500"),
        (2500, "2.500"),
        (Decimal("1e26"), "100.000.000.000.000.000.000.000.000"),
        (Decimal("123456789012345678901234567890.5"), "123.456.789.012.345.678.901.234.567.890,5"),
    ])
    def test_format_currency(self, amount, expected):
        """Test grouping, decimal comma and at most three decimals."""
        assert format_currency(amount) == expected

    def test_rounds_half_up(self):
        """Test rounding of the last kept decimal."""
        assert AmountFormatter(max_fraction_digits=2).format(Decimal("0.125")) == "0,13"

    def test_format_rupiah(self):
        """Test the currency prefix used on documents."""
        assert format_rupiah(Decimal("100000")) == "Rp 100.000"

    def test_format_rupiah_large_amount(self):
        """Test amounts beyond the default decimal precision still format."""
        assert format_rupiah(Decimal("1e26")) == "Rp 100.000.000.000.000.000.000.000.000"

    def test_format_rate(self):
        """Test rates are printed as plain numbers."""
        assert format_rate(Decimal("12.5")) == "12.5"
        assert format_rate(Decimal("10")) == "10"
        assert format_rate(Decimal("10.00")) == "10"
        assert format_rate(Decimal("0")) == "0"

    @pytest.mark.parametrize("quantity, expected", [
        (Decimal("12.5"), "12.5"),
        (Decimal("1500"), "1500"),
        (Decimal("2.000"), "2"),
        (0.25, "0.25"),
    ])
    def test_format_quantity(self, quantity, expected):
        """Test quantities keep a decimal point and no thousands grouping."""
        assert format_quantity(quantity) == expected


class TestLongDate:
    """Test long-form Indonesian dates."""

    @pytest.mark.parametrize("value, expected", [
        (date(2026, 10, 19), "19 Oktober 2026"),
        (date(2026, 1, 1), "1 Januari 2026"),
        (date(2025, 12, 31), "31 Desember 2025"),
    ])
    def test_format_long_date(self, value, expected):
        assert format_long_date(value) == expected

    def test_missing_date_is_blank(self):
        assert format_long_date(None) == ""
