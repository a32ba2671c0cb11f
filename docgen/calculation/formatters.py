"""
Display Formatters Module.

This module provides the display rules used on documents:
    - Currency/amount values with Indonesian (id-ID) grouping
    - Long-form Indonesian calendar dates
    - Quantities and rates, printed as plain numbers

Author: Document Tools Team
"""

from datetime import date
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Optional, Union

Number = Union[Decimal, int, float]

MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember",
)


class AmountFormatter:
    """
    Formats numbers with id-ID grouping.

    Thousands are grouped with "." and decimals use ",". At most
    `max_fraction_digits` decimals are printed and trailing zeros are
    dropped, so whole amounts have no decimal part at all.

    Example:
        >>> formatter = AmountFormatter()
        >>> formatter.format(Decimal("100000"))
        "100.000"
        >>> formatter.format(Decimal("1234.5"))
        "1.234,5"
    """

    THOUSANDS_SEPARATOR = "."
    DECIMAL_SEPARATOR = ","

    def __init__(self, max_fraction_digits: int = 3) -> None:
        self.max_fraction_digits = max_fraction_digits
        self._quantum = Decimal(1).scaleb(-max_fraction_digits)

    def format(self, amount: Number) -> str:
        value = Decimal(str(amount))
        # Precision must hold every whole digit plus the kept decimals
        with localcontext() as context:
            context.prec = max(context.prec, value.adjusted() + 1 + self.max_fraction_digits)
            value = value.quantize(self._quantum, rounding=ROUND_HALF_UP)

        sign = "-" if value < 0 else ""
        value = value.copy_abs()

        whole, _, fraction = f"{value:f}".partition(".")
        fraction = fraction.rstrip("0")

        groups = []
        while len(whole) > 3:
            groups.insert(0, whole[-3:])
            whole = whole[:-3]
        groups.insert(0, whole)

        text = self.THOUSANDS_SEPARATOR.join(groups)
        if fraction:
            text = f"{text}{self.DECIMAL_SEPARATOR}{fraction}"
        if text == "0":
            sign = ""
        return f"{sign}{text}"


_amount_formatter = AmountFormatter()


def format_currency(amount: Number) -> str:
    """Format an amount without currency symbol, e.g. "2.500"."""
    return _amount_formatter.format(amount)


def format_rupiah(amount: Number) -> str:
    """Format an amount as printed on documents, e.g. "Rp 2.500"."""
    return f"Rp {format_currency(amount)}"


def format_plain(value: Number) -> str:
    """
    Plain number text without grouping or trailing zeros.

    Example:
        >>> format_plain(Decimal("12.50"))
        "12.5"
        >>> format_plain(Decimal("1500"))
        "1500"
    """
    number = Decimal(str(value))
    if number == 0:
        return "0"
    with localcontext() as context:
        context.prec = max(context.prec, len(number.as_tuple().digits))
        number = number.normalize()
    return f"{number:f}"


def format_quantity(quantity: Number) -> str:
    return format_plain(quantity)


def format_rate(rate: Number) -> str:
    """Rates appear in summary labels such as "Diskon (12.5%)"."""
    return format_plain(rate)


def format_long_date(value: Optional[date]) -> str:
    """
    Format a date in long Indonesian form.

    Example:
        >>> format_long_date(date(2026, 10, 19))
        "19 Oktober 2026"
        >>> format_long_date(None)
        ""
    """
    if value is None:
        return ""
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year}"
