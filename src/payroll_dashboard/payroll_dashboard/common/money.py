from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.constants import DEFAULT_CURRENCY, DEFAULT_DATE_FORMAT, DEFAULT_DECIMAL_PLACES

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "PKR": "Rs",
    "INR": "₹",
    "AED": "د.إ",
    "SAR": "ر.س",
}


def get_currency_symbol(currency: str) -> str:
    return CURRENCY_SYMBOLS.get(currency, currency)


@dataclass(frozen=True)
class FormatConfig:
    """Presentation settings passed explicitly into report assembly."""

    currency: str = DEFAULT_CURRENCY
    symbol: str = ""
    date_format: str = DEFAULT_DATE_FORMAT
    decimal_places: int = DEFAULT_DECIMAL_PLACES

    @property
    def currency_symbol(self) -> str:
        return self.symbol or get_currency_symbol(self.currency)


def round_money(amount: float, places: int = DEFAULT_DECIMAL_PLACES) -> float:
    """Round for display only; computations keep full precision."""
    return round(float(amount), places)


def format_currency(amount: float, fmt: FormatConfig | None = None) -> str:
    fmt = fmt or FormatConfig()
    value = round_money(amount, fmt.decimal_places)
    sign = "-" if value < 0 else ""
    return f"{sign}{fmt.currency_symbol} {abs(value):,.{fmt.decimal_places}f}"


def format_number(value: float, places: int = DEFAULT_DECIMAL_PLACES) -> str:
    """Plain number without trailing zeros (40.0 -> '40', 2.5 -> '2.5')."""
    text = f"{round(float(value), places):.{places}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_date(value: date, fmt: FormatConfig | None = None) -> str:
    fmt = fmt or FormatConfig()
    return value.strftime(fmt.date_format)
