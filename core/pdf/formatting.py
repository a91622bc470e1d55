# core/pdf/formatting.py
from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.conf import settings
from django.utils import dateformat, timezone

CENT = Decimal("0.01")

DEFAULTS = {
    "CURRENCY_SYMBOL": "R",
    "VAT_RATE": "0.15",
    "DATETIME_FORMAT": "Y/m/d, H:i:s",
    "DATE_FORMAT": "Y/m/d",
    "LOGO_PATH": None,
    "LOGO_SCALE": 0.25,
    "COMPANY_ADDRESS_LINES": [],
}


def document_setting(key):
    config = getattr(settings, "COURIER_DOCUMENTS", {}) or {}
    return config.get(key, DEFAULTS.get(key))


def to_decimal(value):
    """Decimal or None for anything that does not parse as a finite number."""
    if value is None or isinstance(value, bool):
        return None
    try:
        dec = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return dec if dec.is_finite() else None


def quantize_money(value) -> Decimal:
    return Decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def money_fits(value, max_digits: int) -> bool:
    """True when ``value`` rounded to cents fits a DecimalField(max_digits, decimal_places=2)."""
    return abs(Decimal(value)) < Decimal(10) ** (max_digits - 2) - CENT / 2


def format_currency(value) -> str:
    """``format_currency(10)`` -> ``"R 10.00"``."""
    amount = to_decimal(value)
    if amount is None:
        amount = Decimal("0")
    return f"{document_setting('CURRENCY_SYMBOL')} {quantize_money(amount)}"


def format_quantity(value) -> str:
    dec = to_decimal(value)
    if dec is None:
        return str(value or "")
    if dec == dec.to_integral_value():
        return str(dec.quantize(Decimal("1")))
    return f"{dec.normalize():f}"


def format_timestamp(value) -> str:
    if not value:
        return "N/A"
    if isinstance(value, datetime) and timezone.is_aware(value):
        value = timezone.localtime(value)
    return dateformat.format(value, document_setting("DATETIME_FORMAT"))


def format_date(value) -> str:
    if not value:
        return ""
    if isinstance(value, datetime):
        value = timezone.localtime(value).date() if timezone.is_aware(value) else value.date()
    if isinstance(value, str):
        value = date.fromisoformat(value)
    return dateformat.format(value, document_setting("DATE_FORMAT"))
