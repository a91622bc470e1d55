# billing/utils/delivery_notes.py
from dataclasses import dataclass
from decimal import Decimal

from django.core.exceptions import ValidationError

from core.pdf.formatting import document_setting, money_fits, quantize_money, to_decimal

DEC0 = Decimal("0.00")


@dataclass(frozen=True)
class ItemRow:
    quantity: Decimal
    description: str
    price: Decimal

    @property
    def line_total(self) -> Decimal:
        return self.quantity * self.price


@dataclass(frozen=True)
class Totals:
    subtotal: Decimal
    vat: Decimal
    total: Decimal


def _max_digits(field_name: str) -> int:
    from billing.models import DeliveryNoteItem

    return DeliveryNoteItem._meta.get_field(field_name).max_digits


def vat_rate() -> Decimal:
    return Decimal(str(document_setting("VAT_RATE")))


def clean_items(raw_items) -> list[ItemRow]:
    """
    Keep only the rows that are persisted and billed:
    - description is not blank
    - quantity is a number other than zero
    - price is a number (zero is fine, free items exist)
    Everything else is dropped before totals are computed. Zero is judged
    after rounding to cents, as stored. A number too large for its column
    is a ValidationError.
    """
    rows = []
    for item in raw_items or []:
        if not isinstance(item, dict):
            continue
        description = str(item.get("description") or "").strip()
        quantity = to_decimal(item.get("quantity"))
        price = to_decimal(item.get("price"))
        if not description or quantity is None or price is None:
            continue
        if not (money_fits(quantity, _max_digits("quantity")) and money_fits(price, _max_digits("price"))):
            raise ValidationError({"items": f"Amounts for {description!r} are too large."}, code="max_digits")

        quantity = quantize_money(quantity)
        if quantity == 0:
            continue
        rows.append(ItemRow(quantity=quantity, description=description, price=quantize_money(price)))
    return rows


def compute_totals(items, rate=None) -> Totals:
    """
    Final rule:
    - subtotal = sum(quantity x price)
    - vat = subtotal x rate (15% by default)
    - total = subtotal + vat
    """
    rate = vat_rate() if rate is None else Decimal(str(rate))
    subtotal = quantize_money(sum((row.quantity * row.price for row in items), DEC0))
    vat = quantize_money(subtotal * rate)
    return Totals(subtotal=subtotal, vat=vat, total=subtotal + vat)


def vat_label(rate=None) -> str:
    rate = vat_rate() if rate is None else Decimal(str(rate))
    percent = (rate * 100).normalize()
    return f"VAT ({percent:f}%):"
