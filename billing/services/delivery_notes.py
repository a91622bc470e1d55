# billing/services/delivery_notes.py
import logging
from datetime import date

from django.core.exceptions import ValidationError

from billing.models import DeliveryNote, DeliveryNoteItem
from billing.utils.delivery_notes import clean_items, compute_totals
from core.numbering import DELIVERY_NOTE_COUNTER, DELIVERY_NOTE_PREFIX, insert_with_identifier, retry_on_conflict
from core.pdf.formatting import money_fits

logger = logging.getLogger(__name__)


def _text(data, name):
    value = data.get(name)
    return "" if value is None else str(value).strip()


def _parse_date(value):
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError:
        raise ValidationError({"date": "Enter a valid date (YYYY-MM-DD)."}, code="invalid")


def validate_delivery_note(data: dict) -> None:
    errors = {}
    for name in ("client_name", "date", "address"):
        if not _text(data, name):
            errors[name] = "This field is required."
    if not isinstance(data.get("items"), (list, tuple)):
        errors["items"] = "A list of items is required."
    if errors:
        raise ValidationError(errors, code="required")


def create_delivery_note(data: dict, *, user=None) -> DeliveryNote:
    """
    Create a delivery note with a fresh DN number.

    Totals are computed from the valid items only (see clean_items) and
    stored on the note; the counter, note and items share one transaction.
    """
    validate_delivery_note(data)
    note_date = _parse_date(data["date"])
    rows = clean_items(data.get("items"))
    totals = compute_totals(rows)
    total_digits = DeliveryNote._meta.get_field("total").max_digits
    if not all(money_fits(amount, total_digits) for amount in (totals.subtotal, totals.vat, totals.total)):
        raise ValidationError({"items": "Delivery note total is too large."}, code="max_digits")

    def insert(note_number):
        note = DeliveryNote.objects.create(
            note_number=note_number,
            client_name=_text(data, "client_name"),
            date=note_date,
            address=_text(data, "address"),
            contact_person=_text(data, "contact_person"),
            contact_number=_text(data, "contact_number"),
            job_no=_text(data, "job_no"),
            ce_number=_text(data, "ce_number"),
            subtotal=totals.subtotal,
            vat=totals.vat,
            total=totals.total,
            created_by=user if user is not None and user.is_authenticated else None,
        )
        DeliveryNoteItem.objects.bulk_create([
            DeliveryNoteItem(
                delivery_note=note,
                quantity=row.quantity,
                description=row.description,
                price=row.price,
            )
            for row in rows
        ])
        return note

    note = retry_on_conflict(insert_with_identifier, DELIVERY_NOTE_COUNTER, DELIVERY_NOTE_PREFIX, insert)
    logger.info("Delivery note %s created, %d item(s), total %s", note.note_number, len(rows), note.total)
    return note


def delete_delivery_note(note: DeliveryNote) -> None:
    number = note.note_number
    note.delete()
    logger.info("Delivery note %s deleted", number)
