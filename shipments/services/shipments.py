# shipments/services/shipments.py
import logging

from django.core.exceptions import ValidationError
from django.db import transaction

from core.numbering import SHIPMENT_COUNTER, TRACKING_PREFIX, insert_with_identifier, retry_on_conflict
from core.pdf.formatting import money_fits, quantize_money, to_decimal
from shipments.models import Shipment, ShipmentElement, ShipmentStatus

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("sender_name", "sender_address", "recipient_name", "recipient_address")

SHIPMENT_FIELDS = (
    "sender_name", "sender_contact", "sender_address",
    "recipient_name", "recipient_contact", "recipient_address",
    "associated_job_no", "ce_number",
)


def _clean(value):
    if value is None:
        return ""
    return str(value).strip()


def validate_required(data: dict) -> None:
    missing = [name for name in REQUIRED_FIELDS if not _clean(data.get(name))]
    if missing:
        raise ValidationError(
            {name: "This field is required." for name in missing},
            code="required",
        )


def parse_courier_charge(value):
    """
    Decimal amount, or None for blank, zero or non-numeric input.
    An amount too large for the column is a ValidationError.
    """
    amount = to_decimal(value)
    if amount is None:
        return None
    if not money_fits(amount, Shipment._meta.get_field("courier_charge").max_digits):
        raise ValidationError({"courier_charge": "Amount is too large."}, code="max_digits")
    amount = quantize_money(amount)
    return None if amount == 0 else amount


def _shipment_values(data: dict) -> dict:
    values = {name: _clean(data.get(name)) for name in SHIPMENT_FIELDS}
    values["associated_job_no"] = values["associated_job_no"] or None
    values["ce_number"] = values["ce_number"] or None
    values["courier_charge"] = parse_courier_charge(data.get("courier_charge"))
    return values


def _element_rows(elements):
    if elements is None:
        return []
    if not isinstance(elements, (list, tuple)):
        raise ValidationError({"elements": "A list of elements is expected."}, code="invalid")

    rows = []
    for element in elements:
        if not isinstance(element, dict):
            continue
        description = _clean(element.get("description"))
        quantity = _clean(element.get("quantity"))
        # half-filled rows from the packing form are dropped
        if description and quantity:
            rows.append((description, quantity))
    return rows


def _insert_elements(shipment, rows):
    ShipmentElement.objects.bulk_create(
        [ShipmentElement(shipment=shipment, description=d, quantity=q) for d, q in rows]
    )


def create_shipment(data: dict, *, user=None) -> Shipment:
    """
    Create a shipment and its elements with a fresh tracking number.

    Required fields are checked before a number is allocated. The counter,
    the shipment and its elements are written in one transaction.
    """
    validate_required(data)
    values = _shipment_values(data)
    rows = _element_rows(data.get("elements"))

    def insert(tracking_no):
        shipment = Shipment.objects.create(
            tracking_no=tracking_no,
            status=ShipmentStatus.PENDING,
            created_by=user if user is not None and user.is_authenticated else None,
            **values,
        )
        _insert_elements(shipment, rows)
        return shipment

    shipment = retry_on_conflict(insert_with_identifier, SHIPMENT_COUNTER, TRACKING_PREFIX, insert)
    logger.info("Shipment %s created with %d element(s)", shipment.tracking_no, len(rows))
    return shipment


@transaction.atomic
def update_shipment(shipment: Shipment, data: dict) -> Shipment:
    """Overwrite the shipment fields and replace its elements wholesale."""
    validate_required(data)
    values = _shipment_values(data)
    rows = _element_rows(data.get("elements"))
    for name, value in values.items():
        setattr(shipment, name, value)

    status = _clean(data.get("status"))
    if status:
        shipment.status = _valid_status(status)
    shipment.save()

    if "elements" in data:
        shipment.elements.all().delete()
        _insert_elements(shipment, rows)
    return shipment


def _valid_status(status: str) -> str:
    normalized = status.strip().upper().replace(" ", "_")
    if normalized not in ShipmentStatus.values:
        raise ValidationError({"status": f"Unknown status {status!r}."}, code="invalid")
    return normalized


def set_status(shipment: Shipment, status) -> Shipment:
    if not _clean(status):
        raise ValidationError({"status": "Status is required."}, code="required")
    shipment.status = _valid_status(_clean(status))
    shipment.save(update_fields=["status", "updated_at"])
    return shipment


def delete_shipment(shipment: Shipment) -> None:
    tracking_no = shipment.tracking_no
    shipment.delete()
    logger.info("Shipment %s deleted", tracking_no)
