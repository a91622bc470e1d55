from datetime import date
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from billing.models import DeliveryNote
from billing.services.delivery_notes import create_delivery_note, delete_delivery_note
from core.models import CoreSetting, SequenceCounter
from core.numbering import DELIVERY_NOTE_COUNTER, SHIPMENT_COUNTER
from core.services.core_settings import get_settings_map, save_settings
from job.models import Job, JobCENumber
from job.services.lookup import job_for_ce_number, job_for_number
from shipments.models import Shipment, ShipmentStatus
from shipments.services.shipments import (
    create_shipment,
    delete_shipment,
    parse_courier_charge,
    set_status,
    update_shipment,
)

pytestmark = pytest.mark.django_db


def counter(name):
    return SequenceCounter.objects.get(name=name).current_number


# --- shipments ----------------------------------------------------------

def test_create_shipment_allocates_tracking_number(shipment_payload, user):
    shipment = create_shipment(shipment_payload, user=user)

    assert shipment.tracking_no == "T1001"
    assert shipment.status == ShipmentStatus.PENDING
    assert shipment.courier_charge == Decimal("350.00")
    assert shipment.created_by == user
    assert [e.description for e in shipment.elements.all()] == ["Pull-up banner", "Flyers A5"]

    second = create_shipment(shipment_payload)
    assert second.tracking_no == "T1002"


def test_half_filled_elements_are_skipped(shipment_payload):
    shipment_payload["elements"] = [
        {"description": "Banner", "quantity": "1"},
        {"description": "", "quantity": "3"},
        {"description": "No quantity", "quantity": ""},
    ]
    shipment = create_shipment(shipment_payload)
    assert shipment.elements.count() == 1


@pytest.mark.parametrize("field", ["sender_name", "sender_address", "recipient_name", "recipient_address"])
def test_missing_required_field_fails_before_allocation(shipment_payload, field):
    shipment_payload[field] = "  "
    with pytest.raises(ValidationError) as excinfo:
        create_shipment(shipment_payload)

    assert field in excinfo.value.message_dict
    assert counter(SHIPMENT_COUNTER) == 1000
    assert not Shipment.objects.exists()


@pytest.mark.parametrize("value, expected", [
    ("350", Decimal("350.00")),
    ("12.345", Decimal("12.35")),
    ("0", None),
    ("0.001", None),
    ("9999999999.99", Decimal("9999999999.99")),
    ("", None),
    ("abc", None),
    (None, None),
])
def test_parse_courier_charge(value, expected):
    assert parse_courier_charge(value) == expected


@pytest.mark.parametrize("value", ["1e30", "10000000000", "-9999999999.996"])
def test_courier_charge_too_large_for_column(value):
    with pytest.raises(ValidationError) as excinfo:
        parse_courier_charge(value)
    assert "courier_charge" in excinfo.value.message_dict


def test_oversized_courier_charge_fails_before_allocation(shipment_payload):
    shipment_payload["courier_charge"] = "1e30"
    with pytest.raises(ValidationError):
        create_shipment(shipment_payload)

    assert counter(SHIPMENT_COUNTER) == 1000
    assert not Shipment.objects.exists()


def test_non_dict_elements_are_skipped(shipment_payload):
    shipment_payload["elements"] = ["Pull-up banner", 3, None, {"description": "Banner", "quantity": "1"}]
    shipment = create_shipment(shipment_payload)
    assert [e.description for e in shipment.elements.all()] == ["Banner"]


def test_elements_must_be_a_list(shipment_payload):
    shipment_payload["elements"] = "Pull-up banner"
    with pytest.raises(ValidationError) as excinfo:
        create_shipment(shipment_payload)

    assert "elements" in excinfo.value.message_dict
    assert counter(SHIPMENT_COUNTER) == 1000


def test_update_with_bad_elements_keeps_existing_ones(shipment_payload):
    shipment = create_shipment(shipment_payload)
    with pytest.raises(ValidationError):
        update_shipment(shipment, {**shipment_payload, "recipient_name": "Green Stores", "elements": "oops"})

    shipment.refresh_from_db()
    assert shipment.recipient_name == shipment_payload["recipient_name"]
    assert shipment.elements.count() == 2


def test_update_shipment_replaces_elements(shipment_payload):
    shipment = create_shipment(shipment_payload)
    payload = {**shipment_payload, "recipient_name": "Green Stores",
               "elements": [{"description": "Poster", "quantity": "10"}]}

    update_shipment(shipment, payload)
    shipment.refresh_from_db()

    assert shipment.recipient_name == "Green Stores"
    assert shipment.tracking_no == "T1001"
    assert [(e.description, e.quantity) for e in shipment.elements.all()] == [("Poster", "10")]


def test_update_without_elements_keeps_them(shipment_payload):
    shipment = create_shipment(shipment_payload)
    payload = {k: v for k, v in shipment_payload.items() if k != "elements"}

    update_shipment(shipment, payload)
    assert shipment.elements.count() == 2


def test_set_status_normalises_label(shipment_payload):
    shipment = create_shipment(shipment_payload)
    set_status(shipment, "in transit")
    shipment.refresh_from_db()
    assert shipment.status == ShipmentStatus.IN_TRANSIT


def test_set_status_rejects_unknown_value(shipment_payload):
    shipment = create_shipment(shipment_payload)
    with pytest.raises(ValidationError):
        set_status(shipment, "LOST")


def test_delete_shipment_removes_elements(shipment_payload):
    shipment = create_shipment(shipment_payload)
    delete_shipment(shipment)
    assert not Shipment.objects.exists()


# --- delivery notes -----------------------------------------------------

def test_create_delivery_note_persists_totals(delivery_note_payload):
    note = create_delivery_note(delivery_note_payload)

    assert note.note_number == "DN1001"
    assert note.date == date(2024, 3, 15)
    assert note.subtotal == Decimal("250.00")
    assert note.vat == Decimal("37.50")
    assert note.total == Decimal("287.50")
    assert note.items.count() == 2


def test_invalid_items_are_neither_saved_nor_billed(delivery_note_payload):
    delivery_note_payload["items"] += [
        {"quantity": 0, "description": "Zero", "price": 99},
        {"quantity": 1, "description": "", "price": 99},
    ]
    note = create_delivery_note(delivery_note_payload)

    assert note.items.count() == 2
    assert note.total == Decimal("287.50")


def test_quantity_rounding_to_zero_is_dropped(delivery_note_payload):
    delivery_note_payload["items"].append({"quantity": "0.004", "description": "Rounds to zero", "price": 10})
    note = create_delivery_note(delivery_note_payload)

    assert note.items.count() == 2
    assert not note.items.filter(quantity=0).exists()
    assert note.total == Decimal("287.50")


def test_oversized_item_price_fails_before_allocation(delivery_note_payload):
    delivery_note_payload["items"].append({"quantity": 1, "description": "Gold", "price": "1e30"})
    with pytest.raises(ValidationError) as excinfo:
        create_delivery_note(delivery_note_payload)

    assert "items" in excinfo.value.message_dict
    assert counter(DELIVERY_NOTE_COUNTER) == 1000
    assert not DeliveryNote.objects.exists()


def test_total_too_large_for_column_fails_before_allocation(delivery_note_payload):
    delivery_note_payload["items"] = [{"quantity": 1000, "description": "Fleet", "price": "100000000000"}]
    with pytest.raises(ValidationError) as excinfo:
        create_delivery_note(delivery_note_payload)

    assert "items" in excinfo.value.message_dict
    assert counter(DELIVERY_NOTE_COUNTER) == 1000


@pytest.mark.parametrize("field", ["client_name", "date", "address", "items"])
def test_delivery_note_missing_field_fails_before_allocation(delivery_note_payload, field):
    delivery_note_payload.pop(field)
    with pytest.raises(ValidationError):
        create_delivery_note(delivery_note_payload)
    assert counter(DELIVERY_NOTE_COUNTER) == 1000


def test_delivery_note_bad_date(delivery_note_payload):
    delivery_note_payload["date"] = "15 March"
    with pytest.raises(ValidationError):
        create_delivery_note(delivery_note_payload)
    assert counter(DELIVERY_NOTE_COUNTER) == 1000


def test_delivery_note_and_shipment_counters_do_not_interfere(delivery_note_payload, shipment_payload):
    create_shipment(shipment_payload)
    create_shipment(shipment_payload)
    note = create_delivery_note(delivery_note_payload)
    assert note.note_number == "DN1001"


def test_delete_delivery_note(delivery_note_payload):
    note = create_delivery_note(delivery_note_payload)
    delete_delivery_note(note)
    assert not DeliveryNote.objects.exists()


# --- jobs / settings ----------------------------------------------------

def test_job_lookup_by_ce_number():
    job = Job.objects.create(job_no="J-1", customer_name="Blue Retail")
    JobCENumber.objects.create(job=job, ce_number="CE-1")
    JobCENumber.objects.create(job=job, ce_number="CE-2")

    assert job_for_ce_number("CE-2") == job
    assert job_for_ce_number("CE-404") is None
    assert job_for_number("J-1") == job
    assert job_for_number(None) is None
    assert job.ce_numbers_list == ["CE-1", "CE-2"]


def test_save_settings_upserts_and_refreshes_cache(django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        save_settings({"disclaimer": "First"})
    assert get_settings_map() == {"disclaimer": "First"}

    with django_capture_on_commit_callbacks(execute=True):
        save_settings({"disclaimer": "Second", "footer": "x"})
    assert get_settings_map() == {"disclaimer": "Second", "footer": "x"}
    assert CoreSetting.objects.count() == 2


def test_settings_cache_is_cleared_only_after_commit(django_capture_on_commit_callbacks):
    with django_capture_on_commit_callbacks(execute=True):
        save_settings({"disclaimer": "Old"})
    assert get_settings_map() == {"disclaimer": "Old"}

    with django_capture_on_commit_callbacks() as callbacks:
        save_settings({"disclaimer": "New"})
        # not committed yet, the cached map is still served
        assert get_settings_map() == {"disclaimer": "Old"}

    assert len(callbacks) == 1
    callbacks[0]()
    assert get_settings_map() == {"disclaimer": "New"}
