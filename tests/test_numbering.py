from concurrent.futures import ThreadPoolExecutor

import pytest
from django.db import IntegrityError, connection, transaction

from core.models import SequenceCounter
from core.numbering import (
    DELIVERY_NOTE_COUNTER,
    SHIPMENT_COUNTER,
    ConflictError,
    allocate,
    format_identifier,
    insert_with_identifier,
    retry_on_conflict,
)
from shipments.models import Shipment


def set_counter(name, value):
    SequenceCounter.objects.update_or_create(name=name, defaults={"current_number": value})


def current(name):
    return SequenceCounter.objects.get(name=name).current_number


@pytest.mark.django_db
def test_counters_are_seeded_at_1000():
    assert current(SHIPMENT_COUNTER) == 1000
    assert current(DELIVERY_NOTE_COUNTER) == 1000


@pytest.mark.django_db
def test_sequential_allocations_increase_by_one():
    set_counter(SHIPMENT_COUNTER, 1000)
    assert [allocate(SHIPMENT_COUNTER) for _ in range(3)] == [1001, 1002, 1003]
    assert current(SHIPMENT_COUNTER) == 1003


@pytest.mark.django_db
def test_counters_are_independent():
    set_counter(SHIPMENT_COUNTER, 1000)
    set_counter(DELIVERY_NOTE_COUNTER, 1000)
    allocate(SHIPMENT_COUNTER)
    allocate(SHIPMENT_COUNTER)
    assert allocate(DELIVERY_NOTE_COUNTER) == 1001


@pytest.mark.django_db
def test_missing_counter_starts_at_default(settings):
    settings.SEQUENCE_DEFAULT_START = 500
    assert allocate("invoiceCounter") == 501


def test_format_identifier():
    assert format_identifier("T", 1001) == "T1001"
    assert format_identifier("DN", 1001) == "DN1001"


@pytest.mark.django_db
def test_failed_unit_of_work_does_not_consume_a_number():
    set_counter(SHIPMENT_COUNTER, 1000)

    with pytest.raises(RuntimeError):
        with transaction.atomic():
            allocate(SHIPMENT_COUNTER)
            raise RuntimeError("insert failed")

    assert current(SHIPMENT_COUNTER) == 1000
    assert allocate(SHIPMENT_COUNTER) == 1001


@pytest.mark.django_db
def test_insert_receives_formatted_identifier():
    set_counter(SHIPMENT_COUNTER, 1000)
    seen = []
    result = insert_with_identifier(SHIPMENT_COUNTER, "T", lambda ident: seen.append(ident) or ident)
    assert result == "T1001"
    assert seen == ["T1001"]


def _insert_shipment(tracking_no):
    return Shipment.objects.create(
        tracking_no=tracking_no,
        sender_name="A", sender_address="a",
        recipient_name="B", recipient_address="b",
    )


@pytest.mark.django_db
def test_duplicate_identifier_is_a_conflict_and_rolls_back_the_counter():
    set_counter(SHIPMENT_COUNTER, 1000)
    _insert_shipment("T1001")

    with pytest.raises(ConflictError) as excinfo:
        insert_with_identifier(SHIPMENT_COUNTER, "T", _insert_shipment)

    assert excinfo.value.identifier == "T1001"
    assert current(SHIPMENT_COUNTER) == 1000


@pytest.mark.django_db
def test_persistent_duplicate_fails_after_one_retry():
    set_counter(SHIPMENT_COUNTER, 1000)
    _insert_shipment("T1001")

    with pytest.raises(ConflictError) as excinfo:
        retry_on_conflict(insert_with_identifier, SHIPMENT_COUNTER, "T", _insert_shipment)

    assert excinfo.value.identifier == "T1001"
    assert current(SHIPMENT_COUNTER) == 1000
    assert Shipment.objects.count() == 1


@pytest.mark.django_db
def test_retry_on_conflict_retries_exactly_once():
    calls = []

    def flaky():
        calls.append(1)
        if len(calls) == 1:
            raise ConflictError("T1001")
        return "ok"

    assert retry_on_conflict(flaky) == "ok"
    assert len(calls) == 2


def test_retry_on_conflict_gives_up_after_second_failure():
    calls = []

    def always_conflicts():
        calls.append(1)
        raise ConflictError("T1001")

    with pytest.raises(ConflictError):
        retry_on_conflict(always_conflicts)
    assert len(calls) == 2


def test_other_errors_are_not_retried():
    calls = []

    def broken():
        calls.append(1)
        raise IntegrityError("boom")

    with pytest.raises(IntegrityError):
        retry_on_conflict(broken)
    assert len(calls) == 1


@pytest.mark.django_db(transaction=True)
def test_concurrent_allocations_are_unique_and_gapless():
    set_counter(SHIPMENT_COUNTER, 1000)

    def worker(_):
        try:
            with transaction.atomic():
                return allocate(SHIPMENT_COUNTER)
        finally:
            connection.close()

    with ThreadPoolExecutor(max_workers=10) as pool:
        results = list(pool.map(worker, range(100)))

    assert sorted(results) == list(range(1001, 1101))
    assert current(SHIPMENT_COUNTER) == 1100
