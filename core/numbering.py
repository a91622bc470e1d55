# core/numbering.py
import logging

from django.conf import settings
from django.db import IntegrityError, transaction

logger = logging.getLogger(__name__)

SHIPMENT_COUNTER = "shipmentCounter"
DELIVERY_NOTE_COUNTER = "deliveryNoteCounter"

TRACKING_PREFIX = "T"
DELIVERY_NOTE_PREFIX = "DN"


class ConflictError(Exception):
    """Raised when the store rejects a generated identifier as a duplicate."""

    def __init__(self, identifier, message=None):
        self.identifier = identifier
        super().__init__(message or f"Identifier {identifier} already exists.")


def default_start() -> int:
    return int(getattr(settings, "SEQUENCE_DEFAULT_START", 1000))


@transaction.atomic
def allocate(counter_name: str) -> int:
    """
    Increment the named counter and return the new value.

    - The row is locked with select_for_update until the surrounding
      transaction ends (SQLite gets the same effect from BEGIN IMMEDIATE).
    - Call it inside the caller's atomic block so that the counter update
      and the record insert commit or roll back together.
    - A missing row is created at SEQUENCE_DEFAULT_START.
    """
    from core.models import SequenceCounter

    counter, _ = SequenceCounter.objects.select_for_update().get_or_create(
        name=counter_name,
        defaults={"current_number": default_start()},
    )
    counter.current_number += 1
    counter.save(update_fields=["current_number", "updated_at"])
    return counter.current_number


def format_identifier(prefix: str, value: int) -> str:
    return f"{prefix}{value}"


@transaction.atomic
def insert_with_identifier(counter_name: str, prefix: str, insert):
    """
    Allocate the next number, format it and hand it to ``insert``.

    ``insert(identifier)`` creates the dependent record. A uniqueness
    violation raised by it becomes ConflictError and the whole unit,
    counter included, is rolled back.
    """
    identifier = format_identifier(prefix, allocate(counter_name))
    try:
        with transaction.atomic():
            return insert(identifier)
    except IntegrityError as exc:
        raise ConflictError(identifier) from exc


def retry_on_conflict(func, *args, **kwargs):
    """
    Run a numbering unit of work, retrying exactly once on ConflictError.

    The counter rolls back with the failed unit, so the retry allocates the
    same number again. It only succeeds when the clash was transient (a row
    written outside the allocator and removed since). A persistent duplicate
    fails twice and the ConflictError propagates.
    """
    try:
        return func(*args, **kwargs)
    except ConflictError as exc:
        logger.warning("Identifier conflict on %s, retrying once", exc.identifier)
    return func(*args, **kwargs)
