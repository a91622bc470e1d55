from datetime import date
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from billing.documents.delivery_note import build_delivery_note, item_row_height
from billing.models import DeliveryNote, DeliveryNoteItem
from billing.utils.delivery_notes import ItemRow, clean_items, compute_totals, vat_label
from core.pdf.instructions import DrawRect

from .conftest import char_measure


def make_note(**overrides):
    values = dict(
        note_number="DN1001",
        client_name="Blue Retail",
        date=date(2024, 3, 15),
        address="4 Long Street, Cape Town",
        contact_person="Thandi",
        contact_number="021 555 0199",
        job_no="J-2041",
        ce_number="CE-77",
        subtotal=Decimal("250.00"),
        vat=Decimal("37.50"),
        total=Decimal("287.50"),
    )
    values.update(overrides)
    return DeliveryNote(**values)


def make_items(count):
    return [
        DeliveryNoteItem(quantity=Decimal("1.00"), description=f"Item {i}", price=Decimal("10.00"))
        for i in range(count)
    ]


def all_texts(pages):
    return [t for page in pages for t in page.texts()]


# --- totals -------------------------------------------------------------

def test_totals_example():
    rows = clean_items([
        {"quantity": 2, "description": "Banner", "price": 100},
        {"quantity": 1, "description": "Flyers", "price": 50},
    ])
    totals = compute_totals(rows)

    assert totals.subtotal == Decimal("250.00")
    assert totals.vat == Decimal("37.50")
    assert totals.total == Decimal("287.50")


def test_empty_items_give_zero_totals():
    totals = compute_totals([])
    assert (totals.subtotal, totals.vat, totals.total) == (Decimal("0.00"),) * 3


def test_vat_rounds_half_up():
    # 0.10 * 0.15 = 0.015 -> 0.02
    totals = compute_totals([ItemRow(quantity=Decimal("1"), description="x", price=Decimal("0.10"))])
    assert totals.vat == Decimal("0.02")
    assert totals.total == Decimal("0.12")


def test_total_is_subtotal_plus_vat():
    rows = clean_items([
        {"quantity": "3", "description": "Poster", "price": "19.99"},
        {"quantity": "0.5", "description": "Lamination", "price": "7.33"},
    ])
    totals = compute_totals(rows)
    assert totals.total == totals.subtotal + totals.vat


def test_custom_vat_rate():
    totals = compute_totals([ItemRow(Decimal("1"), "x", Decimal("100"))], rate="0.10")
    assert totals.vat == Decimal("10.00")


def test_clean_items_drops_invalid_rows():
    rows = clean_items([
        {"quantity": 2, "description": "Valid", "price": 100},
        {"quantity": 1, "description": "Free sample", "price": 0},
        {"quantity": 0, "description": "Zero quantity", "price": 10},
        {"quantity": "0.004", "description": "Rounds to zero", "price": 10},
        {"quantity": "abc", "description": "Bad quantity", "price": 10},
        {"quantity": 1, "description": "   ", "price": 10},
        {"quantity": 1, "description": "No price"},
        {"quantity": 1, "description": "Bad price", "price": "ten"},
        "not a row",
    ])
    assert [r.description for r in rows] == ["Valid", "Free sample"]
    assert rows[1].price == Decimal("0.00")


@pytest.mark.parametrize("item", [
    {"quantity": 1, "description": "Gold", "price": "1e30"},
    {"quantity": "10000000000", "description": "Sand", "price": 1},
])
def test_clean_items_rejects_amounts_too_large_for_the_column(item):
    with pytest.raises(ValidationError) as excinfo:
        clean_items([item])
    assert "items" in excinfo.value.message_dict


def test_vat_label():
    assert vat_label() == "VAT (15%):"
    assert vat_label("0.125") == "VAT (12.5%):"


# --- layout -------------------------------------------------------------

def test_item_row_height():
    assert item_row_height(1) == 20
    assert item_row_height(3) == 50


def test_delivery_note_content():
    pages = build_delivery_note(make_note(), make_items(2), measure=char_measure)
    texts = all_texts(pages)

    assert "DELIVERY NOTE" in texts
    assert "DN #: DN1001" in texts
    assert "Date: 2024/03/15" in texts
    assert "DELIVER TO:" in texts
    assert "Att: Thandi" in texts
    assert "Tel: 021 555 0199" in texts
    assert "CE #: CE-77" in texts
    assert "Job #: J-2041" in texts
    for heading in ("QTY", "DESCRIPTION", "UNIT PRICE", "TOTAL"):
        assert heading in texts
    assert "Subtotal:" in texts and "R 250.00" in texts
    assert "VAT (15%):" in texts and "R 37.50" in texts
    assert "TOTAL:" in texts and "R 287.50" in texts
    assert "Received in good order by:" in pages[-1].texts()


def test_item_rows_show_line_totals():
    items = [DeliveryNoteItem(quantity=Decimal("2.00"), description="Banner", price=Decimal("100.00"))]
    texts = all_texts(build_delivery_note(make_note(), items, measure=char_measure))

    assert "2" in texts
    assert "Banner" in texts
    assert "R 100.00" in texts
    assert "R 200.00" in texts


def test_optional_reference_lines_are_left_out():
    note = make_note(ce_number="", job_no="", contact_person="", contact_number="")
    texts = all_texts(build_delivery_note(note, [], measure=char_measure))

    assert not any(t.startswith(("CE #", "Job #", "Att:", "Tel:")) for t in texts)


def test_long_item_list_breaks_per_row():
    pages = build_delivery_note(make_note(), make_items(60), measure=char_measure)

    assert len(pages) > 1
    total = len(pages)
    for i, page in enumerate(pages, start=1):
        assert f"Page {i} of {total}" in page.texts()

    rows = [t for t in all_texts(pages) if t.startswith("Item ")]
    assert len(rows) == 60
    # signature box is the only rectangle and sits on the last page
    for page in pages[:-1]:
        assert not any(isinstance(ins, DrawRect) for ins in page.instructions)
    assert "Received in good order by:" in pages[-1].texts()


@pytest.mark.parametrize("field", ["note_number", "client_name", "date", "address"])
def test_missing_mandatory_field_fails_fast(field):
    with pytest.raises(ValidationError):
        build_delivery_note(make_note(**{field: ""}), [], measure=char_measure)
