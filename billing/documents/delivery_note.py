# billing/documents/delivery_note.py
"""
Delivery note layout: letterhead, "deliver to" block, priced item table,
totals and a receipt signature box on the last page.
"""
from __future__ import annotations

from django.core.exceptions import ValidationError

from billing.utils.delivery_notes import vat_label
from core.pdf.assets import Logo
from core.pdf.formatting import document_setting, format_currency, format_date, format_quantity
from core.pdf.instructions import DARK_GREY, FONT_BOLD, FONT_REGULAR
from core.pdf.layout import Footer, PageGeometry, PageLayoutEngine, SignatureBlock
from core.pdf.text import font_measure, measure_text, wrap_text

PADDING = 50
LINE_HEIGHT = 15
TEXT_SIZE = 10

BOTTOM_MARGIN = PADDING + 150

# column offsets, QTY and DESCRIPTION from the left edge, prices from the right
QTY_X = 5
DESCRIPTION_X = 80
UNIT_PRICE_FROM_RIGHT = 150
TOTAL_FROM_RIGHT = 60

TABLE_HEADING_HEIGHT = 40
ROW_HEIGHT = 20
TOTALS_HEIGHT = 100

SIGNATURE = SignatureBlock(
    left_label="Received in good order by:",
    bottom_label="Date:",
    top=PADDING + 80,
    height=60,
)


def item_row_height(description_line_count: int) -> float:
    return max(ROW_HEIGHT, description_line_count * LINE_HEIGHT + 5)


def deliver_to_height(address_line_count: int, contact_person=None, contact_number=None) -> float:
    lines = 2 + address_line_count + (1 if contact_person else 0) + (1 if contact_number else 0)
    return lines * LINE_HEIGHT


def _check_required(note):
    missing = [
        name for name in ("note_number", "client_name", "date", "address")
        if not getattr(note, name, None)
    ]
    if missing:
        raise ValidationError(
            f"Cannot build delivery note, missing: {', '.join(missing)}.", code="incomplete"
        )


def build_delivery_note(note, items, logo: Logo | None = None, measure=measure_text):
    """Lay out ``note`` with its ``items`` and return the finished pages."""
    _check_required(note)

    geometry = PageGeometry(top_margin=PADDING, bottom_margin=BOTTOM_MARGIN, side_margin=PADDING)
    engine = PageLayoutEngine(
        geometry,
        footer=Footer(baseline=PADDING / 2, signature=SIGNATURE),
        measure=measure,
    )
    text_measure = font_measure(FONT_REGULAR, TEXT_SIZE, measure)

    _draw_letterhead(engine, note, logo)
    _draw_deliver_to(engine, note, text_measure)
    _draw_table_heading(engine)
    for item in items or []:
        _draw_item(engine, item, text_measure)
    _draw_totals(engine, note)
    return engine.finish()


def _draw_letterhead(engine, note, logo):
    g = engine.geometry
    right = g.width - g.side_margin
    y = engine.cursor

    logo_bottom = y
    if logo is not None:
        engine.draw_image(logo.path, g.side_margin, y - logo.height + 20, logo.width, logo.height)
        logo_bottom = y - logo.height

    engine.draw_text_right("DELIVERY NOTE", right, y, font=FONT_BOLD, size=20)
    y -= 30
    engine.draw_text_right(f"DN #: {note.note_number}", right, y, size=12)
    y -= 15
    engine.draw_text_right(f"Date: {format_date(note.date)}", right, y, size=12)
    y -= 25

    for line in document_setting("COMPANY_ADDRESS_LINES") or []:
        engine.draw_text_right(line, right, y, color=DARK_GREY)
        y -= LINE_HEIGHT

    engine.move_to(min(logo_bottom, y) - 20)


def _draw_deliver_to(engine, note, text_measure):
    g = engine.geometry
    x = g.side_margin
    # left column stops short of the CE / job block
    lines = wrap_text(note.address, text_measure, 280)
    height = deliver_to_height(len(lines), note.contact_person, note.contact_number)

    top = engine.place_block(height)
    y = top
    engine.draw_text("DELIVER TO:", x, y, font=FONT_BOLD)
    y -= LINE_HEIGHT
    engine.draw_text(note.client_name, x, y)
    for line in lines:
        y -= LINE_HEIGHT
        engine.draw_text(line, x, y)
    if note.contact_person:
        y -= LINE_HEIGHT
        engine.draw_text(f"Att: {note.contact_person}", x, y)
    if note.contact_number:
        y -= LINE_HEIGHT
        engine.draw_text(f"Tel: {note.contact_number}", x, y)

    right = g.width - g.side_margin
    ref_y = top
    if note.ce_number:
        engine.draw_text_right(f"CE #: {note.ce_number}", right, ref_y, font=FONT_BOLD)
        ref_y -= LINE_HEIGHT
    if note.job_no:
        engine.draw_text_right(f"Job #: {note.job_no}", right, ref_y, font=FONT_BOLD)

    engine.advance(height + 25)


def _draw_table_heading(engine):
    g = engine.geometry
    left = g.side_margin
    right = g.width - g.side_margin

    top = engine.place_block(TABLE_HEADING_HEIGHT)
    engine.draw_line(left, top, right, top, thickness=1.5)
    y = top - 15
    engine.draw_text("QTY", left + QTY_X, y, font=FONT_BOLD)
    engine.draw_text("DESCRIPTION", left + DESCRIPTION_X, y, font=FONT_BOLD)
    engine.draw_text("UNIT PRICE", right - UNIT_PRICE_FROM_RIGHT, y, font=FONT_BOLD)
    engine.draw_text("TOTAL", right - TOTAL_FROM_RIGHT, y, font=FONT_BOLD)
    engine.draw_line(left, y - 5, right, y - 5, thickness=1.5)
    engine.advance(TABLE_HEADING_HEIGHT)


def _draw_item(engine, item, text_measure):
    g = engine.geometry
    left = g.side_margin
    right = g.width - g.side_margin
    description_width = (right - UNIT_PRICE_FROM_RIGHT - 10) - (left + DESCRIPTION_X)

    lines = wrap_text(item.description, text_measure, description_width)
    height = item_row_height(len(lines))

    top = engine.place_block(height)
    engine.draw_text(format_quantity(item.quantity), left + QTY_X, top)
    y = top
    for line in lines:
        engine.draw_text(line, left + DESCRIPTION_X, y)
        y -= LINE_HEIGHT
    engine.draw_text(format_currency(item.price), right - UNIT_PRICE_FROM_RIGHT, top)
    engine.draw_text(format_currency(item.quantity * item.price), right - TOTAL_FROM_RIGHT, top)
    engine.advance(height)


def _draw_totals(engine, note):
    g = engine.geometry
    right = g.width - g.side_margin
    label_x = right - UNIT_PRICE_FROM_RIGHT
    value_x = right - TOTAL_FROM_RIGHT

    top = engine.place_block(TOTALS_HEIGHT)
    y = top - 20
    engine.draw_line(label_x - 20, y, right, y, thickness=0.5)
    y -= 20
    engine.draw_text("Subtotal:", label_x, y, font=FONT_BOLD)
    engine.draw_text(format_currency(note.subtotal), value_x, y)
    y -= 20
    engine.draw_text(vat_label(), label_x, y, font=FONT_BOLD)
    engine.draw_text(format_currency(note.vat), value_x, y)
    y -= 5
    engine.draw_line(label_x - 20, y, right, y, thickness=1.5)
    y -= 15
    engine.draw_text("TOTAL:", label_x, y, font=FONT_BOLD, size=12)
    engine.draw_text(format_currency(note.total), value_x, y, font=FONT_BOLD, size=12)
    engine.advance(TOTALS_HEIGHT)
