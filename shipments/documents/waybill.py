# shipments/documents/waybill.py
"""
Waybill ("Courier Tracking Document") layout.

Sizes are worked out by the small pure functions at the top before any
block is placed; ``build_waybill`` only positions and draws.
"""
from __future__ import annotations

from django.core.exceptions import ValidationError

from core.pdf.assets import Logo
from core.pdf.formatting import document_setting, format_currency, format_timestamp
from core.pdf.instructions import DARK_GREY, FONT_BOLD, FONT_REGULAR, RED
from core.pdf.layout import Footer, PageGeometry, PageLayoutEngine, SignatureBlock
from core.pdf.text import font_measure, measure_text, wrap_text

PADDING = 40
LINE_HEIGHT = 15
BLOCK_GAP = 10
TEXT_SIZE = 10

TITLE = "Courier Tracking Document"

HEADER_LINE_STEP = 20
HEADER_PADDING = 10

ADDRESS_BOX_HEIGHT = 110
PROJECT_BOX_BASE_HEIGHT = 60

ITEMS_HEADING_HEIGHT = 40
ITEM_MIN_ROW_HEIGHT = 30
ITEM_ROW_MARGIN = 15
# room kept on the right of each row for "Qty", the checkbox and "Packed"
ITEM_RIGHT_RESERVE = 180

# content stops above the signature block and footer
BOTTOM_MARGIN = PADDING + 150

SIGNATURE = SignatureBlock(
    left_label="Sender Signature:",
    right_label="Recipient Signature:",
    top=PADDING + 80,
    height=60,
)


def header_box_height(job_no=None, ce_number=None, courier_charge=None) -> float:
    """Tracking line plus one fixed step for each optional field present."""
    present = sum(1 for value in (job_no, ce_number, courier_charge) if value)
    return HEADER_PADDING + HEADER_LINE_STEP * (1 + present)


def project_box_height(description_line_count: int) -> float:
    return PROJECT_BOX_BASE_HEIGHT + description_line_count * LINE_HEIGHT


def element_row_height(description_line_count: int) -> float:
    return max(ITEM_MIN_ROW_HEIGHT, description_line_count * LINE_HEIGHT + ITEM_ROW_MARGIN)


def _check_required(shipment):
    missing = [
        name for name in (
            "tracking_no", "sender_name", "sender_address", "recipient_name", "recipient_address",
        )
        if not getattr(shipment, name, None)
    ]
    if missing:
        raise ValidationError(
            f"Cannot build waybill, missing: {', '.join(missing)}.", code="incomplete"
        )


def build_waybill(shipment, elements, settings_map=None, job=None, logo: Logo | None = None,
                  measure=measure_text):
    """
    Lay out the waybill for ``shipment`` and return the finished pages.

    ``settings_map`` is the flat settings dict (``disclaimer`` is used),
    ``job`` the associated job record if any.
    """
    _check_required(shipment)
    settings_map = settings_map or {}

    geometry = PageGeometry(top_margin=PADDING, bottom_margin=BOTTOM_MARGIN, side_margin=PADDING)
    engine = PageLayoutEngine(
        geometry,
        footer=Footer(
            disclaimer=settings_map.get("disclaimer") or None,
            stamp=format_timestamp(getattr(shipment, "created_at", None)),
            baseline=PADDING,
            signature=SIGNATURE,
        ),
        measure=measure,
    )
    text_measure = font_measure(FONT_REGULAR, TEXT_SIZE, measure)

    _draw_letterhead(engine, logo)
    _draw_title(engine)
    _draw_header_box(engine, shipment)
    _draw_address_box(engine, shipment, text_measure)
    if job is not None:
        _draw_project_box(engine, job, text_measure)
    _draw_elements(engine, list(elements or []), text_measure)
    return engine.finish()


def _draw_letterhead(engine, logo):
    g = engine.geometry
    y = engine.cursor

    logo_bottom = y
    if logo is not None:
        engine.draw_image(logo.path, g.side_margin, y - logo.height + 20, logo.width, logo.height)
        logo_bottom = y - logo.height

    address_y = y
    for line in document_setting("COMPANY_ADDRESS_LINES") or []:
        engine.draw_text_right(line, g.width - g.side_margin, address_y, color=DARK_GREY)
        address_y -= LINE_HEIGHT

    engine.move_to(min(logo_bottom, address_y) - 20)


def _draw_title(engine):
    engine.draw_text_centered(TITLE, font=FONT_BOLD, size=24)
    engine.advance(30)


def _draw_header_box(engine, shipment):
    g = engine.geometry
    charge = getattr(shipment, "courier_charge", None)
    height = header_box_height(shipment.associated_job_no, shipment.ce_number, charge)

    top = engine.place_block(height)
    engine.draw_rect(g.side_margin, top - height, g.content_width, height, border_width=1.5)

    x = g.side_margin + 10
    y = top - HEADER_LINE_STEP
    engine.draw_text(f"TRACKING #: {shipment.tracking_no}", x, y, font=FONT_BOLD, size=14, color=RED)
    if shipment.associated_job_no:
        y -= HEADER_LINE_STEP
        engine.draw_text(f"JOB #: {shipment.associated_job_no}", x, y, font=FONT_BOLD, size=12)
    if shipment.ce_number:
        y -= HEADER_LINE_STEP
        engine.draw_text(f"CE #: {shipment.ce_number}", x, y, font=FONT_BOLD, size=12)
    if charge:
        y -= HEADER_LINE_STEP
        engine.draw_text(f"Courier Charge: {format_currency(charge)}", x, y, font=FONT_BOLD, size=10)

    engine.advance(height + BLOCK_GAP)


def _draw_party(engine, x, top, heading, name, contact, address, text_measure):
    column_width = engine.geometry.width / 2 - engine.geometry.side_margin - 20
    engine.draw_text(heading, x, top - 20, font=FONT_BOLD, size=12)
    engine.draw_text(f"Name: {name or 'N/A'}", x, top - 40)
    engine.draw_text(f"Contact: {contact or ''}", x, top - 55)
    y = top - 70
    for line in wrap_text(address or "N/A", text_measure, column_width):
        engine.draw_text(line, x, y)
        y -= LINE_HEIGHT


def _draw_address_box(engine, shipment, text_measure):
    g = engine.geometry
    height = ADDRESS_BOX_HEIGHT
    top = engine.place_block(height)
    middle = g.width / 2

    engine.draw_rect(g.side_margin, top - height, g.content_width, height, border_width=1.5)
    engine.draw_line(middle, top, middle, top - height, thickness=1.5)

    _draw_party(engine, g.side_margin + 10, top, "SENDER (CLIENT):",
                shipment.sender_name, shipment.sender_contact, shipment.sender_address, text_measure)
    _draw_party(engine, middle + 10, top, "RECIPIENT:",
                shipment.recipient_name, shipment.recipient_contact, shipment.recipient_address,
                text_measure)

    engine.advance(height + BLOCK_GAP)


def _draw_project_box(engine, job, text_measure):
    g = engine.geometry
    x = g.side_margin + 10
    lines = wrap_text(job.description or "N/A", text_measure, g.content_width - 20)
    height = project_box_height(len(lines))

    top = engine.place_block(height)
    engine.draw_rect(g.side_margin, top - height, g.content_width, height, border_width=1.5)
    engine.draw_text("PROJECT DETAILS:", x, top - 20, font=FONT_BOLD, size=12)
    engine.draw_text(f"Client: {job.customer_name or 'N/A'}", x, top - 40)
    engine.draw_text(f"Product: {job.product_name or 'N/A'}", x, top - 55)

    y = top - 70
    for line in lines:
        engine.draw_text(line, x, y)
        y -= LINE_HEIGHT

    engine.advance(height + BLOCK_GAP)


def _draw_elements(engine, elements, text_measure):
    if not elements:
        return

    g = engine.geometry
    right = g.width - g.side_margin
    description_width = g.content_width - ITEM_RIGHT_RESERVE

    rows = []
    for element in elements:
        lines = wrap_text(element.description or "N/A", text_measure, description_width)
        rows.append((element, lines, element_row_height(len(lines))))

    # the heading never sits alone at the foot of a page
    top = engine.place_block(ITEMS_HEADING_HEIGHT + rows[0][2])
    engine.draw_text("ELEMENTS / ITEMS:", g.side_margin + 10, top - 20, font=FONT_BOLD, size=12)
    engine.advance(ITEMS_HEADING_HEIGHT)

    for element, lines, height in rows:
        top = engine.place_block(height)
        y = top - 10
        for line in lines:
            engine.draw_text(line, g.side_margin + 20, y)
            y -= LINE_HEIGHT
        engine.draw_text(f"Qty: {element.quantity or 'N/A'}", right - 150, top - 10)
        engine.draw_rect(right - 100, top - 12, 15, 15, border_width=1)
        engine.draw_text("Packed", right - 80, top - 10)

        engine.advance(height)
