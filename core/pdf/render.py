# core/pdf/render.py
"""Encode laid out pages into PDF bytes with the reportlab canvas."""
from __future__ import annotations

import io
from typing import Iterable

from reportlab.lib.utils import ImageReader
from reportlab.pdfgen import canvas

from .instructions import DrawImage, DrawLine, DrawRect, DrawText, Page


def _draw_text(c, ins: DrawText):
    c.setFont(ins.font, ins.size)
    c.setFillColorRGB(*ins.color)
    c.drawString(ins.x, ins.y, ins.text)


def _draw_rect(c, ins: DrawRect):
    c.setStrokeColorRGB(*ins.border_color)
    c.setLineWidth(ins.border_width)
    c.rect(ins.x, ins.y, ins.width, ins.height, stroke=1, fill=0)


def _draw_line(c, ins: DrawLine):
    c.setStrokeColorRGB(*ins.color)
    c.setLineWidth(ins.thickness)
    c.line(ins.start_x, ins.start_y, ins.end_x, ins.end_y)


def _draw_image(c, ins: DrawImage):
    c.drawImage(ImageReader(ins.source), ins.x, ins.y, ins.width, ins.height, mask="auto")


HANDLERS = {
    DrawText: _draw_text,
    DrawRect: _draw_rect,
    DrawLine: _draw_line,
    DrawImage: _draw_image,
}


def render_pdf(pages: Iterable[Page], *, title: str | None = None) -> bytes:
    buffer = io.BytesIO()
    c = canvas.Canvas(buffer)
    if title:
        c.setTitle(title)

    for page in pages:
        c.setPageSize((page.width, page.height))
        for ins in page.instructions:
            HANDLERS[type(ins)](c, ins)
        c.showPage()

    c.save()
    return buffer.getvalue()
