# core/pdf/layout.py
"""
Cursor based page layout.

Content is placed top to bottom in blocks. A block that does not fit above
the bottom margin starts a new page; blocks are never split. Page numbers,
the disclaimer and the signature block need the final page count, so they
are stamped in a second pass by ``finish()``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass

from reportlab.lib.pagesizes import A4

from .instructions import (
    BLACK,
    FONT_REGULAR,
    GREY,
    LIGHT_GREY,
    Color,
    DrawImage,
    DrawLine,
    DrawRect,
    DrawText,
    Page,
)
from .text import TextMeasurer, measure_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageGeometry:
    width: float = A4[0]
    height: float = A4[1]
    top_margin: float = 40
    bottom_margin: float = 40
    side_margin: float = 40

    @property
    def top(self) -> float:
        return self.height - self.top_margin

    @property
    def usable_height(self) -> float:
        return self.top - self.bottom_margin

    @property
    def content_width(self) -> float:
        return self.width - self.side_margin * 2


@dataclass(frozen=True)
class SignatureBlock:
    """
    Box drawn on the last page only.

    With ``right_label`` the box is split into two halves by a vertical rule;
    ``bottom_label`` goes in the lower left corner.
    """
    left_label: str
    right_label: str | None = None
    bottom_label: str | None = None
    top: float = 120
    height: float = 60
    border_width: float = 1.5


@dataclass(frozen=True)
class Footer:
    disclaimer: str | None = None
    stamp: str | None = None
    page_numbers: bool = True
    baseline: float = 40
    signature: SignatureBlock | None = None


class PageLayoutEngine:
    def __init__(self, geometry: PageGeometry | None = None, *, footer: Footer | None = None,
                 measure: TextMeasurer = measure_text):
        self.geometry = geometry or PageGeometry()
        self.footer = footer or Footer()
        self.measure = measure
        self.pages: list[Page] = []
        self.page = self._new_page()
        self.cursor = self.geometry.top
        self._finished = False

    # ------------------------------------------------------------------
    # cursor
    # ------------------------------------------------------------------
    def _new_page(self) -> Page:
        return Page(index=len(self.pages), width=self.geometry.width, height=self.geometry.height)

    def new_page(self) -> Page:
        self.pages.append(self.page)
        self.page = self._new_page()
        self.cursor = self.geometry.top
        return self.page

    def fits(self, height: float) -> bool:
        return self.cursor - height >= self.geometry.bottom_margin

    def place_block(self, height: float) -> float:
        """
        Make room for a block of ``height`` points and return its top edge.

        Breaks to a new page first when the block would cross the bottom
        margin. A block taller than a whole page is still placed and
        overflows the margin.
        """
        if not self.fits(height):
            if self.cursor == self.geometry.top:
                logger.debug("Block of %.1fpt overflows page %d", height, self.page.index + 1)
            else:
                self.new_page()
        return self.cursor

    def advance(self, dy: float) -> float:
        self.cursor -= dy
        return self.cursor

    def move_to(self, y: float) -> float:
        self.cursor = y
        return self.cursor

    # ------------------------------------------------------------------
    # drawing, never moves the cursor
    # ------------------------------------------------------------------
    def draw_text(self, text, x: float, y: float | None = None, *, font: str = FONT_REGULAR,
                  size: float = 10, color: Color = BLACK) -> DrawText:
        ins = DrawText(
            text="" if text is None else str(text),
            x=x,
            y=self.cursor if y is None else y,
            font=font,
            size=size,
            color=color,
        )
        self.page.add(ins)
        return ins

    def draw_text_right(self, text, right: float, y: float | None = None, *, font: str = FONT_REGULAR,
                        size: float = 10, color: Color = BLACK) -> DrawText:
        width = self.measure(str(text), font, size)
        return self.draw_text(text, right - width, y, font=font, size=size, color=color)

    def draw_text_centered(self, text, y: float | None = None, *, font: str = FONT_REGULAR,
                           size: float = 10, color: Color = BLACK) -> DrawText:
        width = self.measure(str(text), font, size)
        return self.draw_text(text, (self.geometry.width - width) / 2, y, font=font, size=size, color=color)

    def draw_rect(self, x: float, y: float, width: float, height: float, *,
                  border_width: float = 1, border_color: Color = BLACK) -> DrawRect:
        ins = DrawRect(x=x, y=y, width=width, height=height,
                       border_width=border_width, border_color=border_color)
        self.page.add(ins)
        return ins

    def draw_line(self, start_x: float, start_y: float, end_x: float, end_y: float, *,
                  thickness: float = 1, color: Color = BLACK) -> DrawLine:
        ins = DrawLine(start_x=start_x, start_y=start_y, end_x=end_x, end_y=end_y,
                       thickness=thickness, color=color)
        self.page.add(ins)
        return ins

    def draw_image(self, source: str, x: float, y: float, width: float, height: float) -> DrawImage:
        ins = DrawImage(source=source, x=x, y=y, width=width, height=height)
        self.page.add(ins)
        return ins

    # ------------------------------------------------------------------
    # finalisation
    # ------------------------------------------------------------------
    def finish(self) -> list[Page]:
        if self._finished:
            raise RuntimeError("Layout already finished")
        self._finished = True
        self.pages.append(self.page)

        total = len(self.pages)
        for page in self.pages:
            self.page = page
            page.number = page.index + 1
            page.total = total
            if page.number == total and self.footer.signature:
                self._draw_signature(self.footer.signature)
            self._draw_footer(page)
        return self.pages

    def _draw_footer(self, page: Page) -> None:
        footer = self.footer
        g = self.geometry
        y = footer.baseline
        if footer.disclaimer:
            self.draw_text(footer.disclaimer, g.side_margin, y, size=8, color=GREY)
        if footer.stamp:
            self.draw_text_right(footer.stamp, g.width - g.side_margin, y, color=GREY)
        if footer.page_numbers:
            self.draw_text_centered(f"Page {page.number} of {page.total}", y, color=GREY)

    def _draw_signature(self, block: SignatureBlock) -> None:
        g = self.geometry
        left = g.side_margin
        width = g.content_width
        bottom = block.top - block.height

        self.draw_rect(left, bottom, width, block.height, border_width=block.border_width)
        self.draw_text(block.left_label, left + 10, block.top - 15)
        if block.right_label:
            middle = g.width / 2
            self.draw_line(left, block.top - 20, g.width - g.side_margin, block.top - 20,
                           thickness=0.5, color=LIGHT_GREY)
            self.draw_line(middle, block.top, middle, bottom, thickness=block.border_width)
            self.draw_text(block.right_label, middle + 10, block.top - 15)
        if block.bottom_label:
            self.draw_text(block.bottom_label, left + 10, bottom + 10)
