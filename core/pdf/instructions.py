# core/pdf/instructions.py
"""
Abstract drawing instructions.

Layout code only produces these records; core.pdf.render turns a list of
pages into PDF bytes. Coordinates are PDF points with the origin at the
bottom-left corner of the page.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple, Union

Color = Tuple[float, float, float]

BLACK: Color = (0, 0, 0)
DARK_GREY: Color = (0.2, 0.2, 0.2)
GREY: Color = (0.5, 0.5, 0.5)
LIGHT_GREY: Color = (0.75, 0.75, 0.75)
RED: Color = (0.95, 0.1, 0.1)

FONT_REGULAR = "Helvetica"
FONT_BOLD = "Helvetica-Bold"


@dataclass(frozen=True)
class DrawText:
    text: str
    x: float
    y: float
    font: str = FONT_REGULAR
    size: float = 10
    color: Color = BLACK


@dataclass(frozen=True)
class DrawRect:
    x: float
    y: float
    width: float
    height: float
    border_width: float = 1
    border_color: Color = BLACK


@dataclass(frozen=True)
class DrawLine:
    start_x: float
    start_y: float
    end_x: float
    end_y: float
    thickness: float = 1
    color: Color = BLACK


@dataclass(frozen=True)
class DrawImage:
    source: str
    x: float
    y: float
    width: float
    height: float


Instruction = Union[DrawText, DrawRect, DrawLine, DrawImage]


@dataclass
class Page:
    index: int
    width: float
    height: float
    instructions: list = field(default_factory=list)
    # filled in by PageLayoutEngine.finish()
    number: int | None = None
    total: int | None = None

    def add(self, instruction: Instruction) -> None:
        self.instructions.append(instruction)

    def texts(self) -> list[str]:
        return [ins.text for ins in self.instructions if isinstance(ins, DrawText)]
