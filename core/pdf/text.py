# core/pdf/text.py
from __future__ import annotations

from typing import Callable

from reportlab.pdfbase.pdfmetrics import stringWidth

from .instructions import FONT_REGULAR

Measure = Callable[[str], float]
TextMeasurer = Callable[[str, str, float], float]


def measure_text(text: str, font: str = FONT_REGULAR, size: float = 10) -> float:
    """Rendered width of ``text`` in points for a standard PDF font."""
    return stringWidth(text or "", font, size)


def font_measure(font: str, size: float, measurer: TextMeasurer = measure_text) -> Measure:
    return lambda text: measurer(text, font, size)


def wrap_text(text, measure: Measure, max_width: float) -> list[str]:
    """
    Greedy word wrap of a single paragraph.

    - newlines count as plain spaces
    - a word wider than ``max_width`` is put on a line of its own, unsplit
    - empty or missing text gives ``[""]`` so callers still reserve a line
    """
    words = str(text).split() if text is not None else []
    if not words:
        return [""]

    lines = []
    current = words[0]
    for word in words[1:]:
        candidate = f"{current} {word}"
        if measure(candidate) <= max_width:
            current = candidate
        else:
            lines.append(current)
            current = word
    lines.append(current)
    return lines
