from .instructions import DrawImage, DrawLine, DrawRect, DrawText, Page
from .layout import Footer, PageGeometry, PageLayoutEngine, SignatureBlock
from .text import font_measure, measure_text, wrap_text

__all__ = [
    "DrawImage",
    "DrawLine",
    "DrawRect",
    "DrawText",
    "Footer",
    "Page",
    "PageGeometry",
    "PageLayoutEngine",
    "SignatureBlock",
    "font_measure",
    "measure_text",
    "wrap_text",
]
