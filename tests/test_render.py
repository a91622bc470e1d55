import re

from PIL import Image

from core.pdf.instructions import DrawImage
from core.pdf.layout import Footer, PageLayoutEngine, SignatureBlock
from core.pdf.render import render_pdf


def page_count(pdf: bytes) -> int:
    return len(re.findall(rb"/Type /Page(?!s)", pdf))


def test_render_pdf_produces_one_page_per_layout_page():
    engine = PageLayoutEngine(footer=Footer(disclaimer="Disclaimer", signature=SignatureBlock("Sign:")))
    for i in range(80):
        top = engine.place_block(20)
        engine.draw_text(f"line {i}", 50, top)
        engine.draw_line(40, top - 5, 550, top - 5)
        engine.advance(20)
    pages = engine.finish()

    pdf = render_pdf(pages, title="Smoke")

    assert len(pages) > 1
    assert pdf.startswith(b"%PDF")
    assert page_count(pdf) == len(pages)


def test_render_pdf_draws_images(tmp_path):
    logo = tmp_path / "logo.png"
    Image.new("RGB", (40, 20), (200, 0, 0)).save(logo)

    engine = PageLayoutEngine()
    engine.page.add(DrawImage(source=str(logo), x=40, y=700, width=40, height=20))
    pdf = render_pdf(engine.finish())
    assert pdf.startswith(b"%PDF")
    assert page_count(pdf) == 1
