# core/pdf/response.py
from django.http import HttpResponse

from .render import render_pdf


def pdf_response(pages, filename: str, *, title: str | None = None) -> HttpResponse:
    resp = HttpResponse(render_pdf(pages, title=title), content_type="application/pdf")
    resp["Content-Disposition"] = f"inline; filename={filename}"
    return resp
