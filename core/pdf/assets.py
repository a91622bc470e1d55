# core/pdf/assets.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from reportlab.lib.utils import ImageReader

from .formatting import document_setting

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Logo:
    path: str
    width: float
    height: float


def load_logo(path=None, scale=None) -> Logo | None:
    """
    Scaled logo for the document header, or None when there is no usable file.
    A broken image is logged and skipped; the document is still produced.
    """
    path = path or document_setting("LOGO_PATH")
    scale = document_setting("LOGO_SCALE") if scale is None else scale
    if not path:
        return None
    if not Path(path).is_file():
        logger.warning("Logo image %s not found, document is produced without it", path)
        return None

    try:
        width, height = ImageReader(str(path)).getSize()
    except Exception:
        logger.warning("Could not read logo image %s", path, exc_info=True)
        return None
    return Logo(path=str(path), width=width * scale, height=height * scale)
