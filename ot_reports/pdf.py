from __future__ import annotations

from pathlib import Path
from typing import Optional

from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont

from ot_payroll.logging import get_logger

logger = get_logger(__name__)

SHEET_FONT = "SheetFont"
FALLBACK_FONT = "Helvetica"


def register_font(font_path: Optional[Path]) -> str:
    """Register a Thai-capable TrueType font, or fall back to Helvetica when none is configured."""

    if font_path is None:
        logger.warning("pdf_font_fallback", font=FALLBACK_FONT, hint="set OTPAY_PDF_FONT_PATH to a Thai TrueType font")
        return FALLBACK_FONT
    if not font_path.exists():
        raise FileNotFoundError(f"PDF font not found at {font_path}")
    if SHEET_FONT not in pdfmetrics.getRegisteredFontNames():
        pdfmetrics.registerFont(TTFont(SHEET_FONT, str(font_path)))
    return SHEET_FONT


def sheet_styles(font_name: str) -> dict[str, ParagraphStyle]:
    styles = getSampleStyleSheet()
    return {
        "title": ParagraphStyle("sheet_title", parent=styles["Title"], fontName=font_name, fontSize=14, leading=18),
        "subtitle": ParagraphStyle("sheet_subtitle", parent=styles["Normal"], fontName=font_name, fontSize=11, leading=14, alignment=1),
        "body": ParagraphStyle("sheet_body", parent=styles["Normal"], fontName=font_name, fontSize=9, leading=11),
        "cell": ParagraphStyle("sheet_cell", parent=styles["Normal"], fontName=font_name, fontSize=7.5, leading=9),
    }
