from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, List, Optional, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.units import mm
from reportlab.platypus import PageBreak, Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ot_payroll.collation import thai_sort_key
from ot_payroll.models import CalculationResult, DayType, StaffTier
from ot_payroll.overtime import format_clock
from ot_payroll.roster import StaffRoster

from .pdf import register_font, sheet_styles
from .thai_dates import buddhist_year, format_thai_date, month_name

GENERAL_SUBTITLE = "พนักงานทั่วไป"
SPECIAL_SUBTITLE = "พนักงานโสตฯ/จ้างเหมาบริการ"
HEADERS = ["วัน/เดือน/ปี", "ชื่อ-สกุล", "เวลามา", "ลายมือชื่อ", "เวลากลับ", "ลายมือชื่อ", "หมายเหตุ"]


@dataclass(frozen=True)
class SignSheetRow:
    staff_name: str
    work_date: date
    ot_start: datetime
    date_label: str
    start_label: str
    end_label: str
    note: str

    def cells(self) -> List[str]:
        return [self.date_label, self.staff_name, self.start_label, "", self.end_label, "", self.note]


@dataclass(frozen=True)
class SignSheetPage:
    tier: StaffTier
    subtitle: str
    month_name: str
    buddhist_year: int
    rows: Tuple[SignSheetRow, ...]


def _rows_for(result: CalculationResult, names: List[str]) -> Tuple[SignSheetRow, ...]:
    rows = [
        SignSheetRow(
            staff_name=name,
            work_date=record.work_date,
            ot_start=record.ot_start,
            date_label=format_thai_date(record.work_date),
            start_label=format_clock(record.ot_start),
            end_label=format_clock(record.ot_end),
            note=DayType.HOLIDAY.label if record.day_type is DayType.HOLIDAY else "",
        )
        for name in names
        for record in result.records_for(name)
    ]
    rows.sort(key=lambda row: (row.ot_start, thai_sort_key(row.staff_name)))
    return tuple(rows)


def build_sign_sheet(result: CalculationResult, month: int, year: int, roster: StaffRoster) -> Tuple[SignSheetPage, ...]:
    """Split the month's OT records into one sign-off page per staff group, dropping empty groups."""

    pages = []
    for tier, subtitle in ((StaffTier.STANDARD, GENERAL_SUBTITLE), (StaffTier.SPECIAL, SPECIAL_SUBTITLE)):
        names = [name for name in result.details if roster.tier_for(name) is tier]
        rows = _rows_for(result, names)
        if rows:
            pages.append(
                SignSheetPage(
                    tier=tier,
                    subtitle=subtitle,
                    month_name=month_name(month),
                    buddhist_year=buddhist_year(year),
                    rows=rows,
                )
            )
    return tuple(pages)


def _build_page_story(page: SignSheetPage, department: str, styles: dict) -> List[Any]:
    story: List[Any] = [
        Paragraph(f"รายชื่อผู้ปฏิบัติงานนอกเวลาราชการ แผนก {department}", styles["title"]),
        Paragraph(f"({page.subtitle})", styles["subtitle"]),
        Paragraph(f"ประจำเดือน {page.month_name} พ.ศ. {page.buddhist_year}", styles["subtitle"]),
        Spacer(1, 10),
    ]
    data = [HEADERS] + [row.cells() for row in page.rows]
    table = Table(
        data,
        colWidths=[30 * mm, 42 * mm, 16 * mm, 28 * mm, 16 * mm, 28 * mm, 20 * mm],
        repeatRows=1,
        rowHeights=[8 * mm] + [10 * mm] * len(page.rows),
    )
    table.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, -1), styles["body"].fontName),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
                ("BACKGROUND", (0, 0), (-1, 0), colors.lightgrey),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                ("ALIGN", (0, 1), (0, -1), "CENTER"),
                ("ALIGN", (2, 1), (2, -1), "CENTER"),
                ("ALIGN", (4, 1), (4, -1), "CENTER"),
                ("ALIGN", (6, 1), (6, -1), "CENTER"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
            ]
        )
    )
    story.append(table)
    return story


def export_sign_sheet_pdf(
    pages: Tuple[SignSheetPage, ...],
    output_path: Path,
    department: str,
    font_path: Optional[Path] = None,
) -> Path:
    styles = sheet_styles(register_font(font_path))
    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=A4,
        leftMargin=15 * mm,
        rightMargin=15 * mm,
        topMargin=15 * mm,
        bottomMargin=15 * mm,
    )

    story: List[Any] = []
    for index, page in enumerate(pages):
        if index:
            story.append(PageBreak())
        story.extend(_build_page_story(page, department, styles))
    if not story:
        story.append(Paragraph("ไม่พบข้อมูลสำหรับสร้างตารางลงชื่อ", styles["subtitle"]))

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.build(story)
    return output_path
