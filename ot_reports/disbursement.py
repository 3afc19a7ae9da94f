from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import mm
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ot_payroll.collation import thai_sort_key
from ot_payroll.holidays import is_holiday
from ot_payroll.models import CalculationResult, DayType, OvertimeRecord, StaffTier
from ot_payroll.overtime import DEFAULT_RULES, RuleTable
from ot_payroll.roster import StaffRoster

from .bahttext import bahttext
from .pdf import register_font, sheet_styles
from .thai_dates import buddhist_year, days_in_month, month_name

MAX_DISPLAY_HOURS = 8
TITLE = "หลักฐานการเบิกจ่ายค่าตอบแทนการปฏิบัติงานนอกเวลาราชการ"
CERTIFICATION = "ขอรับรองว่าผู้มีรายชื่อข้างต้นได้ขึ้นปฏิบัติงาน นอกเวลาราชการจริง"


@dataclass(frozen=True)
class Signatory:
    heading: str
    name: str
    titles: Tuple[str, ...]
    role: str = ""


DEFAULT_SIGNATORIES = (
    Signatory(
        heading="",
        name="นางสาวกาญจนา โลหพันธุ์",
        titles=("นักวิชาการสาธารณสุขชำนาญการ", "หัวหน้ากลุ่มงานพัฒนทรัพยากรบุคคล"),
    ),
    Signatory(
        heading="ได้ตรวจสอบแล้วถูกต้องเห็นควรอนุมัติ",
        name="นายนันท์ชัย กองแก้ว",
        titles=("นายแพทย์ชำนาญการพิเศษ", "หัวหน้ากลุ่มภารกิจด้านพัฒนาระบบบริการและสนับสนุนบริการสุขภาพ"),
        role="ผู้ตรวจสอบ",
    ),
    Signatory(
        heading="ได้ตรวจสอบแล้วถูกต้องเห็นควรอนุมัติ",
        name="นางสาวทิวารินทร์ ทองจรูณ",
        titles=("นักวิชาการเงินและบัญชี",),
    ),
    Signatory(
        heading="คำสั่งผู้อำนวยการ อนุมัติ",
        name="นายแพทย์มงคล ลือชูวงศ์",
        titles=("ผู้อำนวยการโรงพยาบาลสมเด็จพระเจ้าตากสินมหาราช",),
    ),
)


@dataclass(frozen=True)
class DisbursementLine:
    day_type: DayType
    rate: int
    hours_by_day: Dict[int, int]
    hours: int
    pay: int


@dataclass(frozen=True)
class DisbursementEntry:
    sequence: int
    staff_name: str
    position: str
    holiday_line: DisbursementLine
    regular_line: DisbursementLine

    @property
    def total_pay(self) -> int:
        return self.holiday_line.pay + self.regular_line.pay

    @property
    def total_hours(self) -> int:
        return self.holiday_line.hours + self.regular_line.hours


@dataclass(frozen=True)
class DisbursementSheet:
    month: int
    year: int
    month_name: str
    buddhist_year: int
    days_in_month: int
    holiday_days: Tuple[int, ...]
    entries: Tuple[DisbursementEntry, ...]

    @property
    def total_hours(self) -> int:
        return sum(entry.total_hours for entry in self.entries)

    @property
    def total_pay(self) -> int:
        return sum(entry.total_pay for entry in self.entries)

    @property
    def total_pay_text(self) -> str:
        return bahttext(self.total_pay)


def _build_line(records: Iterable[OvertimeRecord], day_type: DayType, rate: int) -> DisbursementLine:
    matching = [record for record in records if record.day_type is day_type]
    hours_by_day: Dict[int, int] = {}
    for record in matching:
        hours_by_day.setdefault(record.work_date.day, min(record.hours, MAX_DISPLAY_HOURS))
    return DisbursementLine(
        day_type=day_type,
        rate=rate,
        hours_by_day=hours_by_day,
        hours=sum(record.hours for record in matching),
        pay=sum(record.pay for record in matching),
    )


def _sheet_order(roster: StaffRoster):
    def key(name: str):
        rank = roster.display_rank(name)
        if rank is not None:
            return (0, rank, ())
        return (1, 0, thai_sort_key(name))

    return key


def build_disbursement(
    result: CalculationResult,
    month: int,
    year: int,
    custom_holidays: Iterable[int],
    roster: StaffRoster,
    rules: RuleTable = DEFAULT_RULES,
) -> DisbursementSheet:
    """Lay out the payroll-approval grid for standard-tier staff.

    Special-tier staff are paid through a separate channel and never appear
    here.
    """

    holidays = frozenset(custom_holidays)
    holiday_rate = rules.rate_for(StaffTier.STANDARD, DayType.HOLIDAY)
    regular_rate = rules.rate_for(StaffTier.STANDARD, DayType.REGULAR)
    total_days = days_in_month(year, month)

    names = sorted(
        (name for name in result.details if roster.tier_for(name) is StaffTier.STANDARD),
        key=_sheet_order(roster),
    )
    entries = []
    for sequence, name in enumerate(names, start=1):
        records = result.records_for(name)
        entries.append(
            DisbursementEntry(
                sequence=sequence,
                staff_name=name,
                position=roster.position_for(name),
                holiday_line=_build_line(records, DayType.HOLIDAY, holiday_rate),
                regular_line=_build_line(records, DayType.REGULAR, regular_rate),
            )
        )

    return DisbursementSheet(
        month=month,
        year=year,
        month_name=month_name(month),
        buddhist_year=buddhist_year(year),
        days_in_month=total_days,
        holiday_days=tuple(day for day in range(1, total_days + 1) if is_holiday(date(year, month, day), holidays)),
        entries=tuple(entries),
    )


def _amount(value: int) -> str:
    return f"{value:,}" if value > 0 else ""


def _line_cells(line: DisbursementLine, days: int) -> List[str]:
    return [str(line.rate)] + [str(line.hours_by_day.get(day, "")) for day in range(1, days + 1)] + [
        str(line.hours) if line.hours > 0 else "",
        _amount(line.pay),
    ]


def _grid_rows(sheet: DisbursementSheet, styles: dict) -> Tuple[List[List[Any]], List[Tuple]]:
    days = sheet.days_in_month
    cell = styles["cell"]
    header_top = ["ลำดับ", "ชื่อ-สกุล", "ตำแหน่ง", "ตอบแทน", "วันที่ขึ้นปฏิบัติราชการ"] + [""] * (days - 1) + [
        "จำนวนชั่วโมง",
        "จำนวนเงิน",
        "จำนวนเงินรวม",
        "ลายมือชื่อ",
    ]
    header_bottom = ["", "", "", "ชั่วโมงละบาท"] + [str(day) for day in range(1, days + 1)] + ["", "", "", ""]
    rows: List[List[Any]] = [header_top, header_bottom]

    first_day_col = 4
    last_day_col = first_day_col + days - 1
    commands: List[Tuple] = [
        ("SPAN", (first_day_col, 0), (last_day_col, 0)),
    ]
    for col in (0, 1, 2, last_day_col + 1, last_day_col + 2, last_day_col + 3, last_day_col + 4):
        commands.append(("SPAN", (col, 0), (col, 1)))
    for day in sheet.holiday_days:
        commands.append(("BACKGROUND", (first_day_col + day - 1, 1), (first_day_col + day - 1, -2), colors.lightgrey))

    for entry in sheet.entries:
        top = len(rows)
        rows.append(
            [str(entry.sequence), Paragraph(entry.staff_name, cell), Paragraph(entry.position.replace("\n", "<br/>"), cell)]
            + _line_cells(entry.holiday_line, days)
            + [_amount(entry.total_pay), ""]
        )
        rows.append(["", "", ""] + _line_cells(entry.regular_line, days) + ["", ""])
        for col in (0, 1, 2, last_day_col + 3, last_day_col + 4):
            commands.append(("SPAN", (col, top), (col, top + 1)))

    total_label = f"รวมรายการจ่ายทั้งสิ้น {sheet.total_pay:,} บาท ({sheet.total_pay_text})"
    total = f"{sheet.total_pay:,}"
    rows.append([total_label] + [""] * (last_day_col - 1) + ["รวม", str(sheet.total_hours), total, total, ""])
    commands.append(("SPAN", (0, -1), (last_day_col - 1, -1)))
    return rows, commands


def _signature_block(signatories: Sequence[Signatory], styles: dict) -> Table:
    body = styles["body"]
    cells = []
    for signatory in signatories:
        role = f" {signatory.role}" if signatory.role else ""
        lines = [signatory.heading or "&nbsp;", "", f"ลงชื่อ............................................{role}", f"({signatory.name})"]
        lines.extend(signatory.titles)
        cells.append(Paragraph("<br/>".join(lines), body))
    width = 270 * mm / max(len(cells), 1)
    return Table([cells], colWidths=[width] * len(cells))


def export_disbursement_pdf(
    sheet: DisbursementSheet,
    output_path: Path,
    organization: str,
    department: str,
    signatories: Sequence[Signatory] = DEFAULT_SIGNATORIES,
    font_path: Optional[Path] = None,
) -> Path:
    font_name = register_font(font_path)
    styles = sheet_styles(font_name)
    doc = SimpleDocTemplate(
        str(output_path),
        pagesize=landscape(A4),
        leftMargin=10 * mm,
        rightMargin=10 * mm,
        topMargin=10 * mm,
        bottomMargin=10 * mm,
    )

    rows, span_commands = _grid_rows(sheet, styles)
    day_width = 5 * mm
    col_widths = [6 * mm, 30 * mm, 22 * mm, 10 * mm] + [day_width] * sheet.days_in_month + [9 * mm, 11 * mm, 12 * mm, 12 * mm]
    grid = Table(rows, colWidths=col_widths, repeatRows=2)
    grid.setStyle(
        TableStyle(
            [
                ("FONTNAME", (0, 0), (-1, -1), font_name),
                ("FONTSIZE", (0, 0), (-1, -1), 6.5),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
                ("ALIGN", (0, 0), (-1, -1), "CENTER"),
                ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
                ("LEFTPADDING", (0, 0), (-1, -1), 1),
                ("RIGHTPADDING", (0, 0), (-1, -1), 1),
            ]
            + span_commands
        )
    )

    story: List[Any] = [
        Paragraph(TITLE, styles["title"]),
        Paragraph(
            f"ส่วนราชการ{organization} ประจำเดือน {sheet.month_name} พ.ศ. {sheet.buddhist_year} แผนก {department}",
            styles["subtitle"],
        ),
        Spacer(1, 6),
        grid,
        Spacer(1, 10),
        Paragraph(CERTIFICATION, styles["body"]),
        Spacer(1, 6),
        _signature_block(signatories, styles),
    ]

    output_path.parent.mkdir(parents=True, exist_ok=True)
    doc.build(story)
    return output_path
