from __future__ import annotations

import argparse
import json
from datetime import date
from pathlib import Path

from ot_payroll.calculator import OvertimeCalculator
from ot_payroll.config import Settings, get_settings, load_configured_roster
from ot_payroll.csv_io import export_attendance, import_attendance
from ot_payroll.logging import configure_logging, get_logger
from ot_payroll.models import CalculationResult
from ot_payroll.roster import StaffRoster, load_roster
from ot_payroll.views import format_summary

from .disbursement import build_disbursement, export_disbursement_pdf
from .exporter import export_csv, result_rows
from .sign_sheet import build_sign_sheet, export_sign_sheet_pdf

logger = get_logger(__name__)


def holiday_day(value: str) -> int:
    try:
        day = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid day of month: {value!r}")
    if not 1 <= day <= 31:
        raise argparse.ArgumentTypeError(f"day of month must be between 1 and 31, got {day}")
    return day


def month_number(value: str) -> int:
    month = int(value)
    if not 1 <= month <= 12:
        raise argparse.ArgumentTypeError(f"month must be between 1 and 12, got {month}")
    return month


def pdf_path(value: str | None) -> Path:
    if not value:
        raise ValueError("Sheets must be exported to a PDF file.")
    path = Path(value)
    if path.suffix.lower() != ".pdf":
        raise ValueError("Sheets are only supported as PDF exports.")
    return path


def roster_from_args(args: argparse.Namespace, settings: Settings) -> StaffRoster:
    if args.roster:
        return load_roster(Path(args.roster))
    return load_configured_roster(settings)


def calculate_from_args(args: argparse.Namespace, settings: Settings, roster: StaffRoster) -> CalculationResult:
    source = Path(args.input) if args.input else settings.attendance_path
    if source is None:
        raise ValueError("No attendance file given. Pass --input or set OTPAY_ATTENDANCE_PATH.")
    events = import_attendance(source)
    calculator = OvertimeCalculator(roster=roster, tz=settings.tzinfo)
    return calculator.calculate(args.month, args.year, args.holiday, events)


def cmd_summary(args: argparse.Namespace, settings: Settings) -> None:
    roster = roster_from_args(args, settings)
    result = calculate_from_args(args, settings, roster)
    print(format_summary(result, details=args.details))


def cmd_sign_sheet(args: argparse.Namespace, settings: Settings) -> None:
    output_path = pdf_path(args.output)
    roster = roster_from_args(args, settings)
    result = calculate_from_args(args, settings, roster)
    pages = build_sign_sheet(result, args.month, args.year, roster)
    export_sign_sheet_pdf(pages, output_path, settings.department_name, font_path=settings.pdf_font_path)
    print(f"Sign sheet exported to {output_path}")


def cmd_disbursement(args: argparse.Namespace, settings: Settings) -> None:
    output_path = pdf_path(args.output)
    roster = roster_from_args(args, settings)
    result = calculate_from_args(args, settings, roster)
    sheet = build_disbursement(result, args.month, args.year, args.holiday, roster)
    export_disbursement_pdf(
        sheet,
        output_path,
        organization=settings.organization_name,
        department=settings.department_name,
        font_path=settings.pdf_font_path,
    )
    print(f"Disbursement sheet exported to {output_path} ({sheet.total_pay:,} บาท)")


def cmd_export(args: argparse.Namespace, settings: Settings) -> None:
    roster = roster_from_args(args, settings)
    result = calculate_from_args(args, settings, roster)
    if args.output:
        output_path = export_csv(result_rows(result), Path(args.output))
        print(f"Report exported to {output_path}")
    else:
        print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))


def cmd_roster(args: argparse.Namespace, settings: Settings) -> None:
    roster = roster_from_args(args, settings)
    text = json.dumps(roster.to_dict(), ensure_ascii=False, indent=2)
    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text + "\n", encoding="utf-8")
        print(f"Roster written to {output_path}")
    else:
        print(text)


def cmd_attendance(args: argparse.Namespace, settings: Settings) -> None:
    source = Path(args.input) if args.input else settings.attendance_path
    if source is None:
        raise ValueError("No attendance file given. Pass --input or set OTPAY_ATTENDANCE_PATH.")
    output_path = Path(args.output)
    if output_path.suffix.lower() != ".csv":
        raise ValueError("Attendance can only be written as .csv")
    events = import_attendance(source)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    export_attendance(output_path, events)
    print(f"{len(events)} attendance events written to {output_path}")


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    today = date.today()
    parser.add_argument("--input", help="Attendance file (csv or json)")
    parser.add_argument("--month", type=month_number, default=today.month)
    parser.add_argument("--year", type=int, default=today.year)
    parser.add_argument("--holiday", type=holiday_day, action="append", default=[], help="Extra holiday day of month, repeatable")
    parser.add_argument("--roster", help="JSON staff roster")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Overtime calculation and payroll sheets")
    subparsers = parser.add_subparsers(dest="command", required=True)

    summary_cmd = subparsers.add_parser("summary", help="Print per-staff OT totals")
    _add_common_arguments(summary_cmd)
    summary_cmd.add_argument("--details", action="store_true", help="List each qualifying OT session")
    summary_cmd.set_defaults(func=cmd_summary)

    sign_cmd = subparsers.add_parser("sign-sheet", help="Export the OT sign-in/out sheet")
    _add_common_arguments(sign_cmd)
    sign_cmd.add_argument("--output", required=True, help="Output PDF file")
    sign_cmd.set_defaults(func=cmd_sign_sheet)

    disbursement_cmd = subparsers.add_parser("disbursement", help="Export the OT disbursement sheet")
    _add_common_arguments(disbursement_cmd)
    disbursement_cmd.add_argument("--output", required=True, help="Output PDF file")
    disbursement_cmd.set_defaults(func=cmd_disbursement)

    export_cmd = subparsers.add_parser("export", help="Export OT records as csv, or json to stdout")
    _add_common_arguments(export_cmd)
    export_cmd.add_argument("--output", help="Output csv file")
    export_cmd.set_defaults(func=cmd_export)

    roster_cmd = subparsers.add_parser("roster", help="Show the effective staff roster as json")
    roster_cmd.add_argument("--roster", help="JSON staff roster")
    roster_cmd.add_argument("--output", help="Output json file")
    roster_cmd.set_defaults(func=cmd_roster)

    attendance_cmd = subparsers.add_parser("attendance", help="Rewrite an attendance file (csv or json) as csv")
    attendance_cmd.add_argument("--input", help="Attendance file (csv or json)")
    attendance_cmd.add_argument("--output", required=True, help="Output csv file")
    attendance_cmd.set_defaults(func=cmd_attendance)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.debug("command_started", command=args.command, month=getattr(args, "month", None), year=getattr(args, "year", None))
    args.func(args, settings)


if __name__ == "__main__":
    main()
