from __future__ import annotations

import csv
import io
from dataclasses import dataclass

import pandas as pd

from ..core.enums import ExportFormat
from ..core.exceptions import ValidationError
from .model import ReportData

EXPORT_COLUMNS = [
    ("date", "Date"),
    ("employee_name", "Employee"),
    ("position", "Position"),
    ("check_in", "Check In"),
    ("check_out", "Check Out"),
    ("status", "Status"),
    ("worked_hours", "Worked Hours"),
    ("remarks", "Remarks"),
]

SUMMARY_COLUMNS = [
    "Employee",
    "Position",
    "Present Days",
    "Late Days",
    "Absent Days",
    "Days In Range",
    "Attendance %",
    "Working Hours",
]


@dataclass(frozen=True)
class ExportFile:
    content: bytes
    mimetype: str
    filename: str


def parse_format(value: str | None) -> ExportFormat:
    try:
        return ExportFormat((value or "").strip().lower())
    except ValueError:
        raise ValidationError(f"Export format '{value}' is not supported.", field="format") from None


def _filename(report: ReportData, ext: str) -> str:
    return f"attendance_report_{report.start:%Y%m%d}_{report.end:%Y%m%d}.{ext}"


def _write_csv(report: ReportData) -> bytes:
    out = io.StringIO()
    writer = csv.writer(out)
    writer.writerow([title for _, title in EXPORT_COLUMNS])
    for row in report.rows:
        writer.writerow([row.get(key, "") for key, _ in EXPORT_COLUMNS])
    # BOM so spreadsheet apps detect UTF-8
    return out.getvalue().encode("utf-8-sig")


def _write_excel(report: ReportData) -> bytes:
    details = pd.DataFrame(
        [[row.get(key, "") for key, _ in EXPORT_COLUMNS] for row in report.rows],
        columns=[title for _, title in EXPORT_COLUMNS],
    )
    summary = pd.DataFrame(
        [
            [
                s.name,
                s.position or "",
                s.present_days,
                s.late_days,
                s.absent_days,
                s.total_days_in_range,
                s.attendance_percentage,
                s.total_working_hours,
            ]
            for s in report.summary
        ],
        columns=SUMMARY_COLUMNS,
    )

    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        details.to_excel(writer, sheet_name="Attendance", index=False)
        summary.to_excel(writer, sheet_name="Summary", index=False)
    return out.getvalue()


def export_report(report: ReportData, fmt: ExportFormat) -> ExportFile:
    if fmt == ExportFormat.CSV:
        return ExportFile(content=_write_csv(report), mimetype="text/csv", filename=_filename(report, "csv"))
    if fmt == ExportFormat.EXCEL:
        return ExportFile(
            content=_write_excel(report),
            mimetype="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            filename=_filename(report, "xlsx"),
        )
    raise ValidationError(f"Export format '{fmt}' is not supported.", field="format")
