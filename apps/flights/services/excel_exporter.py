"""Excel exporter for event flight schedules."""

import logging
from datetime import date, datetime
from io import BytesIO
from typing import Sequence

from django.utils import timezone
from openpyxl import Workbook
from openpyxl.styles import Alignment, Font, PatternFill

from .excel_parser.header_mapping import (
    EXPORT_COLUMN_WIDTHS,
    EXPORT_HEADERS,
    REQUIRED_HEADERS,
    TEMPLATE_EXAMPLE_ROWS,
)

logger = logging.getLogger(__name__)

TEMPLATE_FILENAME = 'flight-schedule-template.xlsx'


def build_export_filename(event_id: int, on_date: date) -> str:
    return f"flight-schedules-event-{event_id}-{on_date.isoformat()}.xlsx"


def format_display_date(value: datetime) -> str:
    """US style date without padding, e.g. 7/23/2025."""
    local = timezone.localtime(value) if timezone.is_aware(value) else value
    return f"{local.month}/{local.day}/{local.year}"


def format_display_time(value: datetime) -> str:
    """12-hour clock with two-digit hour, e.g. 11:15 PM."""
    local = timezone.localtime(value) if timezone.is_aware(value) else value
    return local.strftime('%I:%M %p')


def export_to_excel(schedules: Sequence) -> BytesIO:
    """
    Export flight schedules to an Excel file.

    Args:
        schedules: FlightSchedule instances (or objects with the same fields)

    Returns:
        BytesIO object with Excel file content

    Raises:
        ValueError: if there is nothing to export
    """
    if not schedules:
        raise ValueError("No flight schedules to export")

    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Flight Schedules"

    _setup_excel_headers(worksheet, EXPORT_HEADERS)
    _add_excel_data_rows(worksheet, schedules)
    _adjust_excel_column_widths(worksheet)

    output = BytesIO()
    workbook.save(output)
    output.seek(0)

    logger.info(f"Exported {len(schedules)} flight schedules to Excel")
    return output


def build_template_workbook() -> BytesIO:
    """Empty import template: required headers plus two example rows."""
    workbook = Workbook()
    worksheet = workbook.active
    worksheet.title = "Flight Schedule Template"

    _setup_excel_headers(worksheet, REQUIRED_HEADERS)
    for row in TEMPLATE_EXAMPLE_ROWS:
        worksheet.append(row)
    _adjust_excel_column_widths(worksheet)

    output = BytesIO()
    workbook.save(output)
    output.seek(0)
    return output


def _setup_excel_headers(worksheet, headers):
    """Setup Excel worksheet headers with styling."""
    header_fill = PatternFill(start_color="366092", end_color="366092", fill_type="solid")
    header_font = Font(bold=True, color="FFFFFF")

    for col_idx, header in enumerate(headers, start=1):
        cell = worksheet.cell(row=1, column=col_idx, value=header)
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = Alignment(horizontal='center', vertical='center')


def _add_excel_data_rows(worksheet, schedules):
    for row_idx, schedule in enumerate(schedules, start=2):
        values = [
            schedule.first_name,
            schedule.last_name,
            schedule.flight_number,
            format_display_date(schedule.arrival_time),
            format_display_time(schedule.arrival_time),
            schedule.property_name,
            format_display_time(schedule.vehicle_standby_arrival_time),
            format_display_date(schedule.departure_time),
            format_display_time(schedule.departure_time),
            format_display_time(schedule.vehicle_standby_departure_time),
            schedule.status or 'pending',
        ]
        for col_idx, value in enumerate(values, start=1):
            worksheet.cell(row=row_idx, column=col_idx, value=value)


def _adjust_excel_column_widths(worksheet):
    """Fixed column widths for readability."""
    for col, width in EXPORT_COLUMN_WIDTHS.items():
        worksheet.column_dimensions[col].width = width
