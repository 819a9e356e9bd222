"""Excel parser module for flight schedules."""

from .date_parser import resolve_date, resolve_iso_date
from .datetime_composer import compose_datetime
from .file_parser import parse_excel_file, parse_schedule_rows, read_sheet_rows
from .header_validator import find_missing_headers
from .row_mapper import map_excel_row_to_schedule
from .time_parser import format_time

__all__ = [
    'resolve_date',
    'resolve_iso_date',
    'format_time',
    'compose_datetime',
    'find_missing_headers',
    'map_excel_row_to_schedule',
    'read_sheet_rows',
    'parse_schedule_rows',
    'parse_excel_file',
]
