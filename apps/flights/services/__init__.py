"""Flight schedule services: workbook import, export and persistence."""

from .excel_exporter import build_export_filename, build_template_workbook, export_to_excel
from .exceptions import (
    FlightScheduleImportError,
    FlightSchedulePersistenceError,
    InvalidWorkbookError,
    MissingHeadersError,
)
from .import_service import FlightScheduleImportService
from .records import FlightScheduleDraft, ImportSummary, ParseResult
from .repository import DjangoFlightScheduleRepository, FlightScheduleRepository

__all__ = [
    # Import
    'FlightScheduleImportService',
    'FlightScheduleDraft',
    'ParseResult',
    'ImportSummary',
    # Persistence
    'FlightScheduleRepository',
    'DjangoFlightScheduleRepository',
    # Export
    'export_to_excel',
    'build_export_filename',
    'build_template_workbook',
    # Errors
    'FlightScheduleImportError',
    'InvalidWorkbookError',
    'MissingHeadersError',
    'FlightSchedulePersistenceError',
]
