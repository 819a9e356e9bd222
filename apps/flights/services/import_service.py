"""Import flight schedules from uploaded workbooks."""

import logging
from typing import Optional

from .excel_parser.file_parser import parse_excel_file
from .records import ImportSummary, ParseResult
from .repository import DjangoFlightScheduleRepository, FlightScheduleRepository

logger = logging.getLogger(__name__)


class FlightScheduleImportService:
    """
    Turns an uploaded workbook into saved flight schedules.

    Parsing holds no state between calls; the repository is the only
    collaborator with side effects.
    """

    def __init__(self, repository: Optional[FlightScheduleRepository] = None):
        self.repository = repository or DjangoFlightScheduleRepository()

    def parse_workbook(self, event_id: int, file_obj) -> ParseResult:
        """
        Parse a workbook without saving anything.

        Raises:
            InvalidWorkbookError: unreadable file or no data rows
            MissingHeadersError: required headers absent from the first row
        """
        return parse_excel_file(file_obj, event_id)

    def import_schedules(self, event_id: int, file_obj) -> ImportSummary:
        """
        Parse a workbook and save every valid row in one batch.

        Rows that fail are reported in the summary; a persistence failure
        raises FlightSchedulePersistenceError.
        """
        logger.info(f"[import_schedules] Importing flight schedules for event {event_id}")
        result = self.parse_workbook(event_id, file_obj)

        saved = []
        if result.processed:
            saved = self.repository.create_many(result.processed)
        else:
            logger.warning(f"[import_schedules] Event {event_id}: no valid rows to save")

        summary = ImportSummary(
            total_records=result.total_records,
            processed_records=len(result.processed),
            errors=result.failed,
            schedules=saved,
        )
        logger.info(f"[import_schedules] Event {event_id}: {summary.message}")
        return summary
