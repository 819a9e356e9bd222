"""Exceptions raised by the flight schedule services."""

from typing import List


class FlightScheduleImportError(Exception):
    """An upload that cannot be processed at all."""
    pass


class InvalidWorkbookError(FlightScheduleImportError):
    """The file is not a readable workbook or has no data rows."""
    pass


class MissingHeadersError(FlightScheduleImportError):
    """The first row lacks one or more required column headers."""

    def __init__(self, missing_headers: List[str]):
        self.missing_headers = list(missing_headers)
        super().__init__(f"Missing required headers: {', '.join(self.missing_headers)}")


class InvalidRowError(Exception):
    """A single data row was rejected; the rest of the batch continues."""
    pass


class FlightSchedulePersistenceError(Exception):
    """Saving or loading flight schedules failed."""
    pass
