"""Parse complete flight schedule workbooks."""

import logging
from io import BytesIO
from typing import List
from xml.etree.ElementTree import ParseError
from zipfile import BadZipFile

from openpyxl import load_workbook
from openpyxl.utils.exceptions import InvalidFileException

from apps.flights.services.exceptions import (
    InvalidRowError,
    InvalidWorkbookError,
    MissingHeadersError,
)
from apps.flights.services.records import ParseResult
from .header_validator import find_missing_headers
from .row_mapper import map_excel_row_to_schedule, trim_row

logger = logging.getLogger(__name__)

INSUFFICIENT_ROWS_MESSAGE = (
    'Invalid Excel file format. File must contain at least a header row and one data row.'
)

# SyntaxError covers lxml's parse errors when openpyxl runs on lxml
WORKBOOK_READ_ERRORS = (
    InvalidFileException,
    BadZipFile,
    KeyError,
    OSError,
    ParseError,
    SyntaxError,
    ValueError,
    TypeError,
)


def read_sheet_rows(file_obj) -> List[list]:
    """
    Read the first sheet of a workbook as lists of cell values.

    Accepts raw bytes or a binary file object. Trailing empty rows are
    dropped, blank rows in between are kept.
    """
    if isinstance(file_obj, (bytes, bytearray)):
        file_obj = BytesIO(file_obj)

    try:
        workbook = load_workbook(file_obj, data_only=True, read_only=True)
    except WORKBOOK_READ_ERRORS as e:
        logger.error(f"[read_sheet_rows] Could not open workbook: {e}")
        raise InvalidWorkbookError(f"Could not read Excel file: {e}") from e

    try:
        if not workbook.worksheets:
            raise InvalidWorkbookError("Excel file has no sheets")
        worksheet = workbook.worksheets[0]
        logger.debug(f"[read_sheet_rows] Using sheet: {worksheet.title}")
        # Read-only sheets are parsed lazily, so broken XML surfaces here
        rows = [list(row) for row in worksheet.iter_rows(values_only=True)]
    except WORKBOOK_READ_ERRORS as e:
        logger.error(f"[read_sheet_rows] Could not read sheet rows: {e}")
        raise InvalidWorkbookError(f"Could not read Excel file: {e}") from e
    finally:
        workbook.close()

    while rows and not trim_row(rows[-1]):
        rows.pop()
    return rows


def parse_schedule_rows(rows: List[list], event_id: int) -> ParseResult:
    """
    Validate headers and map every data row.

    Raises InvalidWorkbookError or MissingHeadersError before touching any
    data row; after that, row problems are collected, never raised.
    """
    if len(rows) < 2:
        raise InvalidWorkbookError(INSUFFICIENT_ROWS_MESSAGE)

    missing = find_missing_headers(rows[0])
    if missing:
        raise MissingHeadersError(missing)

    data_rows = rows[1:]
    result = ParseResult(total_records=len(data_rows))

    # Row 1 is the header, so data starts at sheet row 2
    for row_number, row in enumerate(data_rows, start=2):
        try:
            draft = map_excel_row_to_schedule(row, event_id)
        except InvalidRowError as e:
            logger.warning(f"[parse_schedule_rows] Row {row_number}: {e}")
            result.failed.append(f"Row {row_number}: {e}")
            continue
        except Exception as e:
            logger.error(f"[parse_schedule_rows] Row {row_number}: unexpected error: {e}", exc_info=True)
            result.failed.append(f"Row {row_number}: {e}")
            continue
        result.processed.append(draft)

    logger.info(
        f"[parse_schedule_rows] Event {event_id}: {len(result.processed)} processed, "
        f"{len(result.failed)} failed, {result.total_records} total"
    )
    return result


def parse_excel_file(file_obj, event_id: int) -> ParseResult:
    """Read a workbook and map its rows to flight schedule drafts."""
    return parse_schedule_rows(read_sheet_rows(file_obj), event_id)
