"""Utilities for resolving calendar dates from Excel cell values."""

import logging
import re
from datetime import date, datetime, timedelta
from typing import Callable, List, Optional

from django.utils.dateparse import parse_datetime

logger = logging.getLogger(__name__)

# Serial day 25569 is 1970-01-01 in the 1900 date system
EXCEL_UNIX_EPOCH_SERIAL = 25569
UNIX_EPOCH = datetime(1970, 1, 1)
MIN_SERIAL_DATE = 1000

US_DATE_PATTERN = re.compile(r'^(\d{1,2})/(\d{1,2})/(\d{4})$')  # M/D/YYYY
ISO_DATE_PATTERN = re.compile(r'^(\d{4})-(\d{2})-(\d{2})$')  # YYYY-MM-DD
DAY_FIRST_DATE_PATTERN = re.compile(r'^(\d{1,2})-(\d{1,2})-(\d{4})$')  # D-M-YYYY

# Free-form formats tried after the structured patterns
FALLBACK_DATE_FORMATS = [
    '%B %d, %Y',
    '%b %d, %Y',
    '%B %d %Y',
    '%b %d %Y',
    '%d %B %Y',
    '%d %b %Y',
    '%a %b %d %Y',
    '%A, %B %d, %Y',
    '%Y/%m/%d',
    '%d.%m.%Y',
    '%m/%d/%y',
]


def is_numeric_cell(value) -> bool:
    """Numbers as openpyxl returns them; booleans are not numbers here."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _safe_date(year: int, month: int, day: int) -> Optional[date]:
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_native_date(value) -> Optional[date]:
    """Date and datetime cells."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return None


def parse_serial_date(value) -> Optional[date]:
    """
    Spreadsheet serial day counts.

    Only numbers above MIN_SERIAL_DATE are accepted; the day count is
    converted through seconds since the Unix epoch, as spreadsheet engines do.
    """
    if not is_numeric_cell(value) or value <= MIN_SERIAL_DATE:
        return None
    try:
        seconds = (value - EXCEL_UNIX_EPOCH_SERIAL) * 86400
        return (UNIX_EPOCH + timedelta(seconds=seconds)).date()
    except OverflowError:
        logger.warning(f"Serial date out of range: {value}")
        return None


def parse_date_string(value) -> Optional[date]:
    """M/D/YYYY, then YYYY-MM-DD, then D-M-YYYY; first real date wins."""
    if not isinstance(value, str):
        return None
    text = value.strip()

    match = US_DATE_PATTERN.match(text)
    if match:
        parsed = _safe_date(int(match.group(3)), int(match.group(1)), int(match.group(2)))
        if parsed:
            return parsed

    match = ISO_DATE_PATTERN.match(text)
    if match:
        parsed = _safe_date(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        if parsed:
            return parsed

    match = DAY_FIRST_DATE_PATTERN.match(text)
    if match:
        parsed = _safe_date(int(match.group(3)), int(match.group(2)), int(match.group(1)))
        if parsed:
            return parsed

    return None


def parse_free_form_date(value) -> Optional[date]:
    """Last resort for strings: ISO date-times and common written formats."""
    if not isinstance(value, str):
        return None
    text = ' '.join(value.strip().split())
    if not text:
        return None

    try:
        parsed = parse_datetime(text)
    except ValueError:
        parsed = None
    if parsed:
        return parsed.date()

    for fmt in FALLBACK_DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue
    return None


DATE_STRATEGIES: List[Callable] = [
    parse_native_date,
    parse_serial_date,
    parse_date_string,
    parse_free_form_date,
]


def resolve_date(value) -> Optional[date]:
    """
    Resolve an Excel cell value to a calendar date.

    Strategies are tried in priority order and the first one that returns
    a date wins. Returns None when no strategy can resolve the value.
    """
    if value is None:
        return None

    try:
        for strategy in DATE_STRATEGIES:
            resolved = strategy(value)
            if resolved is not None:
                return resolved
    except Exception as e:
        logger.error(f"Error resolving date from {value!r}: {e}", exc_info=True)
        return None

    logger.debug(f"Could not resolve date from {value!r}")
    return None


def resolve_iso_date(value) -> Optional[str]:
    """Same as resolve_date, formatted as YYYY-MM-DD."""
    resolved = resolve_date(value)
    return resolved.isoformat() if resolved else None
