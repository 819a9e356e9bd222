"""Utilities for parsing time values from Excel."""

import logging
import math
import re
from datetime import datetime, time, timedelta
from typing import Callable, List, Optional, Tuple

from .date_parser import is_numeric_cell

logger = logging.getLogger(__name__)

CLOCK_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})(?::(\d{2}))?$')  # H:MM, HH:MM, HH:MM:SS
MERIDIEM_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})\s*(AM|PM)$', re.IGNORECASE)  # H:MM AM/PM
DOTTED_PATTERN = re.compile(r'^(\d{1,2})\.(\d{2})$')  # H.MM


def parse_native_time(value) -> Optional[Tuple[int, int]]:
    """Time, datetime and duration cells (durations under one day)."""
    if isinstance(value, datetime):
        return value.hour, value.minute
    if isinstance(value, time):
        return value.hour, value.minute
    if isinstance(value, timedelta):
        if not timedelta(0) <= value < timedelta(days=1):
            return None
        return value.seconds // 3600, value.seconds % 3600 // 60
    return None


def parse_time_string(value) -> Optional[Tuple[int, int]]:
    """Clock strings such as "3:20", "03:20:00", "1:00 PM" or "3.20"."""
    if not isinstance(value, str):
        return None
    text = value.strip()

    match = CLOCK_PATTERN.match(text)
    if match:
        if match.group(3) and int(match.group(3)) > 59:
            return None
        return int(match.group(1)), int(match.group(2))

    match = MERIDIEM_PATTERN.match(text)
    if match:
        hours = int(match.group(1))
        minutes = int(match.group(2))
        meridiem = match.group(3).upper()
        if meridiem == 'PM' and hours != 12:
            hours += 12
        elif meridiem == 'AM' and hours == 12:
            hours = 0
        return hours, minutes

    match = DOTTED_PATTERN.match(text)
    if match:
        return int(match.group(1)), int(match.group(2))

    return None


def parse_fractional_time(value) -> Optional[Tuple[int, int]]:
    """Excel decimal time, a fraction of a day (0.1388... is 03:20)."""
    if not is_numeric_cell(value) or value < 0:
        return None
    total_hours = value * 24
    hours = math.floor(total_hours)
    minutes = round((total_hours - hours) * 60)
    if minutes == 60:
        hours += 1
        minutes = 0
    if hours == 24 and value < 1:
        # The last half-minute of the day stays on the same day
        return 23, 59
    return hours, minutes


TIME_STRATEGIES: List[Callable] = [
    parse_native_time,
    parse_time_string,
    parse_fractional_time,
]


def format_time(value) -> Optional[str]:
    """
    Normalize an Excel time cell to a 24-hour "HH:MM" string.

    Returns None when the value cannot be read as a clock time.
    """
    if value is None:
        return None

    try:
        for strategy in TIME_STRATEGIES:
            parsed = strategy(value)
            if parsed is None:
                continue
            hours, minutes = parsed
            if not (0 <= hours <= 23 and 0 <= minutes <= 59):
                logger.debug(f"Time out of range: {value!r} -> {hours}:{minutes}")
                return None
            return f"{hours:02d}:{minutes:02d}"
    except Exception as e:
        logger.error(f"Error formatting time from {value!r}: {e}", exc_info=True)
        return None

    logger.debug(f"Could not format time from {value!r}")
    return None
