"""Combine resolved dates and times into timestamps."""

import logging
from datetime import datetime
from typing import Optional

from django.utils import timezone

from .date_parser import resolve_iso_date
from .time_parser import format_time

logger = logging.getLogger(__name__)

DATETIME_LITERAL_FORMAT = '%Y-%m-%dT%H:%M'


def compose_datetime(date_value, time_value) -> Optional[datetime]:
    """
    Build an aware datetime from a date cell and a time cell.

    The time cell keeps its own clock value and is placed on the calendar
    date of the date cell, in the current timezone. Returns None if either
    part is unresolved.
    """
    iso_date = resolve_iso_date(date_value)
    time_str = format_time(time_value)
    if not iso_date or not time_str:
        return None

    literal = f"{iso_date}T{time_str}"
    try:
        naive = datetime.strptime(literal, DATETIME_LITERAL_FORMAT)
        return timezone.make_aware(naive, timezone.get_current_timezone())
    except (ValueError, OverflowError) as e:
        logger.warning(f"Could not compose datetime from '{literal}': {e}")
        return None
