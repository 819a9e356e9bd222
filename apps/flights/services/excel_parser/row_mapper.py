"""Map Excel rows to flight schedule drafts."""

import logging
from typing import Dict, Sequence

from apps.flights.services.exceptions import InvalidRowError
from apps.flights.services.records import FlightScheduleDraft
from .datetime_composer import compose_datetime
from .header_mapping import ROW_FIELDS, TEXT_FIELDS

logger = logging.getLogger(__name__)


def trim_row(row: Sequence) -> list:
    """Drop trailing empty cells, the way the sheet's used range ends."""
    values = list(row)
    while values and _is_blank(values[-1]):
        values.pop()
    return values


def _is_blank(value) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def _cell_text(value) -> str:
    """Text of a cell; whole floats like 337.0 read as 337."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def map_excel_row_to_schedule(row: Sequence, event_id: int) -> FlightScheduleDraft:
    """
    Map an Excel data row to a flight schedule draft.

    Args:
        row: Cell values of the row, in REQUIRED_HEADERS order
        event_id: Event the schedules belong to

    Returns:
        FlightScheduleDraft with trimmed text and aware datetimes

    Raises:
        InvalidRowError: if the row is short, incomplete or has bad dates/times
    """
    values = trim_row(row)
    if len(values) < len(ROW_FIELDS):
        raise InvalidRowError("Insufficient data")

    cells: Dict = dict(zip(ROW_FIELDS, values))
    if any(_is_blank(cells[name]) or not cells[name] for name in ROW_FIELDS):
        raise InvalidRowError("Missing required fields")

    arrival = compose_datetime(cells['arrival_date'], cells['arrival_time'])
    departure = compose_datetime(cells['departure_date'], cells['departure_time'])
    # Standby times share the paired date; no rollover across midnight
    standby_arrival = compose_datetime(cells['arrival_date'], cells['vehicle_standby_arrival'])
    standby_departure = compose_datetime(cells['departure_date'], cells['vehicle_standby_departure'])

    if not all([arrival, departure, standby_arrival, standby_departure]):
        raise InvalidRowError("Invalid date/time format")

    text = {name: _cell_text(cells[name]) for name in TEXT_FIELDS}

    return FlightScheduleDraft(
        event_id=event_id,
        first_name=text['first_name'],
        last_name=text['last_name'],
        flight_number=text['flight_number'],
        property_name=text['property_name'],
        arrival_time=arrival,
        departure_time=departure,
        vehicle_standby_arrival_time=standby_arrival,
        vehicle_standby_departure_time=standby_departure,
    )
