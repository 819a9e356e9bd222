"""Shared fixtures for flight schedule tests."""

import zipfile
from io import BytesIO
from types import SimpleNamespace

from django.utils import timezone
from openpyxl import Workbook

from apps.flights.services.excel_parser.header_mapping import REQUIRED_HEADERS
from apps.flights.services.repository import FlightScheduleRepository

HEADER_ROW = list(REQUIRED_HEADERS)

VALID_ROW = [
    'Dayanat', 'Iskandarli', 'XY337', '7/23/2025', '23:15',
    'Hilton Hotel', '21:00', '7/26/2025', '14:45', '12:35',
]


def row_with(index: int, value) -> list:
    """VALID_ROW with one cell replaced."""
    row = list(VALID_ROW)
    row[index] = value
    return row


def build_workbook(rows) -> bytes:
    """Single-sheet xlsx bytes holding the given rows."""
    workbook = Workbook()
    worksheet = workbook.active
    for row in rows:
        worksheet.append(row)
    output = BytesIO()
    workbook.save(output)
    return output.getvalue()


def truncate_first_sheet(data: bytes) -> bytes:
    """Same xlsx package with the first sheet's XML cut in half."""
    output = BytesIO()
    with zipfile.ZipFile(BytesIO(data)) as source, zipfile.ZipFile(output, 'w') as target:
        for item in source.infolist():
            content = source.read(item.filename)
            if item.filename == 'xl/worksheets/sheet1.xml':
                content = content[:len(content) // 2]
            target.writestr(item, content)
    return output.getvalue()


class InMemoryFlightScheduleRepository(FlightScheduleRepository):
    """Repository fake that keeps schedules in a list."""

    def __init__(self):
        self.saved = []
        self.create_calls = 0

    def create_many(self, drafts):
        self.create_calls += 1
        created = []
        for draft in drafts:
            schedule = SimpleNamespace(
                flight_id=len(self.saved) + 1,
                created_at=timezone.now(),
                **draft.to_model_kwargs()
            )
            self.saved.append(schedule)
            created.append(schedule)
        return created

    def find_by_event_id(self, event_id):
        return [schedule for schedule in self.saved if schedule.event_id == event_id]
