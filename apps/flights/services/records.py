"""Plain data records passed between the flight schedule services."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List


@dataclass
class FlightScheduleDraft:
    """A validated row, not yet saved (no flight_id or created_at)."""
    event_id: int
    first_name: str
    last_name: str
    flight_number: str
    property_name: str
    arrival_time: datetime
    departure_time: datetime
    vehicle_standby_arrival_time: datetime
    vehicle_standby_departure_time: datetime
    status: str = 'pending'

    def to_model_kwargs(self) -> Dict[str, Any]:
        return asdict(self)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key, value in data.items():
            if isinstance(value, datetime):
                data[key] = value.isoformat()
        return data


@dataclass
class ParseResult:
    """Outcome of parsing one workbook: valid drafts and per-row failures."""
    total_records: int = 0
    processed: List[FlightScheduleDraft] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'totalRecords': self.total_records,
            'processedRecords': len(self.processed),
            'failedRecords': len(self.failed),
            'errors': list(self.failed),
            'schedules': [draft.to_dict() for draft in self.processed],
        }


@dataclass
class ImportSummary:
    """Outcome of an import: counts, failure messages and saved schedules."""
    total_records: int
    processed_records: int
    errors: List[str]
    schedules: List[Any]

    @property
    def failed_records(self) -> int:
        return len(self.errors)

    @property
    def message(self) -> str:
        return (
            f"Successfully processed {self.processed_records} records. "
            f"{self.failed_records} records failed."
        )

    def to_dict(self, serialized_schedules=None) -> Dict[str, Any]:
        return {
            'totalRecords': self.total_records,
            'processedRecords': self.processed_records,
            'failedRecords': self.failed_records,
            'errors': list(self.errors),
            'schedules': serialized_schedules if serialized_schedules is not None else self.schedules,
        }
