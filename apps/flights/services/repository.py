"""Persistence port for flight schedules and its Django ORM implementation."""

import logging
from typing import List, Sequence

from django.db import DatabaseError, connection, transaction

from apps.flights.models import FlightSchedule
from .exceptions import FlightSchedulePersistenceError
from .records import FlightScheduleDraft

logger = logging.getLogger(__name__)


class FlightScheduleRepository:
    """Storage operations the import and export services depend on."""

    def create_many(self, drafts: Sequence[FlightScheduleDraft]) -> List:
        """Save drafts in one batch and return them with identifiers assigned."""
        raise NotImplementedError

    def find_by_event_id(self, event_id: int) -> List:
        """Return every schedule of an event, oldest first."""
        raise NotImplementedError


class DjangoFlightScheduleRepository(FlightScheduleRepository):
    """FlightScheduleRepository backed by the FlightSchedule model."""

    def create_many(self, drafts: Sequence[FlightScheduleDraft]) -> List[FlightSchedule]:
        if not drafts:
            return []

        instances = [FlightSchedule(**draft.to_model_kwargs()) for draft in drafts]
        try:
            with transaction.atomic():
                if connection.features.can_return_rows_from_bulk_insert:
                    saved = FlightSchedule.objects.bulk_create(instances)
                else:
                    # Without RETURNING, bulk_create cannot hand back the ids
                    for instance in instances:
                        instance.save(force_insert=True)
                    saved = instances
        except DatabaseError as e:
            logger.error(f"[create_many] Failed to save {len(instances)} flight schedules: {e}", exc_info=True)
            raise FlightSchedulePersistenceError(f"Database save failed: {e}") from e

        logger.info(f"[create_many] Saved {len(saved)} flight schedules for event {drafts[0].event_id}")
        return list(saved)

    def find_by_event_id(self, event_id: int) -> List[FlightSchedule]:
        try:
            return list(
                FlightSchedule.objects.filter(event_id=event_id).order_by('created_at', 'flight_id')
            )
        except DatabaseError as e:
            logger.error(f"[find_by_event_id] Failed to load schedules for event {event_id}: {e}", exc_info=True)
            raise FlightSchedulePersistenceError(f"Could not load flight schedules: {e}") from e
