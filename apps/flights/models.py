"""Models for event flight schedules."""

from django.db import models
from django.utils.translation import gettext_lazy as _


class FlightSchedule(models.Model):
    """Arrival and departure of one event guest, with vehicle standby times."""

    STATUS_CHOICES = [
        ('pending', _('Pending')),
        ('Arrived', _('Arrived')),
        ('Delay', _('Delay')),
        ('No show', _('No show')),
        ('Re scheduled', _('Re scheduled')),
    ]

    flight_id = models.BigAutoField(primary_key=True)
    event_id = models.PositiveIntegerField(
        _('event'),
        db_index=True,
        help_text=_('Identifier of the event this guest belongs to')
    )
    first_name = models.CharField(_('first name'), max_length=255)
    last_name = models.CharField(_('last name'), max_length=255)
    flight_number = models.CharField(_('flight number'), max_length=50)
    property_name = models.CharField(
        _('property name'),
        max_length=255,
        help_text=_('Hotel or property where the guest stays')
    )
    arrival_time = models.DateTimeField(_('arrival time'))
    departure_time = models.DateTimeField(_('departure time'))
    vehicle_standby_arrival_time = models.DateTimeField(
        _('vehicle standby (arrival)'),
        help_text=_('When the vehicle waits for the arriving guest')
    )
    vehicle_standby_departure_time = models.DateTimeField(
        _('vehicle standby (departure)'),
        help_text=_('When the vehicle waits for the departing guest')
    )
    status = models.CharField(
        _('status'),
        max_length=20,
        choices=STATUS_CHOICES,
        default='pending',
        db_index=True
    )
    created_at = models.DateTimeField(_('created at'), auto_now_add=True, db_index=True)
    updated_at = models.DateTimeField(_('updated at'), auto_now=True)

    class Meta:
        verbose_name = _('Flight Schedule')
        verbose_name_plural = _('Flight Schedules')
        ordering = ['created_at', 'flight_id']
        indexes = [
            models.Index(fields=['event_id', 'created_at'], name='flights_event_created_idx'),
        ]

    def __str__(self):
        return f"{self.first_name} {self.last_name} - {self.flight_number} (event {self.event_id})"
