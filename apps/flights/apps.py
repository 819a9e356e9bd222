"""Flights app configuration."""

from django.apps import AppConfig


class FlightsConfig(AppConfig):
    """Configuration for flights app."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.flights'
    verbose_name = 'Flight Schedules'
