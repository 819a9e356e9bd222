"""Serializers for flight schedule API."""

from rest_framework import serializers
from .models import FlightSchedule


class FlightScheduleSerializer(serializers.ModelSerializer):
    """Serializer for FlightSchedule."""

    class Meta:
        model = FlightSchedule
        fields = [
            'flight_id', 'event_id', 'first_name', 'last_name', 'flight_number',
            'property_name', 'arrival_time', 'departure_time',
            'vehicle_standby_arrival_time', 'vehicle_standby_departure_time',
            'status', 'created_at', 'updated_at'
        ]
        read_only_fields = [
            'flight_id', 'event_id', 'first_name', 'last_name', 'flight_number',
            'property_name', 'arrival_time', 'departure_time',
            'vehicle_standby_arrival_time', 'vehicle_standby_departure_time',
            'created_at', 'updated_at'
        ]


class FlightScheduleStatusSerializer(serializers.ModelSerializer):
    """Only the status of a schedule may change after import."""

    status = serializers.ChoiceField(choices=FlightSchedule.STATUS_CHOICES)

    class Meta:
        model = FlightSchedule
        fields = ['status']
