"""Admin configuration for flights app."""

from django.contrib import admin
from .models import FlightSchedule


@admin.register(FlightSchedule)
class FlightScheduleAdmin(admin.ModelAdmin):
    """Admin for FlightSchedule."""

    list_display = ['first_name', 'last_name', 'flight_number', 'event_id', 'arrival_time', 'departure_time', 'status']
    list_filter = ['status', 'event_id']
    search_fields = ['first_name', 'last_name', 'flight_number', 'property_name']
    readonly_fields = ['flight_id', 'created_at', 'updated_at']
    date_hierarchy = 'arrival_time'
    fieldsets = (
        ('Guest', {
            'fields': ('event_id', 'first_name', 'last_name', 'property_name')
        }),
        ('Flight', {
            'fields': ('flight_number', 'arrival_time', 'departure_time')
        }),
        ('Vehicle Standby', {
            'fields': ('vehicle_standby_arrival_time', 'vehicle_standby_departure_time')
        }),
        ('Status', {
            'fields': ('status',)
        }),
        ('Metadata', {
            'fields': ('flight_id', 'created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
