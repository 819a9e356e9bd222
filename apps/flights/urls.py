"""URLs for flight schedule API."""

from django.urls import path

from .views import FlightScheduleViewSet

schedule_list = FlightScheduleViewSet.as_view({'get': 'list'})
schedule_detail = FlightScheduleViewSet.as_view({
    'get': 'retrieve',
    'patch': 'partial_update',
    'delete': 'destroy',
})
schedule_upload = FlightScheduleViewSet.as_view({'post': 'upload'})
schedule_preview = FlightScheduleViewSet.as_view({'post': 'preview'})
schedule_download = FlightScheduleViewSet.as_view({'get': 'download'})
schedule_template = FlightScheduleViewSet.as_view({'get': 'template'})

urlpatterns = [
    path('events/<int:event_id>/flight-schedules/', schedule_list, name='flight-schedule-list'),
    path('events/<int:event_id>/flight-schedules/upload/', schedule_upload, name='flight-schedule-upload'),
    path('events/<int:event_id>/flight-schedules/preview/', schedule_preview, name='flight-schedule-preview'),
    path('events/<int:event_id>/flight-schedules/download/', schedule_download, name='flight-schedule-download'),
    path('events/<int:event_id>/flight-schedules/template/', schedule_template, name='flight-schedule-template'),
    path('events/<int:event_id>/flight-schedules/<int:flight_id>/', schedule_detail, name='flight-schedule-detail'),
]
