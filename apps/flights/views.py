"""Views for flight schedule API."""

import logging

from django.conf import settings
from django.http import HttpResponse
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import mixins, status, viewsets
from rest_framework.filters import OrderingFilter, SearchFilter
from rest_framework.response import Response

from .models import FlightSchedule
from .serializers import FlightScheduleSerializer, FlightScheduleStatusSerializer
from .services import (
    DjangoFlightScheduleRepository,
    FlightScheduleImportError,
    FlightScheduleImportService,
    FlightSchedulePersistenceError,
    MissingHeadersError,
    build_export_filename,
    build_template_workbook,
    export_to_excel,
)
from .services.excel_exporter import TEMPLATE_FILENAME
from .services.excel_parser.header_mapping import XLSX_CONTENT_TYPE

logger = logging.getLogger(__name__)

ALLOWED_UPLOAD_EXTENSION = '.xlsx'
ALLOWED_UPLOAD_CONTENT_TYPES = [
    XLSX_CONTENT_TYPE,
    'application/vnd.ms-excel',
    'application/octet-stream',
]


def _xlsx_response(content: bytes, filename: str) -> HttpResponse:
    response = HttpResponse(content, content_type=XLSX_CONTENT_TYPE)
    response['Content-Disposition'] = f'attachment; filename="{filename}"'
    response['Content-Length'] = str(len(content))
    return response


class FlightScheduleViewSet(mixins.ListModelMixin,
                            mixins.RetrieveModelMixin,
                            mixins.DestroyModelMixin,
                            viewsets.GenericViewSet):
    """Flight schedules of one event: list, status updates, workbook import and export."""

    serializer_class = FlightScheduleSerializer
    lookup_field = 'flight_id'
    pagination_class = None
    filter_backends = [DjangoFilterBackend, SearchFilter, OrderingFilter]
    filterset_fields = ['status', 'property_name']
    search_fields = ['first_name', 'last_name', 'flight_number']
    ordering_fields = ['arrival_time', 'departure_time', 'created_at', 'last_name']
    ordering = ['-created_at']

    def get_queryset(self):
        return FlightSchedule.objects.filter(event_id=self.kwargs['event_id'])

    def get_serializer_class(self):
        if self.action == 'partial_update':
            return FlightScheduleStatusSerializer
        return FlightScheduleSerializer

    def get_import_service(self) -> FlightScheduleImportService:
        return FlightScheduleImportService(DjangoFlightScheduleRepository())

    def list(self, request, *args, **kwargs):
        response = super().list(request, *args, **kwargs)
        return Response({'success': True, 'data': response.data})

    def partial_update(self, request, *args, **kwargs):
        """Update the status of a schedule."""
        schedule = self.get_object()
        serializer = FlightScheduleStatusSerializer(schedule, data=request.data, partial=False)
        if not serializer.is_valid():
            return Response(
                {'success': False, 'error': 'Invalid status value', 'details': serializer.errors},
                status=status.HTTP_400_BAD_REQUEST
            )
        serializer.save()
        logger.info(f"[partial_update] Flight {schedule.flight_id} status set to '{schedule.status}'")
        return Response({'success': True, 'data': FlightScheduleSerializer(schedule).data})

    def _validate_upload(self, request):
        """Return (file_obj, error_response)."""
        if 'file' not in request.FILES:
            return None, Response(
                {'success': False, 'error': 'No file provided'},
                status=status.HTTP_400_BAD_REQUEST
            )

        file_obj = request.FILES['file']
        has_extension = file_obj.name.lower().endswith(ALLOWED_UPLOAD_EXTENSION)
        if not has_extension or file_obj.content_type not in ALLOWED_UPLOAD_CONTENT_TYPES:
            return None, Response(
                {'success': False, 'error': 'Invalid file type. Please upload an Excel file (.xlsx)'},
                status=status.HTTP_400_BAD_REQUEST
            )

        max_size = settings.FLIGHT_SCHEDULE_MAX_UPLOAD_SIZE
        if file_obj.size > max_size:
            return None, Response(
                {'success': False, 'error': f'File too large. Maximum size is {max_size} bytes'},
                status=status.HTTP_400_BAD_REQUEST
            )

        return file_obj, None

    @staticmethod
    def _import_error_response(error: FlightScheduleImportError) -> Response:
        payload = {'success': False, 'error': str(error)}
        if isinstance(error, MissingHeadersError):
            payload['missingHeaders'] = error.missing_headers
        return Response(payload, status=status.HTTP_400_BAD_REQUEST)

    def upload(self, request, event_id=None):
        """
        Upload and import a flight schedule workbook.

        Expected form data:
        - file: Excel file (.xlsx)
        """
        file_obj, error_response = self._validate_upload(request)
        if error_response:
            return error_response

        logger.info(f"[upload] Event {event_id}: file '{file_obj.name}' ({file_obj.size} bytes)")
        try:
            summary = self.get_import_service().import_schedules(event_id, file_obj.read())
        except FlightScheduleImportError as e:
            logger.warning(f"[upload] Event {event_id}: import rejected: {e}")
            return self._import_error_response(e)
        except FlightSchedulePersistenceError as e:
            return Response(
                {'success': False, 'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )
        except Exception as e:
            logger.error(f"Error processing flight schedule upload: {e}", exc_info=True)
            return Response(
                {'success': False, 'error': f'Error processing file: {str(e)}'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        schedules = FlightScheduleSerializer(summary.schedules, many=True).data
        return Response({
            'success': True,
            'data': summary.to_dict(serialized_schedules=schedules),
            'message': summary.message,
        })

    def preview(self, request, event_id=None):
        """Parse a workbook and report what would be imported, without saving."""
        file_obj, error_response = self._validate_upload(request)
        if error_response:
            return error_response

        try:
            result = self.get_import_service().parse_workbook(event_id, file_obj.read())
        except FlightScheduleImportError as e:
            return self._import_error_response(e)
        except Exception as e:
            logger.error(f"Error previewing flight schedule upload: {e}", exc_info=True)
            return Response(
                {'success': False, 'error': f'Error previewing file: {str(e)}'},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        return Response({'success': True, 'data': result.to_dict()})

    def download(self, request, event_id=None):
        """Download every schedule of the event as an Excel workbook."""
        try:
            schedules = DjangoFlightScheduleRepository().find_by_event_id(event_id)
        except FlightSchedulePersistenceError as e:
            return Response(
                {'success': False, 'error': str(e)},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR
            )

        if not schedules:
            return Response(
                {'success': False, 'error': 'No flight schedules found for this event'},
                status=status.HTTP_404_NOT_FOUND
            )

        content = export_to_excel(schedules).getvalue()
        filename = build_export_filename(event_id, timezone.localdate())
        logger.info(f"[download] Event {event_id}: {len(schedules)} schedules, {len(content)} bytes")
        return _xlsx_response(content, filename)

    def template(self, request, event_id=None):
        """Download an import template with example rows."""
        return _xlsx_response(build_template_workbook().getvalue(), TEMPLATE_FILENAME)
