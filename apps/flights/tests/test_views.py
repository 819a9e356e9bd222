"""
Tests for the flight schedule API.
"""

from io import BytesIO
from unittest import mock

from django.contrib.auth import get_user_model
from django.core.files.uploadedfile import SimpleUploadedFile
from django.test import override_settings
from django.urls import reverse
from django.utils import timezone
from openpyxl import load_workbook
from rest_framework import status
from rest_framework.test import APITestCase

from apps.flights.models import FlightSchedule
from apps.flights.services import DjangoFlightScheduleRepository, FlightSchedulePersistenceError
from apps.flights.services.excel_parser import parse_schedule_rows
from apps.flights.services.excel_parser.header_mapping import EXPORT_HEADERS, XLSX_CONTENT_TYPE
from .helpers import HEADER_ROW, VALID_ROW, build_workbook, row_with, truncate_first_sheet

User = get_user_model()

EVENT_ID = 5


def xlsx_upload(rows, name='schedules.xlsx'):
    return SimpleUploadedFile(name, build_workbook(rows), content_type=XLSX_CONTENT_TYPE)


def create_schedules(event_id, *first_names):
    rows = [HEADER_ROW] + [row_with(0, name) for name in first_names]
    drafts = parse_schedule_rows(rows, event_id).processed
    return DjangoFlightScheduleRepository().create_many(drafts)


class FlightScheduleAPITestCase(APITestCase):

    def setUp(self):
        self.user = User.objects.create_user(username='coordinator', password='password123')
        self.client.force_authenticate(user=self.user)

    def url(self, name, **kwargs):
        return reverse(name, kwargs={'event_id': EVENT_ID, **kwargs})


class UploadTestCase(FlightScheduleAPITestCase):
    """Tests for POST upload/."""

    def test_upload_valid_workbook(self):
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW, VALID_ROW])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        self.assertEqual(response.data['message'], 'Successfully processed 1 records. 0 records failed.')
        data = response.data['data']
        self.assertEqual(data['totalRecords'], 1)
        self.assertEqual(data['processedRecords'], 1)
        self.assertEqual(data['failedRecords'], 0)
        self.assertEqual(data['schedules'][0]['flight_number'], 'XY337')
        self.assertEqual(data['schedules'][0]['event_id'], EVENT_ID)
        self.assertEqual(FlightSchedule.objects.filter(event_id=EVENT_ID).count(), 1)

    def test_upload_with_failed_rows(self):
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW, VALID_ROW, row_with(4, '')])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['failedRecords'], 1)
        self.assertEqual(response.data['data']['errors'], ['Row 3: Missing required fields'])
        self.assertEqual(FlightSchedule.objects.count(), 1)

    def test_upload_missing_headers(self):
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW[:-1], VALID_ROW])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertEqual(response.data['missingHeaders'], ['Vehicle Standby (departure)'])
        self.assertEqual(FlightSchedule.objects.count(), 0)

    def test_upload_header_only(self):
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('at least a header row and one data row', response.data['error'])

    def test_upload_without_file(self):
        response = self.client.post(self.url('flight-schedule-upload'), {}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'No file provided')

    def test_upload_wrong_file_type(self):
        upload = SimpleUploadedFile('schedules.txt', b'hello', content_type='text/plain')
        response = self.client.post(self.url('flight-schedule-upload'), {'file': upload}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Invalid file type', response.data['error'])

    def test_upload_excel_content_type_with_wrong_extension(self):
        upload = SimpleUploadedFile('schedules.pdf', b'%PDF-1.4', content_type='application/vnd.ms-excel')
        response = self.client.post(self.url('flight-schedule-upload'), {'file': upload}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('Invalid file type', response.data['error'])

    def test_upload_extension_is_case_insensitive(self):
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW, VALID_ROW], name='SCHEDULES.XLSX')},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)

    def test_upload_corrupt_workbook(self):
        content = truncate_first_sheet(build_workbook([HEADER_ROW, VALID_ROW, VALID_ROW]))
        upload = SimpleUploadedFile('schedules.xlsx', content, content_type=XLSX_CONTENT_TYPE)
        response = self.client.post(self.url('flight-schedule-upload'), {'file': upload}, format='multipart')

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data['success'])
        self.assertIn('Could not read Excel file', response.data['error'])
        self.assertEqual(FlightSchedule.objects.count(), 0)

    @override_settings(FLIGHT_SCHEDULE_MAX_UPLOAD_SIZE=10)
    def test_upload_too_large(self):
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW, VALID_ROW])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn('File too large', response.data['error'])

    def test_upload_persistence_failure(self):
        error = FlightSchedulePersistenceError('Database save failed: boom')
        with mock.patch.object(DjangoFlightScheduleRepository, 'create_many', side_effect=error):
            response = self.client.post(
                self.url('flight-schedule-upload'),
                {'file': xlsx_upload([HEADER_ROW, VALID_ROW])},
                format='multipart'
            )

        self.assertEqual(response.status_code, status.HTTP_500_INTERNAL_SERVER_ERROR)
        self.assertEqual(response.data['error'], 'Database save failed: boom')

    def test_upload_requires_authentication(self):
        self.client.force_authenticate(user=None)
        response = self.client.post(
            self.url('flight-schedule-upload'),
            {'file': xlsx_upload([HEADER_ROW, VALID_ROW])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(FlightSchedule.objects.count(), 0)


class PreviewTestCase(FlightScheduleAPITestCase):
    """Tests for POST preview/."""

    def test_preview_saves_nothing(self):
        response = self.client.post(
            self.url('flight-schedule-preview'),
            {'file': xlsx_upload([HEADER_ROW, VALID_ROW, row_with(3, 'someday')])},
            format='multipart'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        data = response.data['data']
        self.assertEqual(data['processedRecords'], 1)
        self.assertEqual(data['errors'], ['Row 3: Invalid date/time format'])
        self.assertEqual(data['schedules'][0]['first_name'], 'Dayanat')
        self.assertEqual(FlightSchedule.objects.count(), 0)


class DownloadTestCase(FlightScheduleAPITestCase):
    """Tests for GET download/ and template/."""

    def test_download_without_schedules(self):
        create_schedules(EVENT_ID + 1, 'Elsewhere')
        response = self.client.get(self.url('flight-schedule-download'))

        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data['error'], 'No flight schedules found for this event')

    def test_download(self):
        create_schedules(EVENT_ID, 'Dayanat', 'Sarah')
        create_schedules(EVENT_ID + 1, 'Elsewhere')

        response = self.client.get(self.url('flight-schedule-download'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response['Content-Type'], XLSX_CONTENT_TYPE)
        filename = f'flight-schedules-event-{EVENT_ID}-{timezone.localdate().isoformat()}.xlsx'
        self.assertEqual(response['Content-Disposition'], f'attachment; filename="{filename}"')
        self.assertEqual(response['Content-Length'], str(len(response.content)))

        rows = list(load_workbook(BytesIO(response.content)).active.iter_rows(values_only=True))
        self.assertEqual(list(rows[0]), EXPORT_HEADERS)
        self.assertEqual([row[0] for row in rows[1:]], ['Dayanat', 'Sarah'])

    def test_template(self):
        response = self.client.get(self.url('flight-schedule-template'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertIn('flight-schedule-template.xlsx', response['Content-Disposition'])
        header = next(load_workbook(BytesIO(response.content)).active.iter_rows(values_only=True))
        self.assertEqual(list(header), HEADER_ROW)


class ScheduleCrudTestCase(FlightScheduleAPITestCase):
    """Tests for list, retrieve, status update and delete."""

    def setUp(self):
        super().setUp()
        self.schedule = create_schedules(EVENT_ID, 'Dayanat', 'Sarah')[0]
        create_schedules(EVENT_ID + 1, 'Elsewhere')

    def test_list_filters_by_event(self):
        response = self.client.get(self.url('flight-schedule-list'))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertTrue(response.data['success'])
        names = sorted(item['first_name'] for item in response.data['data'])
        self.assertEqual(names, ['Dayanat', 'Sarah'])

    def test_list_search(self):
        response = self.client.get(self.url('flight-schedule-list'), {'search': 'Sarah'})

        self.assertEqual(len(response.data['data']), 1)

    def test_retrieve(self):
        response = self.client.get(self.url('flight-schedule-detail', flight_id=self.schedule.flight_id))

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['flight_number'], 'XY337')

    def test_retrieve_other_event(self):
        response = self.client.get(
            reverse('flight-schedule-detail', kwargs={'event_id': 999, 'flight_id': self.schedule.flight_id})
        )
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_update_status(self):
        response = self.client.patch(
            self.url('flight-schedule-detail', flight_id=self.schedule.flight_id),
            {'status': 'Arrived'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['data']['status'], 'Arrived')
        self.schedule.refresh_from_db()
        self.assertEqual(self.schedule.status, 'Arrived')

    def test_update_invalid_status(self):
        response = self.client.patch(
            self.url('flight-schedule-detail', flight_id=self.schedule.flight_id),
            {'status': 'Lost'},
            format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data['error'], 'Invalid status value')

    def test_update_ignores_other_fields(self):
        self.client.patch(
            self.url('flight-schedule-detail', flight_id=self.schedule.flight_id),
            {'status': 'Delay', 'flight_number': 'ZZ999'},
            format='json'
        )

        self.schedule.refresh_from_db()
        self.assertEqual(self.schedule.status, 'Delay')
        self.assertEqual(self.schedule.flight_number, 'XY337')

    def test_delete(self):
        response = self.client.delete(self.url('flight-schedule-detail', flight_id=self.schedule.flight_id))

        self.assertEqual(response.status_code, status.HTTP_204_NO_CONTENT)
        self.assertFalse(FlightSchedule.objects.filter(flight_id=self.schedule.flight_id).exists())
