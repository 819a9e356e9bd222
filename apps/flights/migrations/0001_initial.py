from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='FlightSchedule',
            fields=[
                ('flight_id', models.BigAutoField(primary_key=True, serialize=False)),
                ('event_id', models.PositiveIntegerField(db_index=True, help_text='Identifier of the event this guest belongs to', verbose_name='event')),
                ('first_name', models.CharField(max_length=255, verbose_name='first name')),
                ('last_name', models.CharField(max_length=255, verbose_name='last name')),
                ('flight_number', models.CharField(max_length=50, verbose_name='flight number')),
                ('property_name', models.CharField(help_text='Hotel or property where the guest stays', max_length=255, verbose_name='property name')),
                ('arrival_time', models.DateTimeField(verbose_name='arrival time')),
                ('departure_time', models.DateTimeField(verbose_name='departure time')),
                ('vehicle_standby_arrival_time', models.DateTimeField(help_text='When the vehicle waits for the arriving guest', verbose_name='vehicle standby (arrival)')),
                ('vehicle_standby_departure_time', models.DateTimeField(help_text='When the vehicle waits for the departing guest', verbose_name='vehicle standby (departure)')),
                ('status', models.CharField(choices=[('pending', 'Pending'), ('Arrived', 'Arrived'), ('Delay', 'Delay'), ('No show', 'No show'), ('Re scheduled', 'Re scheduled')], db_index=True, default='pending', max_length=20, verbose_name='status')),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True, verbose_name='created at')),
                ('updated_at', models.DateTimeField(auto_now=True, verbose_name='updated at')),
            ],
            options={
                'verbose_name': 'Flight Schedule',
                'verbose_name_plural': 'Flight Schedules',
                'ordering': ['created_at', 'flight_id'],
                'indexes': [models.Index(fields=['event_id', 'created_at'], name='flights_event_created_idx')],
            },
        ),
    ]
