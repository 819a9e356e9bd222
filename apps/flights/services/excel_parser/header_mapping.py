"""Column layout of flight schedule workbooks."""

# Required headers in the positional order data cells are read in
REQUIRED_HEADERS = [
    'First Name',
    'Last Name',
    'Flight Number',
    'Arrival Date',
    'Arrival Time',
    'Property Name',
    'Vehicle Standby (arrival)',
    'Departure Date',
    'Departure Time',
    'Vehicle Standby (departure)',
]

# Field each positional column maps to
ROW_FIELDS = [
    'first_name',
    'last_name',
    'flight_number',
    'arrival_date',
    'arrival_time',
    'property_name',
    'vehicle_standby_arrival',
    'departure_date',
    'departure_time',
    'vehicle_standby_departure',
]

TEXT_FIELDS = ['first_name', 'last_name', 'flight_number', 'property_name']

EXPORT_HEADERS = REQUIRED_HEADERS + ['Status']

EXPORT_COLUMN_WIDTHS = {
    'A': 15,  # First Name
    'B': 15,  # Last Name
    'C': 12,  # Flight Number
    'D': 12,  # Arrival Date
    'E': 10,  # Arrival Time
    'F': 20,  # Property Name
    'G': 12,  # Vehicle Standby (arrival)
    'H': 12,  # Departure Date
    'I': 10,  # Departure Time
    'J': 18,  # Vehicle Standby (departure)
    'K': 12,  # Status
}

TEMPLATE_EXAMPLE_ROWS = [
    ['John', 'Doe', 'AA123', '2025-01-15', '14:30', 'Grand Hotel', '15:00', '2025-01-20', '16:45', '17:15'],
    ['Sarah', 'Johnson', 'BA456', '2025-01-15', '10:15', 'Business Center', '10:45', '2025-01-20', '14:30', '15:00'],
]

XLSX_CONTENT_TYPE = 'application/vnd.openxmlformats-officedocument.spreadsheetml.sheet'
