"""
Test settings for the flight schedule service.

In-memory SQLite and a fixed UTC timezone so parsed timestamps are stable.
"""

from .base import *  # noqa

DEBUG = False

DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.sqlite3',
        'NAME': ':memory:',
    }
}

TIME_ZONE = 'UTC'

PASSWORD_HASHERS = [
    'django.contrib.auth.hashers.MD5PasswordHasher',
]

LOGGING['root']['level'] = 'WARNING'
LOGGING['loggers']['apps.flights']['level'] = 'CRITICAL'
