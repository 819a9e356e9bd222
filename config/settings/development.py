"""
Development settings for the flight schedule service.

These settings are suitable for local development environment.
"""

from .base import *  # noqa

# SECURITY WARNING: don't run with debug turned on in production!
DEBUG = True

# Database - Use PostgreSQL
DATABASES = {
    'default': {
        'ENGINE': 'django.db.backends.postgresql',
        'NAME': config('DB_NAME', default='flight_schedules'),
        'USER': config('DB_USER', default='flights_user'),
        'PASSWORD': config('DB_PASSWORD', default='flights_password'),
        'HOST': config('DB_HOST', default='db'),
        'PORT': config('DB_PORT', default='5432'),
    }
}

# Cache
CACHES = {
    'default': {
        'BACKEND': 'django.core.cache.backends.locmem.LocMemCache',
    }
}

# CORS settings
CORS_ALLOW_ALL_ORIGINS = True  # In development only

LOGGING['loggers']['apps.flights']['level'] = config('FLIGHTS_LOG_LEVEL', default='DEBUG')
