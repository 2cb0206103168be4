"""
Django settings for running the filterable app and its test suite.
"""

import os

SECRET_KEY = os.getenv("DJANGO_SECRET_KEY", "filterable-insecure-dev-key")

DEBUG = os.getenv("DJANGO_DEBUG", "False").lower() == "true"

ALLOWED_HOSTS = ["*"]

INSTALLED_APPS = [
    "django.contrib.contenttypes",
    "rest_framework",
    "django_filters",
    "filterable",
]

DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": ":memory:",
    }
}

USE_TZ = True
TIME_ZONE = "UTC"

REST_FRAMEWORK = {
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "UNAUTHENTICATED_USER": None,
}

# Filterable configuration
FILTERABLE_DATE_INPUT_FORMATS = None  # None uses DATE_INPUT_FORMATS
FILTERABLE_DATE_RANGE_SEPARATORS = [",", " - ", " to ", "|"]
FILTERABLE_TEXT_MAX_LENGTH = int(os.getenv("FILTERABLE_TEXT_MAX_LENGTH", "255"))
FILTERABLE_COLLECTION_PARAM = "collection"
FILTERABLE_RAISE_EXCEPTION = True

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "{levelname} {asctime} {name} {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "filterable": {
            "handlers": ["console"],
            "level": os.getenv("FILTERABLE_LOG_LEVEL", "WARNING"),
        },
    },
}
