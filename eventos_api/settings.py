"""Django settings for the eventos API.

Values are read from environment variables with development defaults.
"""

import os

SECRET_KEY = os.environ.get("DJANGO_SECRET_KEY", "dev-only-secret-key")

DEBUG = os.environ.get("DJANGO_DEBUG", "false").lower() in {"1", "true", "yes"}

ALLOWED_HOSTS = os.environ.get("DJANGO_ALLOWED_HOSTS", "localhost,127.0.0.1").split(",")

INSTALLED_APPS = [
    "rest_framework",
    "eventos",
]

MIDDLEWARE = [
    "django.middleware.common.CommonMiddleware",
]

ROOT_URLCONF = "eventos_api.urls"

WSGI_APPLICATION = "eventos_api.wsgi.application"

# No database: events are kept in memory.
DATABASES = {}

USE_TZ = True

TIME_ZONE = "America/Sao_Paulo"

LANGUAGE_CODE = "pt-br"

REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
    "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [],
    "UNAUTHENTICATED_USER": None,
}

# Dotted path to the EventStore implementation used by default.
EVENTOS_STORE = os.environ.get("EVENTOS_STORE", "eventos.stores.memory_store.InMemoryEventStore")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "standard": {
            "format": "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "standard",
        },
    },
    "loggers": {
        "eventos": {
            "handlers": ["console"],
            "level": os.environ.get("EVENTOS_LOG_LEVEL", "INFO").upper(),
            "propagate": True,
        },
    },
}
