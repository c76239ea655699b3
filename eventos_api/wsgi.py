"""WSGI config for the eventos API."""

import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "eventos_api.settings")

application = get_wsgi_application()
