"""
ASGI config for the doctor suggestion service.

HTTP only; every request is served by the regular Django handler.
"""
import os

from django.core.asgi import get_asgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "suggestapi.settings")

application = get_asgi_application()
