"""
WSGI config for the doctor suggestion service.

It exposes the WSGI callable as a module-level variable named ``application``.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'suggestapi.settings')

application = get_wsgi_application()
