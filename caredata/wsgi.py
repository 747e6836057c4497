"""WSGI entry point for CareData."""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'caredata.settings')

application = get_wsgi_application()
