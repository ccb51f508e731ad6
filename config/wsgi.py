"""
WSGI config for the todo service.

Threaded WSGI servers (gunicorn --threads, runserver) share the single
TaskStore built in config.urls across request threads.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

application = get_wsgi_application()
