"""
ASGI config for the todo service.

Supports ASGI servers (Daphne, Uvicorn). Sync Ninja views are wrapped in
sync_to_async(thread_sensitive=True), so they run one at a time on a
shared thread; use the WSGI entry point for parallel request threads.
"""
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.settings')

# Initialize Django at module load time, not on the first request.
from django.core.asgi import get_asgi_application

application = get_asgi_application()
