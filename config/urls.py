"""
URL configuration for the todo service.
"""
from django.conf import settings
from django.urls import path

from apps.todos.store import TaskStore
from .api import build_api

# One store per process; every request thread shares it
store = TaskStore()

api = build_api(store, lock_timeout=settings.TODOS_LOCK_TIMEOUT)

urlpatterns = [
    path('', api.urls),
]
