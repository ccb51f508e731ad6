"""
Django settings for the todo service.

Everything is read from environment variables; defaults suit local
development. There is no database: tasks live in process memory.
"""
import os
from pathlib import Path

from corsheaders.defaults import default_headers


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_float(name: str, default: float):
    value = os.getenv(name, '').strip()
    if not value:
        return default
    return float(value)


BASE_DIR = Path(__file__).resolve().parent.parent

SECRET_KEY = os.getenv('DJANGO_SECRET_KEY', 'dev-insecure-todo-service-key')

DEBUG = _env_bool('DJANGO_DEBUG', False)

ALLOWED_HOSTS = [
    host.strip()
    for host in os.getenv('DJANGO_ALLOWED_HOSTS', 'localhost,127.0.0.1').split(',')
    if host.strip()
]

INSTALLED_APPS = [
    'django.contrib.staticfiles',
    'corsheaders',
    'ninja',
    'apps.core',
    'apps.todos',
]

MIDDLEWARE = [
    'corsheaders.middleware.CorsMiddleware',
    'apps.core.middleware.RequestLogMiddleware',
    'apps.core.middleware.JsonErrorMiddleware',
]

ROOT_URLCONF = 'config.urls'

TEMPLATES = [
    {
        'BACKEND': 'django.template.backends.django.DjangoTemplates',
        'DIRS': [],
        'APP_DIRS': True,
        'OPTIONS': {'context_processors': []},
    },
]

WSGI_APPLICATION = 'config.wsgi.application'
ASGI_APPLICATION = 'config.asgi.application'

# No persistence layer
DATABASES = {}

APPEND_SLASH = False

USE_TZ = True
TIME_ZONE = 'UTC'

STATIC_URL = 'static/'

# =============================================================================
# Todo service
# =============================================================================

# Seconds a request waits for the store lock before giving up (503).
# 0 or empty disables the deadline.
TODOS_LOCK_TIMEOUT = _env_float('TODOS_LOCK_TIMEOUT', 5.0) or None

# Comma list of origins the browser client is served from; empty allows any
CORS_ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.getenv('CORS_ALLOWED_ORIGINS', '').split(',')
    if origin.strip()
]
CORS_ALLOW_ALL_ORIGINS = not CORS_ALLOWED_ORIGINS
CORS_ALLOW_METHODS = ('DELETE', 'GET', 'OPTIONS', 'POST', 'PUT')
CORS_ALLOW_HEADERS = (*default_headers, 'x-request-start', 'x-csrf-token')

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'simple': {
            'format': '%(asctime)s %(levelname)s %(name)s: %(message)s',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'loggers': {
        'apps': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
        'config': {
            'handlers': ['console'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}
