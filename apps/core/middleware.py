"""
Edge middleware for the todo service.

Request pipeline (settings.MIDDLEWARE order):
- corsheaders.middleware.CorsMiddleware: cross-origin headers and preflight
- RequestLogMiddleware: access log with status and duration
- JsonErrorMiddleware: gives transport-level errors an {"error": ...} body
"""
import logging
import time

from django.http import JsonResponse
from django.utils.deprecation import MiddlewareMixin

logger = logging.getLogger(__name__)


class RequestLogMiddleware(MiddlewareMixin):
    """Logs METHOD path status duration for every request."""

    def process_request(self, request):
        request._started_at = time.monotonic()

    def process_response(self, request, response):
        started = getattr(request, '_started_at', None)
        duration_ms = (time.monotonic() - started) * 1000 if started is not None else 0.0
        logger.info(f"{request.method} {request.path} {response.status_code} {duration_ms:.1f}ms")
        return response


class JsonErrorMiddleware(MiddlewareMixin):
    """
    Rewrites error responses that did not come from the API layer
    (unknown URL, method not allowed) into {"error": "<reason>"}.
    The Allow header of a 405 is kept, with methods sorted.
    """

    def process_response(self, request, response):
        if response.status_code < 400 or getattr(response, 'streaming', False):
            return response
        if response.get('Content-Type', '').startswith('application/json'):
            return response

        rewritten = JsonResponse(
            {"error": _reason(response)},
            status=response.status_code,
        )
        allow = response.get('Allow')
        if allow:
            methods = sorted({method.strip() for method in allow.split(',') if method.strip()})
            rewritten['Allow'] = ', '.join(methods)
        return rewritten


def _reason(response) -> str:
    if response.status_code == 405:
        return "method not allowed"
    if response.status_code == 404:
        return "not found"
    return response.reason_phrase.lower()

