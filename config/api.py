"""
Ninja API assembly.

build_api() wires a TaskStore into the todos router and registers the
exception handlers that render every failure as {"error": "<message>"}.
"""
import logging
from typing import Optional

from django.http import Http404, HttpRequest
from ninja import NinjaAPI
from ninja.errors import HttpError, ValidationError as SchemaValidationError

from apps.todos.api import build_router
from apps.todos.exceptions import TodoError
from apps.todos.schemas import HealthOut
from apps.todos.store import TaskStore

logger = logging.getLogger(__name__)


def build_api(
    store: TaskStore,
    lock_timeout: Optional[float] = None,
    urls_namespace: Optional[str] = None,
) -> NinjaAPI:
    api = NinjaAPI(
        title="Todo API",
        version="1.0.0",
        description="In-memory todo list service",
        docs_url="/docs",
        urls_namespace=urls_namespace,
    )

    def error_response(request: HttpRequest, status: int, message: str):
        return api.create_response(request, {"error": message}, status=status)

    @api.exception_handler(TodoError)
    def on_todo_error(request: HttpRequest, exc: TodoError):
        return error_response(request, exc.status_code, exc.message)

    @api.exception_handler(SchemaValidationError)
    def on_schema_error(request: HttpRequest, exc: SchemaValidationError):
        return error_response(request, 400, describe_validation_errors(exc.errors))

    @api.exception_handler(HttpError)
    def on_http_error(request: HttpRequest, exc: HttpError):
        return error_response(request, exc.status_code, str(exc))

    @api.exception_handler(Http404)
    def on_not_found(request: HttpRequest, exc: Http404):
        return error_response(request, 404, "not found")

    @api.exception_handler(Exception)
    def on_unhandled(request: HttpRequest, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.path}: {exc}")
        return error_response(request, 500, "internal server error")

    @api.get("/health", response=HealthOut, tags=["Health"])
    def health(request: HttpRequest):
        return {"status": "ok"}

    api.add_router("/todos", build_router(store, lock_timeout=lock_timeout))
    return api


def describe_validation_errors(errors) -> str:
    """Flatten pydantic error dicts into a single readable message."""
    parts = []
    for error in errors:
        # drop the transport prefix ("body", "payload") from the location
        loc = [str(item) for item in error.get("loc", ()) if item not in ("body", "payload")]
        msg = error.get("msg", "invalid value")
        parts.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    if not parts:
        return "invalid request body"
    return "invalid request body: " + "; ".join(parts)
