"""
Errors raised by the todos store.

Each error carries the HTTP status it is rendered with by the API layer.
"""
from typing import Optional


class TodoError(Exception):
    status_code = 500
    default_message = "todo operation failed"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(TodoError):
    """Malformed or empty input."""
    status_code = 400
    default_message = "invalid input"


class NotFoundError(TodoError):
    """The operation targets an id absent from the store."""
    status_code = 404
    default_message = "todo not found"


class OperationCancelled(TodoError):
    """The deadline expired before the store lock was acquired."""
    status_code = 503
    default_message = "store busy, operation cancelled"


class InternalError(TodoError):
    status_code = 500
    default_message = "internal server error"
