"""
Todos API endpoints.

    GET    /todos               -> list tasks (creation order)
    POST   /todos               -> create task
    GET    /todos/{id}          -> fetch one task
    POST   /todos/{id}/toggle   -> flip done flag
    DELETE /todos/{id}          -> remove task

Each endpoint makes exactly one store call. Store errors propagate to the
exception handlers registered in config.api.
"""
from typing import List, Optional
from django.http import HttpRequest, HttpResponse
from ninja import Router

from .schemas import TaskIn, TaskOut, ErrorOut
from .store import TaskStore


def build_router(store: TaskStore, lock_timeout: Optional[float] = None) -> Router:
    """Create a router bound to ``store``."""
    router = Router(tags=["Todos"])

    @router.get("", response=List[TaskOut], by_alias=True)
    def list_todos(request: HttpRequest):
        return [TaskOut.from_task(task) for task in store.list(timeout=lock_timeout)]

    @router.post("", response={201: TaskOut}, by_alias=True)
    def create_todo(request: HttpRequest, payload: TaskIn):
        task = store.create(payload.title, timeout=lock_timeout)
        return TaskOut.from_task(task)

    @router.get("/{todo_id}", response={200: TaskOut, 404: ErrorOut}, by_alias=True)
    def get_todo(request: HttpRequest, todo_id: str):
        return TaskOut.from_task(store.get(todo_id, timeout=lock_timeout))

    @router.post("/{todo_id}/toggle", response={200: TaskOut, 404: ErrorOut}, by_alias=True)
    def toggle_todo(request: HttpRequest, todo_id: str):
        return TaskOut.from_task(store.toggle(todo_id, timeout=lock_timeout))

    @router.delete("/{todo_id}", response={204: None, 404: ErrorOut})
    def delete_todo(request: HttpRequest, todo_id: str):
        store.delete(todo_id, timeout=lock_timeout)
        return HttpResponse(status=204)

    return router
