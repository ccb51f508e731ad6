"""
In-memory task store.

TaskStore is the only owner of task records. All access goes through a
reader/writer lock: list/get share it, create/toggle/delete hold it
exclusively. Records are frozen dataclasses, so whatever a caller gets
back is a snapshot that cannot change under the lock.

Every operation takes an optional ``timeout`` (seconds). If the lock is
not acquired in time the call raises OperationCancelled and leaves the
store untouched.
"""
import logging
import uuid
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timedelta
from typing import Callable, Dict, Iterator, List, Optional

from django.utils import timezone

from apps.core.locks import ReadWriteLock
from .dtos import Task
from .exceptions import NotFoundError, OperationCancelled, ValidationError

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

_TICK = timedelta(microseconds=1)


class TaskStore:
    def __init__(self, clock: Optional[Clock] = None, id_factory: Optional[Callable[[], str]] = None):
        self._clock = clock or timezone.now
        self._new_id = id_factory or (lambda: str(uuid.uuid4()))
        self._lock = ReadWriteLock()
        # dict keeps insertion order, which is creation order
        self._tasks: Dict[str, Task] = {}

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._tasks)

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, title: str, timeout: Optional[float] = None) -> Task:
        """
        Create a task with the given title.

        Leading/trailing whitespace is stripped; an empty result is rejected.
        """
        if not isinstance(title, str):
            raise ValidationError("title must be a string")
        title = title.strip()
        if not title:
            raise ValidationError("title is required")

        with self._write(timeout):
            task_id = self._new_id()
            while task_id in self._tasks:
                task_id = self._new_id()
            now = self._clock()
            task = Task(id=task_id, title=title, done=False, created_at=now, updated_at=now)
            self._tasks[task_id] = task

        logger.info(f"Created todo {task.id}")
        return task

    def toggle(self, task_id: str, timeout: Optional[float] = None) -> Task:
        """Flip the done flag and refresh updated_at."""
        with self._write(timeout):
            current = self._tasks.get(task_id)
            if current is None:
                raise NotFoundError()
            # updated_at must move forward even if the clock has not
            now = max(self._clock(), current.updated_at + _TICK)
            task = replace(current, done=not current.done, updated_at=now)
            self._tasks[task_id] = task

        logger.info(f"Toggled todo {task_id} (done={task.done})")
        return task

    def delete(self, task_id: str, timeout: Optional[float] = None) -> None:
        with self._write(timeout):
            if task_id not in self._tasks:
                raise NotFoundError()
            del self._tasks[task_id]

        logger.info(f"Deleted todo {task_id}")

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list(self, timeout: Optional[float] = None) -> List[Task]:
        """Return all tasks ordered by ascending created_at."""
        with self._read(timeout):
            snapshot = list(self._tasks.values())
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(snapshot, key=lambda task: task.created_at)

    def get(self, task_id: str, timeout: Optional[float] = None) -> Task:
        with self._read(timeout):
            task = self._tasks.get(task_id)
        if task is None:
            raise NotFoundError()
        return task

    # -------------------------------------------------------------------------
    # Lock helpers
    # -------------------------------------------------------------------------

    @contextmanager
    def _read(self, timeout: Optional[float]) -> Iterator[None]:
        if not self._lock.acquire_read(timeout):
            logger.warning(f"Read lock not acquired within {timeout}s, cancelling")
            raise OperationCancelled()
        try:
            yield
        finally:
            self._lock.release_read()

    @contextmanager
    def _write(self, timeout: Optional[float]) -> Iterator[None]:
        if not self._lock.acquire_write(timeout):
            logger.warning(f"Write lock not acquired within {timeout}s, cancelling")
            raise OperationCancelled()
        try:
            yield
        finally:
            self._lock.release_write()
