"""
Reader/writer lock for in-process shared state.

Readers share the lock; a writer holds it exclusively. Waiting writers
block new readers so a steady stream of reads cannot starve a write.

Usage:
    from apps.core.locks import ReadWriteLock

    lock = ReadWriteLock()
    with lock.read_locked(timeout=1.0):
        ...
    with lock.write_locked():
        ...
"""
import threading
import time
from contextlib import contextmanager
from typing import Iterator, Optional


class LockTimeout(TimeoutError):
    """Raised when the lock could not be acquired before the deadline."""


class ReadWriteLock:
    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self, timeout: Optional[float] = None) -> bool:
        deadline = _deadline(timeout)
        with self._cond:
            while self._writer or self._writers_waiting:
                if not self._wait(deadline):
                    return False
            self._readers += 1
            return True

    def release_read(self) -> None:
        with self._cond:
            if self._readers <= 0:
                raise RuntimeError("release_read() called without a read lock held")
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self, timeout: Optional[float] = None) -> bool:
        deadline = _deadline(timeout)
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    if not self._wait(deadline):
                        return False
                self._writer = True
                return True
            finally:
                self._writers_waiting -= 1
                # Readers parked behind this writer may proceed if it gave up
                if not self._writer:
                    self._cond.notify_all()

    def release_write(self) -> None:
        with self._cond:
            if not self._writer:
                raise RuntimeError("release_write() called without the write lock held")
            self._writer = False
            self._cond.notify_all()

    @contextmanager
    def read_locked(self, timeout: Optional[float] = None) -> Iterator[None]:
        if not self.acquire_read(timeout):
            raise LockTimeout(f"Could not acquire read lock within {timeout}s")
        try:
            yield
        finally:
            self.release_read()

    @contextmanager
    def write_locked(self, timeout: Optional[float] = None) -> Iterator[None]:
        if not self.acquire_write(timeout):
            raise LockTimeout(f"Could not acquire write lock within {timeout}s")
        try:
            yield
        finally:
            self.release_write()

    def _wait(self, deadline: Optional[float]) -> bool:
        if deadline is None:
            self._cond.wait()
            return True
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            return False
        self._cond.wait(remaining)
        return True


def _deadline(timeout: Optional[float]) -> Optional[float]:
    if timeout is None:
        return None
    return time.monotonic() + max(timeout, 0)
