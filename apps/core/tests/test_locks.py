import threading
import time

from django.test import SimpleTestCase

from apps.core.locks import LockTimeout, ReadWriteLock


class ReadWriteLockTest(SimpleTestCase):
    def setUp(self):
        self.lock = ReadWriteLock()

    def test_readers_share_the_lock(self):
        self.assertTrue(self.lock.acquire_read(timeout=0))
        self.assertTrue(self.lock.acquire_read(timeout=0))
        self.lock.release_read()
        self.lock.release_read()

    def test_writer_excludes_readers_and_writers(self):
        self.assertTrue(self.lock.acquire_write(timeout=0))
        self.assertFalse(self.lock.acquire_read(timeout=0.01))
        self.assertFalse(self.lock.acquire_write(timeout=0.01))
        self.lock.release_write()
        self.assertTrue(self.lock.acquire_read(timeout=0))
        self.lock.release_read()

    def test_reader_excludes_writer(self):
        self.lock.acquire_read()
        self.assertFalse(self.lock.acquire_write(timeout=0.01))
        self.lock.release_read()
        self.assertTrue(self.lock.acquire_write(timeout=0))
        self.lock.release_write()

    def test_context_managers_raise_on_timeout(self):
        self.lock.acquire_write()
        with self.assertRaises(LockTimeout):
            with self.lock.read_locked(timeout=0.01):
                pass
        with self.assertRaises(LockTimeout):
            with self.lock.write_locked(timeout=0.01):
                pass
        self.lock.release_write()

    def test_context_manager_releases_on_error(self):
        with self.assertRaises(ValueError):
            with self.lock.write_locked():
                raise ValueError("boom")
        self.assertTrue(self.lock.acquire_write(timeout=0))
        self.lock.release_write()

    def test_waiting_writer_blocks_new_readers(self):
        self.lock.acquire_read()
        acquired = threading.Event()

        def writer():
            self.lock.acquire_write()
            acquired.set()
            self.lock.release_write()

        thread = threading.Thread(target=writer)
        thread.start()
        # give the writer time to start waiting
        deadline = time.monotonic() + 1
        while not self.lock._writers_waiting and time.monotonic() < deadline:
            time.sleep(0.001)

        self.assertFalse(self.lock.acquire_read(timeout=0.01))
        self.lock.release_read()
        thread.join(timeout=1)
        self.assertTrue(acquired.is_set())

    def test_abandoned_writer_unblocks_readers(self):
        self.lock.acquire_read()
        self.assertFalse(self.lock.acquire_write(timeout=0.01))
        self.assertTrue(self.lock.acquire_read(timeout=0))
        self.lock.release_read()
        self.lock.release_read()

    def test_release_without_acquire(self):
        with self.assertRaises(RuntimeError):
            self.lock.release_read()
        with self.assertRaises(RuntimeError):
            self.lock.release_write()
