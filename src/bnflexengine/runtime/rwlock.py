"""Readers-writer lock guarding the completion index.

Completion queries (``complete``, ``count``, ``snapshot``) are far more
frequent than updates from freshly parsed lines, and several editor buffers
may be highlighted from worker threads at once. The lock allows:
- Multiple concurrent readers (completion queries)
- One exclusive writer (usage recording)
- Writer preference, so a stream of queries cannot starve updates
- Reentrant read locks (a reader may call another reading method)
- Optional timeout for lock acquisition (raises TimeoutError)

Limitations:
    Read-to-write upgrades, write-to-read downgrades and write reentrancy
    all raise RuntimeError. Index updates are single-level operations; a
    thread that needs both must release the read lock first.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable, Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     with lock.read():  # Same thread can reacquire
        ...         pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_active_writer", "_condition", "_reader_threads", "_waiting_writers")

    def __init__(self) -> None:
        """Initialize readers-writer lock."""
        self._condition = threading.Condition(threading.Lock())
        # Thread id holding the write lock, if any
        self._active_writer: int | None = None
        # Writers blocked in _acquire_write; new readers wait while non-zero
        self._waiting_writers: int = 0
        # Reader thread id -> reentrant acquisition count
        self._reader_threads: dict[int, int] = {}

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Acquire read lock (shared access).

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely;
                0.0 is a non-blocking attempt.

        Raises:
            RuntimeError: If thread holds write lock (downgrade prohibited).
            TimeoutError: If lock cannot be acquired within timeout.
            ValueError: If timeout is negative.
        """
        self._acquire_read(timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Acquire write lock (exclusive access).

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely;
                0.0 is a non-blocking attempt.

        Raises:
            RuntimeError: On read-to-write upgrade or write reentrancy.
            TimeoutError: If lock cannot be acquired within timeout.
            ValueError: If timeout is negative.
        """
        self._acquire_write(timeout)
        try:
            yield
        finally:
            self._release_write()

    @property
    def reader_count(self) -> int:
        """Number of distinct threads currently holding read locks."""
        with self._condition:
            return len(self._reader_threads)

    @property
    def writer_active(self) -> bool:
        """True if any thread currently holds the write lock."""
        with self._condition:
            return self._active_writer is not None

    @staticmethod
    def _deadline(timeout: float | None) -> float | None:
        if timeout is None:
            return None
        if timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)
        return time.monotonic() + timeout

    def _wait_while(self, blocked: Callable[[], bool], deadline: float | None, what: str) -> None:
        """Wait on the condition until ``blocked()`` is false.

        Must be called with the condition held.

        Raises:
            TimeoutError: If the deadline passes first.
        """
        while blocked():
            if deadline is None:
                self._condition.wait()
                continue
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                msg = f"Timed out waiting for {what} lock"
                raise TimeoutError(msg)
            self._condition.wait(timeout=remaining)

    def _acquire_read(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id in self._reader_threads:
                self._reader_threads[thread_id] += 1
                return

            if self._active_writer == thread_id:
                msg = (
                    "Cannot acquire read lock while holding write lock. "
                    "Release the write lock before acquiring a read lock."
                )
                raise RuntimeError(msg)

            self._wait_while(
                lambda: self._active_writer is not None or self._waiting_writers > 0,
                deadline,
                "read",
            )
            self._reader_threads[thread_id] = 1

    def _release_read(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            count = self._reader_threads.get(thread_id)
            if count is None:
                msg = "Thread does not hold read lock"
                raise RuntimeError(msg)
            if count > 1:
                self._reader_threads[thread_id] = count - 1
                return
            del self._reader_threads[thread_id]
            if not self._reader_threads:
                self._condition.notify_all()

    def _acquire_write(self, timeout: float | None) -> None:
        deadline = self._deadline(timeout)
        thread_id = threading.get_ident()

        with self._condition:
            if thread_id in self._reader_threads:
                msg = (
                    "Cannot upgrade read lock to write lock. "
                    "Release read lock before acquiring write lock."
                )
                raise RuntimeError(msg)

            if self._active_writer == thread_id:
                msg = (
                    "Cannot acquire write lock: already holding write lock. "
                    "Release the write lock before acquiring it again."
                )
                raise RuntimeError(msg)

            self._waiting_writers += 1
            try:
                self._wait_while(
                    lambda: bool(self._reader_threads) or self._active_writer is not None,
                    deadline,
                    "write",
                )
                self._active_writer = thread_id
            finally:
                # Readers blocked on _waiting_writers need a wake-up even when
                # this writer timed out.
                self._waiting_writers -= 1
                self._condition.notify_all()

    def _release_write(self) -> None:
        thread_id = threading.get_ident()

        with self._condition:
            if self._active_writer != thread_id:
                msg = "Thread does not hold write lock"
                raise RuntimeError(msg)
            self._active_writer = None
            self._condition.notify_all()
