"""Readers-writer lock guarding the published catalog of a PoFile.

Lookups take the shared side just long enough to copy the current
Catalog reference; a reload takes the exclusive side just long enough
to swap in the new Catalog. Parsing happens outside the lock, so a slow
reload never stalls lookups.

Architecture:
    RWLock coordinates threads with a single condition variable. Waiting
    writers block new readers (writer preference), so a steady stream of
    lookups cannot postpone a reload indefinitely.

Limitations:
    Neither side is reentrant, and a thread holding one side must not
    request the other. PoFile never nests acquisitions.

Python 3.13+.
"""

from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

__all__ = ["RWLock"]


class RWLock:
    """Readers-writer lock with writer preference.

    Allows multiple concurrent readers OR a single exclusive writer.

    Example:
        >>> lock = RWLock()
        >>> with lock.read():
        ...     pass
        >>> with lock.write():
        ...     pass
    """

    __slots__ = ("_condition", "_readers", "_waiting_writers", "_writer")

    def __init__(self) -> None:
        self._condition = threading.Condition(threading.Lock())
        self._readers: int = 0
        self._writer: bool = False
        self._waiting_writers: int = 0

    @contextmanager
    def read(self, timeout: float | None = None) -> Generator[None]:
        """Hold the shared side for the duration of the block.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Raises:
            TimeoutError: If the lock cannot be acquired within timeout
            ValueError: If timeout is negative
        """
        self._acquire(exclusive=False, timeout=timeout)
        try:
            yield
        finally:
            self._release_read()

    @contextmanager
    def write(self, timeout: float | None = None) -> Generator[None]:
        """Hold the exclusive side for the duration of the block.

        Args:
            timeout: Maximum seconds to wait. None waits indefinitely.

        Raises:
            TimeoutError: If the lock cannot be acquired within timeout
            ValueError: If timeout is negative
        """
        self._acquire(exclusive=True, timeout=timeout)
        try:
            yield
        finally:
            self._release_write()

    def _acquire(self, *, exclusive: bool, timeout: float | None) -> None:
        if timeout is not None and timeout < 0:
            msg = f"Timeout must be non-negative, got {timeout}"
            raise ValueError(msg)

        deadline = time.monotonic() + timeout if timeout is not None else None

        with self._condition:
            if exclusive:
                self._waiting_writers += 1
            try:
                while self._blocked(exclusive=exclusive):
                    if deadline is None:
                        self._condition.wait()
                        continue
                    remaining = deadline - time.monotonic()
                    if remaining <= 0:
                        side = "write" if exclusive else "read"
                        msg = f"Timed out waiting for {side} lock"
                        raise TimeoutError(msg)
                    self._condition.wait(timeout=remaining)

                if exclusive:
                    self._writer = True
                else:
                    self._readers += 1
            finally:
                if exclusive:
                    self._waiting_writers -= 1
                    # Readers blocked only by this waiting writer must
                    # re-check after a writer gives up on timeout.
                    self._condition.notify_all()

    def _blocked(self, *, exclusive: bool) -> bool:
        if exclusive:
            return self._writer or self._readers > 0
        return self._writer or self._waiting_writers > 0

    def _release_read(self) -> None:
        with self._condition:
            if self._readers == 0:
                msg = "Read lock released more times than acquired"
                raise RuntimeError(msg)
            self._readers -= 1
            if self._readers == 0:
                self._condition.notify_all()

    def _release_write(self) -> None:
        with self._condition:
            if not self._writer:
                msg = "Write lock released without being held"
                raise RuntimeError(msg)
            self._writer = False
            self._condition.notify_all()

    @property
    def reader_count(self) -> int:
        """Number of readers currently holding the lock (point-in-time)."""
        with self._condition:
            return self._readers

    @property
    def writer_active(self) -> bool:
        """True if a writer currently holds the lock (point-in-time)."""
        with self._condition:
            return self._writer

    @property
    def writers_waiting(self) -> int:
        """Number of writers blocked waiting for the lock (point-in-time)."""
        with self._condition:
            return self._waiting_writers
