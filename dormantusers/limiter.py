"""A process-wide limit on concurrent API requests."""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

PRIMARY_RATE_LIMIT = 5000
MAX_CONCURRENT_REQUESTS = 100

_slots = threading.BoundedSemaphore(MAX_CONCURRENT_REQUESTS)


def acquire() -> None:
    """Take one request slot, waiting until one is free."""
    _slots.acquire()


def release() -> None:
    """Give a request slot back.

    Raises ValueError if no slot is currently held.
    """
    _slots.release()


@contextmanager
def concurrent_slot() -> Iterator[None]:
    """Hold one request slot for the duration of the block."""
    acquire()
    try:
        yield
    finally:
        release()