import threading

import pytest

from dormantusers import limiter


def test_release_without_acquire_raises():
    with pytest.raises(ValueError):
        limiter.release()


def test_acquire_then_release_restores_capacity():
    limiter.acquire()
    limiter.release()
    with pytest.raises(ValueError):
        limiter.release()


def test_concurrent_slot_releases_on_exit():
    with limiter.concurrent_slot():
        pass
    with pytest.raises(ValueError):
        limiter.release()


def test_concurrent_slot_releases_on_exception():
    with pytest.raises(RuntimeError):
        with limiter.concurrent_slot():
            raise RuntimeError("boom")
    with pytest.raises(ValueError):
        limiter.release()


def test_acquire_blocks_when_all_slots_taken():
    for _ in range(limiter.MAX_CONCURRENT_REQUESTS):
        limiter.acquire()
    waiter = threading.Thread(target=limiter.acquire)
    try:
        waiter.start()
        waiter.join(timeout=0.2)
        assert waiter.is_alive()
        limiter.release()
        waiter.join(timeout=2)
        assert not waiter.is_alive()
    finally:
        for _ in range(limiter.MAX_CONCURRENT_REQUESTS):
            limiter.release()
    with pytest.raises(ValueError):
        limiter.release()