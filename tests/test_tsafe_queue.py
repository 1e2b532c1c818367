import threading
import time

import pytest

from mosaic.tsafe_queue import ThreadSafeQueue


def test_push_and_try_pop():
    q = ThreadSafeQueue()
    q.push(42)
    assert q.try_pop() == 42


def test_try_pop_empty_returns_none():
    assert ThreadSafeQueue().try_pop() is None


def test_wait_and_pop_blocks_until_available():
    q = ThreadSafeQueue()

    def producer():
        time.sleep(0.05)
        q.push(1337)

    thread = threading.Thread(target=producer)
    thread.start()
    started = time.perf_counter()
    value = q.wait_and_pop(timeout=5)
    waited = time.perf_counter() - started
    thread.join()
    assert value == 1337
    assert waited > 0.0
    assert q.empty()


def test_wait_and_pop_times_out():
    with pytest.raises(TimeoutError):
        ThreadSafeQueue().wait_and_pop(timeout=0.01)


def test_multiple_push_and_pop():
    q = ThreadSafeQueue()
    for i in range(10):
        q.push(i)
    assert len(q) == 10
    for i in range(10):
        assert q.try_pop() == i
    assert q.empty()


def test_threaded_producer_consumer():
    q = ThreadSafeQueue()

    def producer():
        for i in range(100):
            q.push(i)

    thread = threading.Thread(target=producer)
    thread.start()
    consumed = []
    for _ in range(100):
        val = q.try_pop()
        while val is None:
            time.sleep(0.00001)
            val = q.try_pop()
        consumed.append(val)
    thread.join()
    assert consumed == list(range(100))
    assert q.try_pop() is None