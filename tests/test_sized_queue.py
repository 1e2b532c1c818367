import pytest

from mosaic.sized_queue import SizedQueue


def test_zero_capacity_rejected():
    with pytest.raises(ValueError):
        SizedQueue(0)


def test_capacity_reported():
    assert SizedQueue(5).capacity() == 5


def test_push_puts_newest_first():
    q = SizedQueue(3)
    for v in ("a", "b", "c"):
        q.push(v)
    assert list(q) == ["c", "b", "a"]
    assert q.front() == "c"
    assert q.back() == "a"


def test_full_queue_discards_oldest():
    q = SizedQueue(2)
    for v in (1, 2, 3):
        q.push(v)
    assert len(q) == 2
    assert list(q) == [3, 2]


def test_length_never_exceeds_capacity():
    q = SizedQueue(4)
    for v in range(20):
        q.push(v)
        assert len(q) <= q.capacity()
    assert q.front() == 19


def test_pop_returns_front_and_removes_it():
    q = SizedQueue(3)
    q.push("x")
    q.push("y")
    assert q.pop() == "y"
    assert list(q) == ["x"]


def test_pop_empty_returns_none():
    assert SizedQueue(2).pop() is None


def test_front_and_back_empty_raise():
    q = SizedQueue(2)
    with pytest.raises(IndexError):
        q.front()
    with pytest.raises(IndexError):
        q.back()


def test_indexing():
    q = SizedQueue(3)
    q.push("first")
    q.push("second")
    assert q[0] == "second"
    assert q[1] == "first"
    with pytest.raises(IndexError):
        q[2]
    with pytest.raises(IndexError):
        q[-1]


def test_indexing_empty_raises():
    with pytest.raises(IndexError, match="empty"):
        SizedQueue(1)[0]


def test_clear_empties():
    q = SizedQueue(3)
    q.push(1)
    q.push(2)
    q.clear()
    assert len(q) == 0
    assert q.pop() is None