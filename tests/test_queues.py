import pytest

from container_lab.core.errors import EmptyContainerError
from container_lab.structures.queues import Deque, FIFOQueue, LIFOStack


def test_fifo_order():
    q = FIFOQueue()
    for c in ("client 1", "client 2", "client 3"):
        q.push(c)
    assert q.peek() == "client 1"
    assert q.pop() == "client 1"
    assert list(q) == ["client 2", "client 3"]


def test_fifo_empty():
    q = FIFOQueue()
    assert q.poll() is None
    with pytest.raises(EmptyContainerError):
        q.pop()
    with pytest.raises(EmptyContainerError):
        q.peek()


def test_bounded_buffer_refuses_when_full():
    q = FIFOQueue(maxlen=3)
    assert all(q.offer(x) for x in ("d1", "d2", "d3"))
    assert q.is_full()
    assert q.offer("d4") is False
    with pytest.raises(OverflowError):
        q.push("d4")
    assert q.pop() == "d1"
    assert q.offer("d4") is True
    assert list(q) == ["d2", "d3", "d4"]


def test_stack_is_lifo():
    s = LIFOStack()
    for page in ("google.com", "github.com", "stackoverflow.com", "youtube.com"):
        s.push(page)
    assert s.pop() == "youtube.com"
    assert s.peek() == "stackoverflow.com"
    assert list(s) == ["stackoverflow.com", "github.com", "google.com"]
    with pytest.raises(EmptyContainerError):
        LIFOStack().pop()


def test_deque_both_ends():
    d = Deque()
    d.push_front(10)
    d.push_back(20)
    d.push_front(5)
    d.push_back(30)
    assert list(d) == [5, 10, 20, 30]
    assert d.peek_front() == 5
    assert d.peek_back() == 30
    assert d.pop_front() == 5
    assert d.pop_back() == 30
    assert list(d) == [10, 20]


def test_deque_empty():
    d = Deque()
    assert d.peek_front() is None
    assert d.poll_back() is None
    with pytest.raises(EmptyContainerError):
        d.pop_front()
    with pytest.raises(EmptyContainerError):
        d.pop_back()


def test_bounded_buffer_initial_items_respect_maxlen():
    q = FIFOQueue(["d1", "d2"], maxlen=2)
    assert q.is_full()
    assert list(q) == ["d1", "d2"]
    with pytest.raises(OverflowError):
        FIFOQueue([1, 2, 3], maxlen=2)
