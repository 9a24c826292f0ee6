import threading
import time

import pytest

from sysforge.queues.spsc import SpscQueue


@pytest.mark.parametrize("size, capacity", [(4, 3), (8, 7), (16, 15)])
def test_new_is_empty(size, capacity):
    q = SpscQueue(size)
    assert (q.is_empty(), len(q), q.capacity(), q.pop()) == (True, 0, capacity, None)


@pytest.mark.parametrize("values", [[42], list(range(10))])
def test_fifo_roundtrip(values):
    q = SpscQueue(16)
    assert [q.push(v) for v in values] == [True] * len(values)
    assert list(iter(q.pop, None)) == values
    assert q.is_empty()


@pytest.mark.parametrize("size", [4, 8])
def test_push_returns_false_when_full(size):
    q = SpscQueue(size)
    assert [q.push(i) for i in range(size)] == [True] * (size - 1) + [False]
    assert len(q) == size - 1


def test_len_tracking():
    q = SpscQueue(8)
    observed = [len(q)]
    for value in (10, 20):
        q.push(value)
        observed.append(len(q))
    for _ in range(2):
        q.pop()
        observed.append(len(q))
    assert observed == [0, 1, 2, 1, 0]


def test_ring_wrap_around():
    q = SpscQueue(4)
    assert [q.push(v) for v in (10, 20, 30)] == [True, True, True]
    assert [q.pop(), q.pop()] == [10, 20]
    assert [q.push(v) for v in (40, 50)] == [True, True]
    assert list(iter(q.pop, None)) == [30, 40, 50]
    assert q.is_empty()


def test_fill_drain_refill():
    q = SpscQueue(8)
    for values in (list(range(7)), list(range(10, 17))):
        assert [q.push(v) for v in values] == [True] * 7
        assert not q.push(99)
        assert len(q) == 7
        assert list(iter(q.pop, None)) == values


def test_size_must_be_positive():
    with pytest.raises(ValueError):
        SpscQueue(0)


@pytest.mark.parametrize("count, size", [(100, 128), (200, 256), (500, 8)])
def test_concurrent_producer_consumer(count, size):
    q = SpscQueue(size)
    received = []

    def produce():
        for i in range(count):
            while not q.push(i):
                time.sleep(0)

    def consume():
        while len(received) < count:
            value = q.pop()
            if value is None:
                time.sleep(0)
            else:
                received.append(value)

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for t in threads:
        t.start()
    for t in threads:
        t.join(timeout=30)
    assert received == list(range(count))
    assert q.is_empty()