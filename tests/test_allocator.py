import pytest

from sysforge.memory.allocator import Allocator


class _CountingAllocator(Allocator):
    """Minimal allocator that just counts bytes handed out."""

    def __init__(self, capacity):
        self._capacity = capacity
        self._used = 0

    def alloc(self, size, align):
        if self._used + size > self._capacity:
            return None
        address = self._used
        self._used += size
        return address

    def reset(self):
        self._used = 0

    def capacity(self):
        return self._capacity

    def used(self):
        return self._used


class _Partial(Allocator):
    def alloc(self, size, align):
        return None


def test_abstract_allocators_cannot_be_instantiated():
    with pytest.raises(TypeError):
        Allocator()
    with pytest.raises(TypeError):
        _Partial()


@pytest.mark.parametrize(
    "capacity, sizes, remaining, full",
    [
        (1024, [], 1024, False),
        (1024, [100], 924, False),
        (32, [32], 0, True),
        (32, [10, 22], 0, True),
    ],
)
def test_remaining_and_is_full(capacity, sizes, remaining, full):
    allocator = _CountingAllocator(capacity)
    for size in sizes:
        allocator.alloc(size, 1)
    assert Allocator.remaining(allocator) == remaining
    assert Allocator.is_full(allocator) is full


def test_reset_restores_remaining():
    allocator = _CountingAllocator(32)
    allocator.alloc(32, 1)
    allocator.reset()
    assert Allocator.remaining(allocator) == 32
    assert Allocator.is_full(allocator) is False