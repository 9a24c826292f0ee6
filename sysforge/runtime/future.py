"""Primitive awaitables: a value that is ready at once, and a single yield."""

from __future__ import annotations

from typing import Any, Generator, Generic, TypeVar

T = TypeVar("T")

_TAKEN = object()


class Ready(Generic[T]):
    """An awaitable that resolves on its first poll with the stored value."""

    __slots__ = ("_value",)

    def __init__(self, value: T) -> None:
        self._value: Any = value

    def poll(self) -> T:
        """Return the stored value; it may be taken only once."""
        if self._value is _TAKEN:
            raise RuntimeError("Ready polled after completion")
        value, self._value = self._value, _TAKEN
        return value

    def __await__(self) -> Generator[None, None, T]:
        yield from ()
        return self.poll()


class YieldNow:
    """An awaitable that is pending exactly once, then complete."""

    __slots__ = ("_yielded",)

    def __init__(self) -> None:
        self._yielded = False

    def poll(self) -> bool:
        """Return True once complete; the first poll is always pending."""
        if self._yielded:
            return True
        self._yielded = True
        return False

    def __await__(self) -> Generator[None, None, None]:
        while not self.poll():
            yield


def ready(value: T) -> Ready[T]:
    """Wrap ``value`` in an awaitable that resolves immediately."""
    return Ready(value)


def yield_now() -> YieldNow:
    """Return an awaitable that hands control back to the executor once."""
    return YieldNow()