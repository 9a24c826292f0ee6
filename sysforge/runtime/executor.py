"""A single-threaded cooperative executor for coroutines."""

from __future__ import annotations

from collections import deque
from typing import Any, Coroutine, Deque


class Executor:
    """Runs spawned coroutines round-robin until every one has finished.

    Each step sends into a task once; a task that suspends goes to the back
    of the ready queue, so other tasks run before it resumes.
    """

    def __init__(self) -> None:
        self._ready: Deque[Coroutine[Any, Any, Any]] = deque()

    def spawn(self, coroutine: Coroutine[Any, Any, Any]) -> None:
        """Queue a coroutine for cooperative execution."""
        if not hasattr(coroutine, "send"):
            raise TypeError(
                f"expected a coroutine, got {type(coroutine).__name__}"
            )
        self._ready.append(coroutine)

    def run(self) -> None:
        """Drive all queued tasks to completion."""
        while self._ready:
            task = self._ready.popleft()
            try:
                task.send(None)
            except StopIteration:
                continue
            self._ready.append(task)