"""Systems building blocks: executor, allocators, cache, queues and an in-memory database."""

__version__ = "0.1.0"