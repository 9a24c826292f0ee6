# sysforge

Small, self-contained building blocks of the kind often written from scratch
when learning how systems software works. Everything is pure Python with no
third-party dependencies.

- `sysforge.runtime`
  - `future`: the awaitables `ready(value)`, which resolves at once, and
    `yield_now()`, which suspends exactly once.
  - `executor`: `Executor`, a single-threaded round-robin runner for
    coroutines.
- `sysforge.memory`
  - `allocator`: the abstract `Allocator` interface.
  - `arena`: `Arena`, a bump allocator.
  - `pool`: `PoolAllocator`, a fixed-block allocator.
  - `stats`: `AllocStats`, which counts allocations and frees.
- `sysforge.cache`
  - `config`: `CacheConfig`, which holds the capacity and default TTL.
  - `policy`: `EvictionPolicy`, with the `LruPolicy` implementation.
  - `lru`: `LruCache`, a bounded cache with optional per-entry TTL.
- `sysforge.queues`
  - `spsc`: `SpscQueue`, a ring buffer for one producer and one consumer.
  - `mpmc`: `MpmcQueue`, a lock-protected bounded queue for any number of
    threads.
- `sysforge.db`
  - `value`: cell values and `format_value`.
  - `schema`: `Schema`.
  - `row`: `Row`.
  - `table`: `Table`.
  - `database`: `Database`.
  - `errors`: `DbError` and its subclasses.

## Installation

```
pip install .
```

To run the test suite:

```
pip install .[test]
pytest
```

## Runtime

```python
from sysforge.runtime.executor import Executor
from sysforge.runtime.future import ready, yield_now

log = []

async def a():
    log.append("A:start")
    await yield_now()
    log.append("A:end")

async def b():
    log.append(await ready("B:runs"))

ex = Executor()
ex.spawn(a())
ex.spawn(b())
ex.run()
# log == ["A:start", "B:runs", "A:end"]
```

`Executor.spawn` accepts only coroutine-like objects that have a `send`
method. If you pass anything else, it raises `TypeError`.

`run()` keeps working until the queue is empty, and you can call it again
after you spawn more tasks.

The awaitables also expose `poll()`:

- `Ready.poll()` returns the value once. A second call raises
  `RuntimeError`.
- `YieldNow.poll()` returns `False` the first time and `True` after that.

## Memory

Allocators hand out integer addresses, which are byte offsets into their own
backing buffer.

```python
from sysforge.memory.arena import Arena

arena = Arena(4096)
addr = arena.alloc(64, 8)       # aligned offset, or None when it does not fit
arena.view(addr, 1)[0] = 0xAA   # writable memoryview over allocated bytes
arena.used(), arena.remaining()
arena.reset()                   # rewinds the cursor; all space is free again
```

For `Arena.alloc`, `align` must be a positive power of two. Otherwise it
raises `ValueError`.

```python
from sysforge.memory.pool import PoolAllocator

pool = PoolAllocator(block_size=64, num_blocks=4)
block = pool.alloc()            # None when exhausted
pool.free(block)                # ValueError for a foreign or already-free block
pool.available(), pool.allocated(), pool.capacity(), pool.block_size()
```

`block_size()` is never smaller than the size of a pointer on the platform.

`AllocStats` keeps the following counters:

- `total_allocations`
- `total_deallocations`
- `bytes_allocated`
- `bytes_freed`
- `current_usage`
- `peak_usage`

It records them through `record_alloc(size)` and `record_free(size)`.
`current_usage` never drops below zero, and `is_balanced()` is true when it
is zero.

## Cache

```python
from sysforge.cache.config import CacheConfig
from sysforge.cache.lru import LruCache

cache = LruCache(CacheConfig(capacity=3))
cache.set("a", 1)
cache.set_with_ttl("tmp", "value", 0.05)   # seconds; None means never expire
cache.get("a")                             # 1; also marks "a" most recently used
cache.remove("a")                          # 1
cache.evict_expired()
```

`CacheConfig.with_ttl(capacity, ttl)` sets a default TTL, and `set()`
applies that default to each entry it stores. Expired entries are dropped
when they are accessed, or all at once by `evict_expired()`.

`LruCache` takes an optional `clock` callable, which defaults to
`time.monotonic`. `LruPolicy` can also be used on its own, through these
methods:

- `touch`
- `evict`
- `remove`
- `clear`
- `len()`
- `is_empty`

## Queues

```python
from sysforge.queues.spsc import SpscQueue
from sysforge.queues.mpmc import MpmcQueue

q = SpscQueue(8)        # 8 slots, holds at most 7 items (capacity() == 7)
q.push(1)               # False when full
q.pop()                 # None when empty

m = MpmcQueue(4)        # holds at most 4 items
m.push("x"); m.pop()
```

Neither queue blocks: a full queue rejects a push, and an empty queue
returns `None`.

## Database

```python
from sysforge.db.database import Database
from sysforge.db.row import Row
from sysforge.db.schema import Schema

db = Database()
db.create_table("users", Schema("id", ["id", "name", "age"]))
users = db.get_table("users")

row = Row()
row.set("id", 1)
row.set("name", "Alice")
row.set("age", 30)
users.insert(row)

users.update_where(lambda r: r.get("name") == "Alice",
                   lambda r: r.set("age", 31))
users.select_where(lambda r: r.get("age") >= 18)
users.delete_where(lambda r: r.get("id") == 1)   # returns rows removed
users.count()
```

Values are `int`, `float`, `str`, `bool` or `None`, where `None` means NULL.
`Row.get` returns `None` both for a missing column and for a stored NULL; use
`Row.has` to tell the two apart.

Primary keys compare by type as well as value, so `1`, `1.0` and `True` are
distinct keys.

`format_value` renders values as text:

- booleans as `true` and `false`
- NULL as `NULL`
- floats without an exponent

`Table.insert` can raise two errors:

- `DuplicateKeyError`, if a row with the same primary key is already stored.
- `MissingPrimaryKeyError`, if the row has no primary-key column.

Both errors are subclasses of `DbError`, as are `TableNotFoundError` and
`ColumnNotFoundError`.

`Database` also provides:

- `drop_table(name)`, which returns whether the table existed.
- `table_names()`.
- `table_count()`.

## Demo

The `sysforge-demo` command runs a walk-through of every component and
prints what each step checks:

```
sysforge-demo
sysforge-demo cache db
```

You can name any of the sections `runtime`, `memory`, `cache`, `queues` and
`db`; by default all of them run. The command exits with status 1 if a check
fails.

## What this package does not do

- The database keeps everything in memory. It has no persistence, no query
  language and no indexes.
- The cache lives in a single process. It has no network protocol and no
  replication.
- The allocators manage offsets within a Python `bytearray`. They do not
  hand out real process memory.