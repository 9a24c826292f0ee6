"""End-to-end demonstration of every subsystem in the package."""

from __future__ import annotations

import argparse
import sys
import threading
import time
from typing import Callable, Dict, List, Optional, Sequence, TextIO

from sysforge.cache.config import CacheConfig
from sysforge.cache.lru import LruCache
from sysforge.db.database import Database
from sysforge.db.errors import DuplicateKeyError, MissingPrimaryKeyError
from sysforge.db.row import Row
from sysforge.db.schema import Schema
from sysforge.memory.arena import Arena
from sysforge.memory.pool import PoolAllocator
from sysforge.memory.stats import AllocStats
from sysforge.queues.mpmc import MpmcQueue
from sysforge.queues.spsc import SpscQueue
from sysforge.runtime.executor import Executor
from sysforge.runtime.future import ready, yield_now


class DemoError(RuntimeError):
    """A demonstration step did not behave as expected."""


def _check(condition: bool, message: str) -> None:
    if not condition:
        raise DemoError(message)


# ── runtime ──────────────────────────────────────────────────────────────────


def _runtime_ready(out: TextIO) -> None:
    print("[ Demo 1 ] ready() future", file=out)
    result: Dict[str, int] = {}

    async def task() -> None:
        result["value"] = await ready(42)

    executor = Executor()
    executor.spawn(task())
    executor.run()

    value = result.get("value")
    _check(value == 42, "ready(42) should produce 42")
    print(f"  ready(42) produced: {value}  ✓", file=out)


def _runtime_yield(out: TextIO) -> None:
    print("[ Demo 2 ] yield_now()", file=out)
    steps: List[int] = []

    async def task() -> None:
        steps.append(1)
        await yield_now()
        steps.append(2)

    executor = Executor()
    executor.spawn(task())
    executor.run()

    _check(steps == [1, 2], "steps must be [1, 2] in order")
    print(f"  execution steps: {steps}  ✓", file=out)


def _runtime_many(out: TextIO) -> None:
    print("[ Demo 3 ] multiple tasks", file=out)
    counter = [0]

    async def task() -> None:
        counter[0] += 1

    executor = Executor()
    for _ in range(4):
        executor.spawn(task())
    executor.run()

    _check(counter[0] == 4, "all 4 tasks must run")
    print(f"  tasks completed: {counter[0]}  ✓", file=out)


def _runtime_interleaved(out: TextIO) -> None:
    print("[ Demo 4 ] interleaved execution", file=out)
    log: List[str] = []

    async def task_a() -> None:
        log.append("A:start")
        await yield_now()
        log.append("A:end")

    async def task_b() -> None:
        log.append("B:runs")

    executor = Executor()
    executor.spawn(task_a())
    executor.spawn(task_b())
    executor.run()

    print(f"  execution order: {log}", file=out)
    _check(log.index("A:start") < log.index("B:runs"), "A must start before B runs")
    _check(log.index("B:runs") < log.index("A:end"), "B must run before A resumes")
    print("  interleaving verified  ✓", file=out)


# ── memory ───────────────────────────────────────────────────────────────────


def _memory_arena(out: TextIO) -> None:
    print("[ Demo 1 ] Arena bump allocator", file=out)
    arena = Arena(4096)
    _check(arena.used() == 0, "a new arena must be empty")

    p1 = arena.alloc(64, 8)
    p2 = arena.alloc(128, 16)
    p3 = arena.alloc(256, 32)
    _check(None not in (p1, p2, p3), "allocations must succeed")
    _check(p1 != p2 and p2 != p3, "allocations must not alias")
    _check(arena.used() >= 448, "used must cover all three allocations")
    print(f"  3 allocations, used={arena.used()} / {arena.capacity()}", file=out)

    block = arena.view(p1, 1)
    block[0] = 0xAA
    _check(arena.view(p1, 1)[0] == 0xAA, "write through an address must be readable")
    print("  pointer write/read verified  ✓", file=out)

    arena.reset()
    _check(arena.used() == 0, "reset must rewind the cursor")
    _check(arena.remaining() == arena.capacity(), "reset must restore capacity")
    print("  reset restores capacity  ✓", file=out)

    _check(arena.alloc(4096, 1) is not None, "filling the arena must succeed")
    _check(arena.alloc(1, 1) is None, "must return None when full")
    print("  exhaustion handled correctly  ✓", file=out)


def _memory_pool(out: TextIO) -> None:
    print("[ Demo 2 ] Pool allocator", file=out)
    pool = PoolAllocator(64, 4)
    _check(pool.capacity() == 4, "pool capacity must be 4")
    _check(pool.available() == 4, "all blocks must start available")

    blocks = [pool.alloc() for _ in range(4)]
    _check(None not in blocks, "four blocks must be allocatable")
    _check(pool.available() == 0, "pool must be exhausted")
    _check(pool.alloc() is None, "must return None when exhausted")
    print("  4/4 blocks allocated, exhaustion handled  ✓", file=out)

    pool.free(blocks[0])
    pool.free(blocks[2])
    _check(pool.available() == 2, "two blocks must be free again")
    _check(pool.alloc() is not None, "realloc 1")
    _check(pool.alloc() is not None, "realloc 2")
    _check(pool.available() == 0, "pool must be exhausted again")
    print("  blocks reused after free  ✓", file=out)


def _memory_stats(out: TextIO) -> None:
    print("[ Demo 3 ] AllocStats tracking", file=out)
    stats = AllocStats()
    _check(stats.is_balanced(), "fresh stats must be balanced")

    stats.record_alloc(512)
    stats.record_alloc(256)
    _check(stats.total_allocations == 2, "two allocations recorded")
    _check(stats.current_usage == 768, "current usage must be 768")
    _check(stats.peak_usage == 768, "peak usage must be 768")

    stats.record_free(512)
    _check(stats.current_usage == 256, "current usage must be 256")
    _check(stats.peak_usage == 768, "peak must not shrink")
    _check(not stats.is_balanced(), "live bytes remain")

    stats.record_free(256)
    _check(stats.is_balanced(), "all bytes freed")
    print(
        f"  allocs={stats.total_allocations} frees={stats.total_deallocations} "
        f"peak={stats.peak_usage}B  ✓",
        file=out,
    )


# ── cache ────────────────────────────────────────────────────────────────────


def _cache_basic(out: TextIO) -> None:
    print("[ Demo 1 ] basic get/set", file=out)
    cache: LruCache[str, int] = LruCache(CacheConfig(10))
    cache.set("x", 100)
    cache.set("y", 200)
    _check(cache.get("x") == 100, "x must be 100")
    _check(cache.get("y") == 200, "y must be 200")
    _check(cache.get("z") is None, "z must be missing")
    _check(len(cache) == 2, "two entries stored")

    cache.set("x", 999)
    _check(cache.get("x") == 999, "x must be overwritten")
    _check(len(cache) == 2, "overwrite must not grow len")
    print("  get/set/overwrite  ✓", file=out)


def _cache_eviction(out: TextIO) -> None:
    print("[ Demo 2 ] LRU eviction", file=out)
    cache: LruCache[str, int] = LruCache(CacheConfig(3))
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("c", 3)
    cache.get("a")
    cache.set("d", 4)
    _check(cache.get("b") is None, "b must have been evicted")
    for key in ("a", "c", "d"):
        _check(cache.get(key) is not None, f"{key} must survive")
    print("  LRU eviction verified  ✓", file=out)


def _cache_ttl(out: TextIO) -> None:
    print("[ Demo 3 ] TTL expiry", file=out)
    cache: LruCache[str, str] = LruCache(CacheConfig(10))
    cache.set_with_ttl("short", "value", 0.05)
    cache.set_with_ttl("long", "value", 60.0)
    _check(cache.get("short") is not None, "short entry must exist immediately")
    time.sleep(0.1)
    _check(cache.get("short") is None, "short entry must have expired")
    _check(cache.get("long") is not None, "long entry must still be alive")
    print("  TTL expiry verified  ✓", file=out)


def _cache_remove_clear(out: TextIO) -> None:
    print("[ Demo 4 ] remove / clear", file=out)
    cache: LruCache[str, int] = LruCache(CacheConfig(10))
    cache.set("p", 1)
    cache.set("q", 2)
    _check(cache.remove("p") == 1, "remove must return the value")
    _check(cache.get("p") is None, "removed key must be gone")
    _check(len(cache) == 1, "one entry remains")
    cache.clear()
    _check(cache.is_empty(), "clear must empty the cache")
    print("  remove / clear  ✓", file=out)


# ── queues ───────────────────────────────────────────────────────────────────


def _queue_spsc_basic(out: TextIO) -> None:
    print("[ Demo 1 ] SPSC basic operations", file=out)
    queue: SpscQueue[int] = SpscQueue(8)
    for value in range(1, 6):
        queue.push(value)
    _check(len(queue) == 5, "five items queued")

    drained = []
    while (value := queue.pop()) is not None:
        drained.append(value)
    _check(drained == [1, 2, 3, 4, 5], "items must come out in FIFO order")
    _check(queue.is_empty(), "queue must be drained")
    print(f"  FIFO order verified, capacity={queue.capacity()} ✓", file=out)


def _queue_spsc_concurrent(out: TextIO) -> None:
    print("[ Demo 2 ] SPSC concurrent producer/consumer", file=out)
    queue: SpscQueue[int] = SpscQueue(256)
    received: List[int] = []

    def produce() -> None:
        for value in range(100):
            while not queue.push(value):
                time.sleep(0)

    def consume() -> None:
        while len(received) < 100:
            value = queue.pop()
            if value is None:
                time.sleep(0)
            else:
                received.append(value)

    threads = [threading.Thread(target=produce), threading.Thread(target=consume)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    _check(received == list(range(100)), "items must arrive in order")
    print("  100 items transferred in order  ✓", file=out)


def _queue_mpmc_basic(out: TextIO) -> None:
    print("[ Demo 3 ] MPMC basic operations", file=out)
    queue: MpmcQueue[int] = MpmcQueue(4)
    queue.push(10)
    queue.push(20)
    queue.push(30)
    _check(len(queue) == 3, "three items queued")
    queue.push(40)

    drained = []
    while (value := queue.pop()) is not None:
        drained.append(value)
    print(f"  MPMC basic pop order: {drained}  ✓", file=out)


def _queue_mpmc_concurrent(out: TextIO) -> None:
    print("[ Demo 4 ] MPMC 4 producers × 2 consumers", file=out)
    queue: MpmcQueue[int] = MpmcQueue(1024)
    consumed = [0]
    lock = threading.Lock()

    def produce(producer: int) -> None:
        for index in range(25):
            while not queue.push(producer * 25 + index):
                time.sleep(0)

    def consume() -> None:
        local = 0
        while local < 50:
            if queue.pop() is not None:
                local += 1
                with lock:
                    consumed[0] += 1
            else:
                time.sleep(0)

    threads = [threading.Thread(target=produce, args=(p,)) for p in range(4)]
    threads += [threading.Thread(target=consume) for _ in range(2)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    _check(consumed[0] == 100, "all 100 items must be consumed")
    print(f"  {consumed[0]} items consumed across 2 consumer threads  ✓", file=out)


# ── database ─────────────────────────────────────────────────────────────────


def _row(**values: object) -> Row:
    row = Row()
    for column, value in values.items():
        row.set(column, value)  # type: ignore[arg-type]
    return row


def _db_crud(out: TextIO) -> None:
    print("[ Demo 1 ] basic CRUD", file=out)
    db = Database()
    db.create_table("users", Schema("id", ["id", "name", "age"]))
    table = db.get_table("users")
    _check(table is not None, "users table must exist")

    table.insert(_row(id=1, name="Alice", age=30))
    table.insert(_row(id=2, name="Bob", age=25))
    _check(table.count() == 2, "two rows inserted")
    print("  inserted 2 rows  ✓", file=out)

    updated = table.update_where(
        lambda r: r.get("name") == "Alice",
        lambda r: r.set("age", 31),
    )
    _check(updated == 1, "one row updated")
    print("  updated Alice's age  ✓", file=out)

    deleted = table.delete_where(lambda r: r.get("name") == "Bob")
    _check(deleted == 1, "one row deleted")
    _check(table.count() == 1, "one row remains")
    print("  deleted Bob  ✓", file=out)


def _db_rejections(out: TextIO) -> None:
    print("[ Demo 2 ] duplicate key / missing PK", file=out)
    db = Database()
    db.create_table("items", Schema("sku", ["sku", "price"]))
    table = db.get_table("items")
    _check(table is not None, "items table must exist")

    item = _row(sku="ABC", price=9.99)
    table.insert(item)
    try:
        table.insert(item)
    except DuplicateKeyError:
        print("  duplicate key rejected  ✓", file=out)
    else:
        raise DemoError("duplicate key must be rejected")

    try:
        table.insert(_row(price=1.0))
    except MissingPrimaryKeyError:
        print("  missing PK rejected  ✓", file=out)
    else:
        raise DemoError("missing primary key must be rejected")


def _score(row: Row) -> Optional[int]:
    value = row.get("score")
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def _db_filters(out: TextIO) -> None:
    print("[ Demo 3 ] select_where / delete_where", file=out)
    db = Database()
    db.create_table("scores", Schema("id", ["id", "score"]))
    table = db.get_table("scores")
    _check(table is not None, "scores table must exist")

    for index in range(1, 6):
        table.insert(_row(id=index, score=index * 10))

    high = table.select_where(lambda r: (_score(r) or 0) >= 30)
    _check(len(high) == 3, "scores 30, 40, 50 qualify")
    print(f"  select_where returned {len(high)} rows  ✓", file=out)

    removed = table.delete_where(lambda r: _score(r) is not None and _score(r) < 30)
    _check(removed == 2, "two rows removed")
    _check(table.count() == 3, "three rows remain")
    print(f"  delete_where removed {removed} rows  ✓", file=out)


def _db_multi_table(out: TextIO) -> None:
    print("[ Demo 4 ] multi-table database", file=out)
    db = Database()
    db.create_table("customers", Schema("id", ["id", "name"]))
    db.create_table("orders", Schema("oid", ["oid", "customer_id", "total"]))

    customers = db.get_table("customers")
    orders = db.get_table("orders")
    _check(customers is not None and orders is not None, "both tables must exist")
    customers.insert(_row(id=1, name="Alice"))
    orders.insert(_row(oid=100, customer_id=1, total=49.99))

    _check(customers.count() == 1, "one customer")
    _check(orders.count() == 1, "one order")
    _check(db.table_count() == 2, "two tables")
    print("  2 independent tables confirmed  ✓", file=out)

    db.drop_table("orders")
    _check(db.table_count() == 1, "one table after drop")
    print("  drop_table works  ✓", file=out)


Demo = Callable[[TextIO], None]

SECTIONS: Dict[str, List[Demo]] = {
    "runtime": [_runtime_ready, _runtime_yield, _runtime_many, _runtime_interleaved],
    "memory": [_memory_arena, _memory_pool, _memory_stats],
    "cache": [_cache_basic, _cache_eviction, _cache_ttl, _cache_remove_clear],
    "queues": [
        _queue_spsc_basic,
        _queue_spsc_concurrent,
        _queue_mpmc_basic,
        _queue_mpmc_concurrent,
    ],
    "db": [_db_crud, _db_rejections, _db_filters, _db_multi_table],
}


def _parse(argv: Optional[Sequence[str]]) -> List[str]:
    parser = argparse.ArgumentParser(
        prog="sysforge-demo",
        description="Exercise each subsystem end to end.",
    )
    parser.add_argument(
        "sections",
        nargs="*",
        metavar="SECTION",
        help=f"sections to run ({', '.join(SECTIONS)}); all by default",
    )
    args = parser.parse_args(argv)
    unknown = [name for name in args.sections if name not in SECTIONS]
    if unknown:
        parser.error(f"unknown section(s): {', '.join(unknown)}")
    chosen = list(dict.fromkeys(args.sections))
    return chosen or list(SECTIONS)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the chosen demo sections; return 0 on success, 1 if a check fails."""
    sections = _parse(argv)
    out = sys.stdout
    try:
        for name in sections:
            print(f"=== {name} demo ===\n", file=out)
            for demo in SECTIONS[name]:
                demo(out)
            print(file=out)
    except DemoError as error:
        print(f"demo failed: {error}", file=sys.stderr)
        return 1
    print("All demos completed.", file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())