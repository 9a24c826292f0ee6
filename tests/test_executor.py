from functools import partial

import pytest

from sysforge.runtime.executor import Executor
from sysforge.runtime.future import ready, yield_now


def _run(*tasks, executor=None):
    """Spawn each task with a shared log, run them all, and return the log."""
    executor = Executor() if executor is None else executor
    log = []
    for task in tasks:
        executor.spawn(task(log))
    executor.run()
    return log


async def _record(log, entry="done"):
    log.append(entry)


async def _record_ready(log):
    log.append(await ready(True))


async def _two_steps(log):
    log.append(1)
    await yield_now()
    log.append(2)


async def _yield_then_record(log):
    await yield_now()
    log.append("done")


async def _chained(log):
    a = await ready(1)
    b = await ready(2)
    c = await ready(3)
    log.extend([a, b, c])


async def _task_a(log):
    log.append("A:start")
    await yield_now()
    log.append("A:end")


async def _task_b(log):
    log.append("B:run")


async def _fail(log):
    raise ValueError("boom")


def test_run_with_no_tasks_leaves_executor_reusable():
    executor = Executor()
    assert _run(executor=executor) == []
    assert _run(_record, executor=executor) == ["done"]


@pytest.mark.parametrize("count", [1, 4, 5])
def test_tasks_all_complete(count):
    assert _run(*[_record] * count) == ["done"] * count


def test_ready_task_completes():
    assert _run(_record_ready) == [True]


def test_yielding_task_runs_to_completion():
    assert _run(_two_steps) == [1, 2]


def test_two_tasks_interleave_via_yield():
    assert _run(_task_a, _task_b) == ["A:start", "B:run", "A:end"]


def test_many_yielding_tasks_all_complete():
    assert _run(*[_yield_then_record] * 20) == ["done"] * 20


def test_chained_ready_futures():
    assert _run(_chained) == [1, 2, 3]


def test_executor_is_reusable():
    executor = Executor()
    assert _run(partial(_record, entry="first"), executor=executor) == ["first"]
    assert _run(partial(_record, entry="second"), executor=executor) == ["second"]


def test_spawn_rejects_non_coroutine():
    with pytest.raises(TypeError):
        Executor().spawn(42)


def test_task_exception_propagates_from_run():
    with pytest.raises(ValueError, match="boom"):
        _run(_fail)