"""Callback-driven concurrency primitives used by the description engine.

Tasks are plain callables that receive a ``report`` function and call it exactly
once with their outcome, either before returning or at any later point (timer,
I/O completion, future callback). The combinators below never assume
synchronous completion and never cancel in-flight work.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Awaitable, Coroutine

T = TypeVar("T")

Report = Callable[[T], None]
Task = Callable[[Report[T]], None]
DuplicateHook = Callable[[object], None]

_BACKGROUND_TASKS: set[asyncio.Task[Any]] = set()


class _ReportOnce(Generic[T]):
    """Forward the first report of one task; later reports go to ``on_duplicate``."""

    __slots__ = ("_key", "_forward", "_on_duplicate", "_reported")

    def __init__(
        self,
        key: object,
        forward: Callable[[object, T], None],
        on_duplicate: DuplicateHook | None,
    ) -> None:
        self._key = key
        self._forward = forward
        self._on_duplicate = on_duplicate
        self._reported = False

    def __call__(self, outcome: T) -> None:
        if self._reported:
            if self._on_duplicate is not None:
                self._on_duplicate(self._key)
            return
        self._reported = True
        self._forward(self._key, outcome)


def run_parallel(
    tasks: Sequence[Task[T]],
    callback: Callable[[T | None], None],
    *,
    short_circuit: Callable[[T], bool],
    on_duplicate: DuplicateHook | None = None,
) -> None:
    """Start every task in order; settle on the first short-circuiting outcome.

    ``callback`` receives that outcome, or ``None`` once every task reported
    without short-circuiting. Reports arriving after settlement are ignored.
    """

    total = len(tasks)
    if total == 0:
        callback(None)
        return

    remaining = total
    settled = False

    def _collect(_key: object, outcome: T) -> None:
        nonlocal remaining, settled
        if settled:
            return
        remaining -= 1
        if short_circuit(outcome):
            settled = True
            callback(outcome)
        elif remaining == 0:
            settled = True
            callback(None)

    for index, task in enumerate(tasks):
        task(_ReportOnce(index, _collect, on_duplicate))


def run_parallel_settled(
    tasks: Mapping[str, Task[T]],
    callback: Callable[[dict[str, T]], None],
    *,
    on_duplicate: DuplicateHook | None = None,
) -> None:
    """Start every task and wait for all of them regardless of individual outcome."""

    if not tasks:
        callback({})
        return

    order = list(tasks)
    outcomes: dict[str, T] = {}

    def _collect(key: object, outcome: T) -> None:
        outcomes[str(key)] = outcome
        if len(outcomes) == len(order):
            callback({name: outcomes[name] for name in order})

    for name in order:
        tasks[name](_ReportOnce(name, _collect, on_duplicate))


def run_series(
    phases: Sequence[tuple[str, Task[T]]],
    callback: Callable[[dict[str, T]], None],
    *,
    halt: Callable[[T], bool],
    on_duplicate: DuplicateHook | None = None,
) -> None:
    """Run named phases strictly one after another.

    Phase N+1 starts only after phase N reported. A halting outcome stops the
    sequence; ``callback`` receives the outcomes of the phases that ran.
    """

    outcomes: dict[str, T] = {}

    def _start(index: int) -> None:
        if index >= len(phases):
            callback(outcomes)
            return
        name, phase = phases[index]

        def _collect(_key: object, outcome: T) -> None:
            outcomes[name] = outcome
            if halt(outcome):
                callback(outcomes)
            else:
                _start(index + 1)

        phase(_ReportOnce(name, _collect, on_duplicate))

    _start(0)


def current_running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None


def spawn(
    coroutine: Coroutine[Any, Any, T],
    on_done: Callable[[BaseException | None, T | None], None],
) -> asyncio.Task[T]:
    """Schedule ``coroutine`` on the running loop and report through ``on_done``.

    Raises ``RuntimeError`` when no loop is running; the coroutine is closed so
    it is not reported as never awaited.
    """

    loop = current_running_loop()
    if loop is None:
        _close_unscheduled_coroutine(coroutine)
        raise RuntimeError("no running event loop")

    task: asyncio.Task[T] = loop.create_task(coroutine)
    _BACKGROUND_TASKS.add(task)

    def _finished(done: asyncio.Task[T]) -> None:
        _BACKGROUND_TASKS.discard(done)
        if done.cancelled():
            on_done(asyncio.CancelledError("test function cancelled"), None)
            return
        exc = done.exception()
        if exc is not None:
            on_done(exc, None)
            return
        on_done(None, done.result())

    task.add_done_callback(_finished)
    return task


async def await_callback(start: Callable[[Callable[..., None]], None]) -> tuple[Any, ...]:
    """Run a callback-style operation and await the arguments of its first call."""

    loop = asyncio.get_running_loop()
    future: asyncio.Future[tuple[Any, ...]] = loop.create_future()

    def _resolve(args: tuple[Any, ...]) -> None:
        if not future.done():
            future.set_result(args)

    def _callback(*args: Any) -> None:
        loop.call_soon_threadsafe(_resolve, args)

    start(_callback)
    return await future


def _close_unscheduled_coroutine(awaitable: Awaitable[object]) -> None:
    if inspect.iscoroutine(awaitable):
        awaitable.close()


__all__ = [
    "Report",
    "Task",
    "await_callback",
    "current_running_loop",
    "run_parallel",
    "run_parallel_settled",
    "run_series",
    "spawn",
]
