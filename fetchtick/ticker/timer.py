"""
Cancellable periodic tick source.

A ``TickSource`` emits 1, 2, 3, ... once per interval and hands each value to
a single consumer callback until it is cancelled. It lives on one asyncio task
and moves through three states: IDLE -> RUNNING -> CANCELLED. CANCELLED is
terminal; a new instance is needed to tick again.

Scheduling is fixed-delay (serialize-and-delay): the wait for the next tick
starts only after the consumer returns. A consumer slower than the interval
delays later ticks but never overlaps itself and never loses a value. Keep
consumers well under the interval; this is not enforced.

Cancellation sets an explicit token that is checked before every scheduled
firing. A consumer call that is already running finishes; no tick is
delivered once ``cancel()`` has returned.

Usage:
    source = TickSource(1000)          # prints "Timer updated: N seconds"
    source.start()
    await asyncio.sleep(5.5)
    await source.cancel()
"""

from __future__ import annotations

import asyncio
import contextlib
import inspect
from enum import Enum
from typing import AsyncIterator, Awaitable, Callable, Optional, Union

import typer

from fetchtick.errors import ConfigError, TimerStateError
from fetchtick.utils.logging import get_logger

log = get_logger(__name__)

TickConsumer = Callable[[int], Union[None, Awaitable[None]]]


class TimerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    CANCELLED = "cancelled"


def _validate_ms(value: int, name: str, allow_zero: bool = False) -> int:
    valid = isinstance(value, int) and not isinstance(value, bool)
    if valid:
        valid = value >= 0 if allow_zero else value > 0
    if not valid:
        bound = ">= 0" if allow_zero else "> 0"
        err = ConfigError(f"{name} must be an integer number of milliseconds {bound}, got {value!r}")
        log.error(str(err), extra={"setting": name})
        raise err
    return value


def print_tick(seconds: int) -> None:
    """Default consumer: write the tick to the console."""
    typer.echo(f"Timer updated: {seconds} seconds")


async def tick_stream(interval_ms: int, stop: asyncio.Event) -> AsyncIterator[int]:
    """
    Yield 1, 2, 3, ... with ``interval_ms`` between values until ``stop`` is set.

    The wait before each value is a wait on ``stop`` with the interval as
    timeout, so setting ``stop`` ends the stream at the next tick boundary
    without yielding again. The interval is measured from the moment the
    consumer hands control back (``async for`` resumes the generator).
    """
    delay = _validate_ms(interval_ms, "interval_ms") / 1000.0
    seconds = 0
    while not stop.is_set():
        try:
            await asyncio.wait_for(stop.wait(), timeout=delay)
        except asyncio.TimeoutError:
            pass
        if stop.is_set():
            return
        seconds += 1
        yield seconds


class TickSource:
    """
    Periodic tick source with a single consumer.

    Parameters
    ----------
    interval_ms : int
        Milliseconds between ticks. Must be an int > 0.
    consumer : callable
        Called with each tick count. May be a plain function or a coroutine
        function; awaitables are awaited before the next tick is scheduled.

    Raises
    ------
    ConfigError
        If ``interval_ms`` is not a positive int.
    """

    def __init__(self, interval_ms: int, consumer: TickConsumer = print_tick) -> None:
        self.interval_ms = _validate_ms(interval_ms, "interval_ms")
        self._consumer = consumer
        self._stop = asyncio.Event()
        self._task: Optional[asyncio.Task[None]] = None
        self._state = TimerState.IDLE
        self._ticks = 0

    @property
    def state(self) -> TimerState:
        return self._state

    @property
    def ticks(self) -> int:
        """Number of ticks delivered to the consumer so far."""
        return self._ticks

    def start(self) -> None:
        """
        Begin ticking. Must be called from inside a running event loop.

        Raises
        ------
        TimerStateError
            If the source was already started or cancelled.
        """
        if self._state is not TimerState.IDLE:
            err = TimerStateError(
                f"Cannot start a tick source in state '{self._state.value}'; create a new one"
            )
            log.error(str(err), extra={"state": self._state.value})
            raise err

        loop = asyncio.get_running_loop()
        self._state = TimerState.RUNNING
        self._task = loop.create_task(self._run(), name=f"tick-source-{self.interval_ms}ms")
        log.debug("Tick source started", extra={"interval_ms": self.interval_ms})

    async def _run(self) -> None:
        try:
            async with contextlib.aclosing(tick_stream(self.interval_ms, self._stop)) as ticks:
                async for seconds in ticks:
                    self._ticks = seconds
                    result = self._consumer(seconds)
                    if inspect.isawaitable(result):
                        await result
        except asyncio.CancelledError:
            raise
        except Exception:
            log.exception("Tick consumer failed", extra={"tick": self._ticks})
            raise
        finally:
            self._stop.set()
            self._state = TimerState.CANCELLED

    async def wait(self, timeout: Optional[float] = None) -> bool:
        """
        Wait until the source stops ticking, for at most ``timeout`` seconds.

        Returns True if the source has stopped. Re-raises the consumer's
        exception if that is why it stopped.
        """
        if self._task is None:
            return self._state is TimerState.CANCELLED
        done, _ = await asyncio.wait({self._task}, timeout=timeout)
        if not done:
            return False
        if not self._task.cancelled():
            self._task.result()
        return True

    async def cancel(self) -> None:
        """
        Stop ticking. Idempotent.

        When this returns (from outside the consumer), the driver task has
        finished and no further tick will be delivered. A consumer call in
        progress is allowed to complete first. If the consumer raised, that
        exception is re-raised here.
        """
        self._stop.set()
        if self._task is None:
            self._state = TimerState.CANCELLED
            return
        if self._task is asyncio.current_task():
            # Called from within the consumer: the loop exits once it returns.
            return
        if not self._task.done():
            log.debug("Tick source stopping", extra={"ticks": self._ticks})
        await self.wait()

    async def __aenter__(self) -> "TickSource":
        self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        del exc_type, tb
        if exc is None:
            await self.cancel()
            return
        # The block's exception wins; the consumer failure was logged when it happened.
        try:
            await self.cancel()
        except Exception as consumer_exc:
            log.warning(
                "Tick consumer failure superseded by exception in block: %r",
                consumer_exc,
                extra={"ticks": self._ticks},
            )


async def run_timer(
    interval_ms: int,
    duration_ms: int,
    consumer: TickConsumer = print_tick,
) -> int:
    """
    Run a tick source for ``duration_ms`` milliseconds, then cancel it.

    Returns the number of ticks delivered. With 1000 ms / 5500 ms that is 5.
    """
    run_for = _validate_ms(duration_ms, "duration_ms", allow_zero=True) / 1000.0
    source = TickSource(interval_ms, consumer)

    log.info("Starting the reactive timer...")
    source.start()
    try:
        await source.wait(timeout=run_for)
    finally:
        log.info("Stopping the timer...")
        await source.cancel()
    log.info("Timer stopped.", extra={"ticks": source.ticks})
    return source.ticks


__all__ = ["TickConsumer", "TickSource", "TimerState", "print_tick", "run_timer", "tick_stream"]
