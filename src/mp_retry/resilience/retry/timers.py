"""Resilience – wait signals raced against cancellation between attempts.

A synchronous timer factory takes a delay in seconds and returns a
:class:`WaitSignal`, anything with ``add_done_callback`` and ``cancel`` such
as :class:`concurrent.futures.Future`.  An asynchronous timer factory
returns an awaitable that completes after the delay (``asyncio.sleep`` by
default).  A policy configured with only a synchronous factory has its
signals awaited through :func:`async_wait`.
"""
from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Future
from typing import Any, Awaitable, Callable, Protocol


class WaitSignal(Protocol):
    """Completes once a delay has elapsed."""

    def add_done_callback(self, fn: Callable[[Any], object]) -> None: ...
    def cancel(self) -> bool: ...


TimerFactory = Callable[[float], WaitSignal]
AsyncTimerFactory = Callable[[float], Awaitable[Any]]


def threading_timer(delay: float) -> Future[None]:
    """Return a future completed by a daemon :class:`threading.Timer`.

    Cancelling the future before it completes stops the timer thread.
    Delays beyond :data:`threading.TIMEOUT_MAX` wait that long instead.
    """
    future: Future[None] = Future()

    def _fire() -> None:
        if future.set_running_or_notify_cancel():
            future.set_result(None)

    timer = threading.Timer(min(max(delay, 0.0), threading.TIMEOUT_MAX), _fire)
    timer.daemon = True

    def _stop(f: Future[None]) -> None:
        if f.cancelled():
            timer.cancel()

    future.add_done_callback(_stop)
    timer.start()
    return future


def async_wait(signal: WaitSignal) -> asyncio.Future[Any]:
    """Awaitable view of *signal* on the running loop.

    Cancelling the returned future cancels *signal*.
    """
    if isinstance(signal, Future):
        return asyncio.wrap_future(signal)

    loop = asyncio.get_running_loop()
    waiter: asyncio.Future[Any] = loop.create_future()

    def _settle() -> None:
        if not waiter.done():
            waiter.set_result(None)

    def _on_signal(_: Any) -> None:
        if not loop.is_closed():
            loop.call_soon_threadsafe(_settle)

    def _on_waiter(f: asyncio.Future[Any]) -> None:
        if f.cancelled():
            signal.cancel()

    waiter.add_done_callback(_on_waiter)
    signal.add_done_callback(_on_signal)
    return waiter


__all__ = ["AsyncTimerFactory", "TimerFactory", "WaitSignal", "async_wait", "threading_timer"]
