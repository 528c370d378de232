"""Unit tests for the default wait signals and the async bridge."""

from __future__ import annotations

import asyncio
import threading
import time
from typing import Any, Callable

import pytest

from mp_retry.resilience.retry import async_wait, threading_timer


class ManualSignal:
    """Wait signal completed by hand; not a concurrent.futures.Future."""

    def __init__(self) -> None:
        self.cancelled = False
        self._callbacks: list[Callable[[Any], object]] = []

    def add_done_callback(self, fn: Callable[[Any], object]) -> None:
        self._callbacks.append(fn)

    def cancel(self) -> bool:
        self.cancelled = True
        return True

    def fire(self) -> None:
        for fn in self._callbacks:
            fn(self)


class TestThreadingTimer:
    def test_completes_after_delay(self) -> None:
        future = threading_timer(0.01)
        assert future.result(timeout=1.0) is None

    def test_cancel_before_expiry(self) -> None:
        future = threading_timer(10.0)
        assert future.cancel()
        assert future.cancelled()

    def test_negative_delay_fires_at_once(self) -> None:
        assert threading_timer(-1.0).result(timeout=1.0) is None

    def test_oversized_delay_keeps_timer_thread_alive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        thread_errors: list[Any] = []
        monkeypatch.setattr(threading, "excepthook", thread_errors.append)

        future = threading_timer(threading.TIMEOUT_MAX * 2)
        time.sleep(0.05)

        assert thread_errors == []
        assert not future.done()
        assert future.cancel()


class TestAsyncWait:
    def test_wraps_concurrent_future(self) -> None:
        async def run() -> None:
            await asyncio.wait_for(async_wait(threading_timer(0.01)), timeout=1.0)

        asyncio.run(run())

    def test_cancelling_wrapped_future_cancels_timer(self) -> None:
        timer = threading_timer(10.0)

        async def run() -> None:
            waiter = async_wait(timer)
            waiter.cancel()
            await asyncio.sleep(0)

        asyncio.run(run())
        assert timer.cancelled()

    def test_custom_signal_settles_when_fired(self) -> None:
        signal = ManualSignal()

        async def run() -> None:
            waiter = async_wait(signal)
            await asyncio.sleep(0)
            assert not waiter.done()
            signal.fire()
            await asyncio.wait_for(waiter, timeout=1.0)

        asyncio.run(run())
        assert not signal.cancelled

    def test_custom_signal_fired_from_another_thread(self) -> None:
        signal = ManualSignal()

        async def run() -> None:
            waiter = async_wait(signal)
            threading.Thread(target=signal.fire).start()
            await asyncio.wait_for(waiter, timeout=1.0)

        asyncio.run(run())

    def test_cancelling_waiter_cancels_custom_signal(self) -> None:
        signal = ManualSignal()

        async def run() -> None:
            waiter = async_wait(signal)
            waiter.cancel()
            await asyncio.sleep(0)

        asyncio.run(run())
        assert signal.cancelled
