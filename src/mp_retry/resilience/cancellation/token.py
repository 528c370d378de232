"""Resilience – CancellationToken.

A thread-safe, one-shot signal that a caller sets to stop a retry loop while
it waits between attempts.  The same token can be observed from synchronous
code (:meth:`CancellationToken.wait`, callbacks) and from coroutines
(:meth:`CancellationToken.wait_async`).

Usage::

    with CancellationToken.with_timeout(5.0) as token:
        executor.execute(fetch, cancellation=token)
"""
from __future__ import annotations

import asyncio
import itertools
import threading
from typing import Callable

from mp_retry.resilience.cancellation.deadline import Deadline
from mp_retry.resilience.cancellation.errors import DeadlineExceededError, OperationCancelledError


class CancellationToken:
    """One-shot cancellation signal carrying the reason it fired."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._event = threading.Event()
        self._cause: BaseException | None = None
        self._callbacks: dict[int, Callable[[], None]] = {}
        self._handles = itertools.count()
        self._deadline: Deadline | None = None
        self._timer: threading.Timer | None = None

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def never(cls) -> "CancellationToken":
        """A token nobody holds a reference to cancel."""
        return cls()

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancellationToken":
        """Token that cancels itself with :class:`DeadlineExceededError` after *seconds*."""
        return cls.from_deadline(Deadline.after(seconds))

    @classmethod
    def from_deadline(cls, deadline: Deadline) -> "CancellationToken":
        token = cls()
        token._deadline = deadline
        remaining = deadline.remaining_seconds
        if remaining <= 0:
            token.cancel(DeadlineExceededError())
            return token
        timer = threading.Timer(min(remaining, threading.TIMEOUT_MAX), token._expire)
        timer.daemon = True
        token._timer = timer
        timer.start()
        return token

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def cause(self) -> BaseException | None:
        """Why the token fired; ``None`` while it has not."""
        return self._cause

    @property
    def deadline(self) -> Deadline | None:
        return self._deadline

    def cancel(self, cause: BaseException | None = None) -> bool:
        """Fire the token.  Returns ``False`` if it had already fired.

        Only the first cause is kept.  Registered callbacks run on the
        calling thread, after the state change is visible.
        """
        with self._lock:
            if self._event.is_set():
                return False
            self._cause = cause if cause is not None else OperationCancelledError()
            self._event.set()
            callbacks = list(self._callbacks.values())
            self._callbacks.clear()
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        for callback in callbacks:
            callback()
        return True

    def raise_if_cancelled(self) -> None:
        if self._cause is not None:
            raise self._cause

    def close(self) -> None:
        """Stop the deadline timer without firing the token."""
        with self._lock:
            timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()

    def _expire(self) -> None:
        self.cancel(DeadlineExceededError())

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------

    def add_callback(self, callback: Callable[[], None]) -> int:
        """Run *callback* once when the token fires.

        Runs immediately when the token already fired.  The returned handle
        is accepted by :meth:`remove_callback`.
        """
        with self._lock:
            handle = next(self._handles)
            if not self._event.is_set():
                self._callbacks[handle] = callback
                return handle
        callback()
        return handle

    def remove_callback(self, handle: int) -> None:
        with self._lock:
            self._callbacks.pop(handle, None)

    def wait(self, timeout: float | None = None) -> bool:
        """Block until the token fires or *timeout* elapses; ``True`` if fired."""
        return self._event.wait(timeout)

    async def wait_async(self) -> BaseException | None:
        """Suspend until the token fires and return its cause."""
        loop = asyncio.get_running_loop()
        fired: asyncio.Future[None] = loop.create_future()

        def _resolve() -> None:
            if not fired.done():
                fired.set_result(None)

        def _wake() -> None:
            if loop.is_closed():
                return
            loop.call_soon_threadsafe(_resolve)

        handle = self.add_callback(_wake)
        try:
            await fired
        finally:
            self.remove_callback(handle)
        return self._cause

    # ------------------------------------------------------------------
    # Context manager
    # ------------------------------------------------------------------

    def __enter__(self) -> "CancellationToken":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __repr__(self) -> str:
        state = f"cancelled, cause={self._cause!r}" if self.cancelled else "active"
        return f"CancellationToken({state})"


__all__ = ["CancellationToken"]
