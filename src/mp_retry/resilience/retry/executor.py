"""Resilience – RetryExecutor.

Drives an operation under a :class:`RetryPolicy`::

    executor = RetryExecutor(RetryPolicy(max_attempts=5, base_delay=0.1, jitter=0.05, scale_factor=0.5))

    def fetch(attempt: int) -> bytes:
        return client.get(url, headers={"X-Attempt": str(attempt)})

    with CancellationToken.with_timeout(1.0) as token:
        body = executor.execute(fetch, cancellation=token)

The operation receives the zero-based attempt index.  Its return value is
returned on success; a failure ends in exactly one of
:class:`MaxTriesExceededError`, :class:`UnretryableError` or
:class:`RetryCancelledError`.
"""
from __future__ import annotations

import asyncio
import functools
import inspect
import threading
from typing import Any, Awaitable, Callable, TypeVar

from mp_retry.observability.logging import get_logger
from mp_retry.resilience.cancellation import CancellationToken, OperationCancelledError
from mp_retry.resilience.retry.errors import MaxTriesExceededError, RetryCancelledError, UnretryableError
from mp_retry.resilience.retry.policy import RetryPolicy

T = TypeVar("T")
logger = get_logger(__name__)

_TIMER = "timer"
_CANCEL = "cancel"


class RetryExecutor:
    """Runs an operation until it succeeds or the policy says stop.

    Parameters
    ----------
    policy:
        Retry configuration; defaults to a single attempt.
    cancellation:
        Token used when a call does not pass its own.
    name:
        Bound to every log event as ``retry_name``.
    """

    def __init__(
        self,
        policy: RetryPolicy | None = None,
        *,
        cancellation: CancellationToken | None = None,
        name: str | None = None,
    ) -> None:
        self._policy = policy or RetryPolicy()
        self._cancellation = cancellation
        self._log = logger.bind(retry_name=name) if name else logger

    @property
    def policy(self) -> RetryPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Attempt loop
    # ------------------------------------------------------------------

    def execute(self, operation: Callable[[int], T], cancellation: CancellationToken | None = None) -> T:
        """Run *operation* synchronously with retry."""
        token = self._token(cancellation)
        attempt = 0
        while True:
            try:
                result = operation(attempt)
            except Exception as exc:  # noqa: BLE001
                failure: Exception = exc
            else:
                self._log_success(attempt)
                return result

            attempt += 1
            delay = self._next_delay(attempt, failure)
            if self._wait(delay, token) == _CANCEL:
                raise self._cancelled(token, failure, attempt)

    async def execute_async(
        self,
        operation: Callable[[int], Awaitable[T]],
        cancellation: CancellationToken | None = None,
    ) -> T:
        """Run coroutine function *operation* with retry.

        An *operation* that returns something other than an awaitable is a
        usage error and raises :class:`TypeError` without retrying.
        """
        token = self._token(cancellation)
        attempt = 0
        while True:
            try:
                pending = operation(attempt)
            except Exception as exc:  # noqa: BLE001
                failure: Exception = exc
            else:
                if not inspect.isawaitable(pending):
                    raise TypeError(
                        f"execute_async() needs an operation returning an awaitable, got {type(pending).__name__}"
                    )
                try:
                    result = await pending
                except Exception as exc:  # noqa: BLE001
                    failure = exc
                else:
                    self._log_success(attempt)
                    return result

            attempt += 1
            delay = self._next_delay(attempt, failure)
            if await self._wait_async(delay, token) == _CANCEL:
                raise self._cancelled(token, failure, attempt)

    def _token(self, cancellation: CancellationToken | None) -> CancellationToken:
        return cancellation or self._cancellation or CancellationToken.never()

    def _next_delay(self, attempt: int, failure: Exception) -> float:
        """Raise the terminal error for *failure*, or return the wait before *attempt*."""
        if self._policy.is_exhausted(attempt):
            self._log.warning("retry.max_tries_exceeded", attempts=attempt, error=repr(failure))
            raise MaxTriesExceededError(failure, last_attempt=attempt - 1) from failure
        if not self._policy.should_retry(failure):
            self._log.warning("retry.unretryable", attempt=attempt - 1, error=repr(failure))
            raise UnretryableError(failure, last_attempt=attempt - 1) from failure
        delay = self._policy.calc_delay(attempt)
        self._log.debug("retry.attempt_failed", attempt=attempt - 1, delay=round(delay, 6), error=repr(failure))
        return delay

    def _cancelled(self, token: CancellationToken, failure: Exception, attempt: int) -> RetryCancelledError:
        cause = token.cause or OperationCancelledError()
        self._log.warning("retry.cancelled", attempt=attempt - 1, cause=repr(cause))
        return RetryCancelledError(cause, last_error=failure, last_attempt=attempt - 1)

    def _log_success(self, attempt: int) -> None:
        if attempt:
            self._log.debug("retry.succeeded", attempt=attempt)

    # ------------------------------------------------------------------
    # Waiting: whichever of timer / cancellation fires first wins
    # ------------------------------------------------------------------

    def _wait(self, delay: float, token: CancellationToken) -> str:
        lock = threading.Lock()
        wake = threading.Event()
        winner: list[str] = []

        def _settle(source: str) -> None:
            with lock:
                if not winner:
                    winner.append(source)
            wake.set()

        handle = token.add_callback(lambda: _settle(_CANCEL))
        signal = None
        try:
            if not winner:
                signal = self._policy.new_timer(delay)
                signal.add_done_callback(lambda _: _settle(_TIMER))
            wake.wait()
        finally:
            token.remove_callback(handle)
        if winner[0] == _CANCEL and signal is not None:
            signal.cancel()
        return winner[0]

    async def _wait_async(self, delay: float, token: CancellationToken) -> str:
        loop = asyncio.get_running_loop()
        outcome: asyncio.Future[str] = loop.create_future()

        def _settle(source: str) -> None:
            if not outcome.done():
                outcome.set_result(source)

        def _on_cancel() -> None:
            if not loop.is_closed():
                loop.call_soon_threadsafe(_settle, _CANCEL)

        handle = token.add_callback(_on_cancel)
        timer: asyncio.Future[Any] | None = None
        try:
            if not token.cancelled:
                timer = asyncio.ensure_future(self._policy.new_async_timer(delay))
                timer.add_done_callback(lambda _: _settle(_TIMER))
            source = await outcome
        finally:
            token.remove_callback(handle)
            if timer is not None and not timer.done():
                timer.cancel()
        if source == _TIMER and timer is not None:
            timer.result()
        return source

    # ------------------------------------------------------------------
    # Decorator
    # ------------------------------------------------------------------

    def __call__(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Wrap *func* (sync or async) so every call runs under this executor."""
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                return await self.execute_async(lambda _attempt: func(*args, **kwargs))

            return async_wrapper

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return self.execute(lambda _attempt: func(*args, **kwargs))

        return wrapper


def retry(policy: RetryPolicy | None = None, **policy_kwargs: Any) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorator factory: ``@retry(max_attempts=3, base_delay=0.1)``."""
    if policy is not None and not isinstance(policy, RetryPolicy):
        raise TypeError(f"retry() takes a RetryPolicy, got {type(policy).__name__}; use @retry() to decorate")
    if policy is not None and policy_kwargs:
        raise TypeError("pass either a RetryPolicy or policy keyword arguments, not both")
    return RetryExecutor(policy or RetryPolicy(**policy_kwargs))


__all__ = ["RetryExecutor", "retry"]
