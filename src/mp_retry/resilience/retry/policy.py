"""Resilience – RetryPolicy."""
from __future__ import annotations

import asyncio
import dataclasses
import random
import threading
from typing import TYPE_CHECKING, Any, Callable

from mp_retry.config.validation import require_non_negative
from mp_retry.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from mp_retry.resilience.retry.jitter import JitterStrategy, NoJitter, SymmetricJitter
from mp_retry.resilience.retry.timers import AsyncTimerFactory, TimerFactory, async_wait, threading_timer

if TYPE_CHECKING:
    from mp_retry.config.settings import RetrySettings


@dataclasses.dataclass(frozen=True)
class RetryPolicy:
    """Immutable retry configuration, safe to share between executions.

    Durations are in seconds.

    Attributes
    ----------
    max_attempts:
        Attempt budget.  ``0`` and ``1`` both mean a single attempt; a
        negative value means no limit.
    base_delay:
        Wait after the first failed attempt.
    jitter:
        Maximum random adjustment added to or subtracted from each wait,
        silently limited to that wait.
    scale_factor:
        Each wait is ``1 + scale_factor`` times the previous one; ``0``
        keeps it constant.
    max_delay:
        Ceiling applied before jitter; ``0`` means no ceiling.
    is_retryable:
        Predicate over the raised exception; ``None`` retries everything.
    timer_factory / async_timer_factory:
        Wait-signal sources for :meth:`RetryExecutor.execute` and
        :meth:`RetryExecutor.execute_async`.  Without an async factory,
        ``execute_async`` awaits the signals of ``timer_factory`` when one is
        set, and ``asyncio.sleep`` otherwise.
    random_source:
        Uniform ``[0, 1)`` source for jitter.
    """

    max_attempts: int = 0
    base_delay: float = 0.0
    jitter: float = 0.0
    scale_factor: float = 0.0
    max_delay: float = 0.0
    is_retryable: Callable[[BaseException], bool] | None = dataclasses.field(default=None, repr=False)
    timer_factory: TimerFactory | None = dataclasses.field(default=None, repr=False)
    async_timer_factory: AsyncTimerFactory | None = dataclasses.field(default=None, repr=False)
    random_source: Callable[[], float] | None = dataclasses.field(default=None, repr=False)

    def __post_init__(self) -> None:
        require_non_negative(
            base_delay=self.base_delay,
            jitter=self.jitter,
            scale_factor=self.scale_factor,
            max_delay=self.max_delay,
        )

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def unlimited(cls, **kwargs: Any) -> "RetryPolicy":
        """Policy without an attempt budget; bound it with a cancellation token."""
        return cls(max_attempts=-1, **kwargs)

    @classmethod
    def from_settings(cls, settings: "RetrySettings", **collaborators: Any) -> "RetryPolicy":
        """Build a policy from loaded settings plus callables (predicate, timers, random)."""
        return cls(
            max_attempts=settings.max_attempts,
            base_delay=settings.base_delay,
            jitter=settings.jitter,
            scale_factor=settings.scale_factor,
            max_delay=settings.max_delay,
            **collaborators,
        )

    def with_overrides(self, **changes: Any) -> "RetryPolicy":
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # Decisions
    # ------------------------------------------------------------------

    @property
    def unlimited_attempts(self) -> bool:
        return self.max_attempts < 0

    def is_exhausted(self, attempts_made: int) -> bool:
        """Whether *attempts_made* failed attempts use up the budget."""
        return self.max_attempts >= 0 and attempts_made >= self.max_attempts

    def should_retry(self, exc: BaseException) -> bool:
        return self.is_retryable is None or bool(self.is_retryable(exc))

    @property
    def backoff(self) -> BackoffStrategy:
        return ExponentialBackoff(self.base_delay, self.scale_factor, self.max_delay)

    @property
    def jitter_strategy(self) -> JitterStrategy:
        if self.jitter <= 0:
            return NoJitter()
        return SymmetricJitter(self.jitter, self.random_source or random.random)

    def calc_delay(self, attempt: int, r: float | None = None) -> float:
        """Wait before try number *attempt* (1-indexed count of tries already made).

        Pure in ``(attempt, policy, r)``; when *r* is omitted it is drawn from
        :attr:`random_source` only if jitter applies.  The result never
        exceeds :data:`threading.TIMEOUT_MAX`, jitter included.
        """
        delay = self.jitter_strategy.apply(self.backoff.compute(attempt), r)
        return min(delay, threading.TIMEOUT_MAX)

    def new_timer(self, delay: float) -> Any:
        return (self.timer_factory or threading_timer)(delay)

    def new_async_timer(self, delay: float) -> Any:
        if self.async_timer_factory is not None:
            return self.async_timer_factory(delay)
        if self.timer_factory is not None:
            return async_wait(self.timer_factory(delay))
        return asyncio.sleep(delay)


__all__ = ["RetryPolicy"]
