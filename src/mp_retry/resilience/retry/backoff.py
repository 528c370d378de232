"""Resilience – backoff strategies."""
from __future__ import annotations

import abc
import threading

# Largest timeout threading primitives accept; unlimited retries saturate here.
_SATURATION = threading.TIMEOUT_MAX


class BackoffStrategy(abc.ABC):
    """Compute the wait (seconds) before try number *attempt* (1-indexed)."""

    @abc.abstractmethod
    def compute(self, attempt: int) -> float: ...


class ExponentialBackoff(BackoffStrategy):
    """Delay grows by ``1 + scale_factor`` per attempt, optionally capped.

    ``base_delay * (1 + scale_factor) ** (attempt - 1)``; a ``scale_factor``
    of 0 gives a constant delay and a ``max_delay`` of 0 disables the cap.
    """

    def __init__(self, base_delay: float = 0.0, scale_factor: float = 0.0, max_delay: float = 0.0) -> None:
        self._base = base_delay
        self._scale = scale_factor
        self._max = max_delay

    def compute(self, attempt: int) -> float:
        delay = self._base
        if self._scale > 0 and delay > 0:
            try:
                delay = delay * (1 + self._scale) ** max(attempt - 1, 0)
            except OverflowError:
                delay = _SATURATION
        if self._max > 0 and delay > self._max:
            delay = self._max
        return min(delay, _SATURATION)


__all__ = ["BackoffStrategy", "ExponentialBackoff"]
