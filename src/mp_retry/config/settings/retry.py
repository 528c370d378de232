"""Config settings – RetrySettings.

Environment variables (prefix ``RETRY``)::

    RETRY_MAX_ATTEMPTS=5
    RETRY_BASE_DELAY=0.1
    RETRY_JITTER=0.05
    RETRY_SCALE_FACTOR=0.5
    RETRY_MAX_DELAY=10
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_retry.config.settings.base import Settings
from mp_retry.config.validation import require_non_negative


@dataclasses.dataclass
class RetrySettings(Settings):
    """Scalar part of a retry policy, loadable from the environment.

    Durations are in seconds.  Callables (predicate, timers, random source)
    cannot come from the environment; pass them to
    :meth:`~mp_retry.resilience.retry.RetryPolicy.from_settings`.
    """

    _prefix: ClassVar[str] = "RETRY"

    max_attempts: int = 0
    base_delay: float = 0.0
    jitter: float = 0.0
    scale_factor: float = 0.0
    max_delay: float = 0.0

    def _validate(self) -> None:
        require_non_negative(
            base_delay=self.base_delay,
            jitter=self.jitter,
            scale_factor=self.scale_factor,
            max_delay=self.max_delay,
        )


__all__ = ["RetrySettings"]
