"""Resilience – Deadline.

A point on the monotonic clock, the same clock :class:`threading.Timer`
waits on, so wall-clock adjustments never shorten or extend a deadline.
"""
from __future__ import annotations

import dataclasses
import time

from mp_retry.resilience.cancellation.errors import DeadlineExceededError


@dataclasses.dataclass(frozen=True)
class Deadline:
    """Absolute expiry in :func:`time.monotonic` seconds."""

    expires_at: float

    @classmethod
    def after(cls, seconds: float) -> "Deadline":
        return cls(expires_at=time.monotonic() + seconds)

    @property
    def remaining_seconds(self) -> float:
        return max(0.0, self.expires_at - time.monotonic())

    @property
    def is_expired(self) -> bool:
        return time.monotonic() >= self.expires_at

    def raise_if_expired(self) -> None:
        if self.is_expired:
            raise DeadlineExceededError()


__all__ = ["Deadline"]
