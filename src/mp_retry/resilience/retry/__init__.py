"""Resilience – bounded retry with backoff, jitter and cancellation."""
from mp_retry.resilience.retry.backoff import BackoffStrategy, ExponentialBackoff
from mp_retry.resilience.retry.errors import (
    MaxTriesExceededError,
    RetryCancelledError,
    RetryError,
    RetryErrorKind,
    UnretryableError,
)
from mp_retry.resilience.retry.executor import RetryExecutor, retry
from mp_retry.resilience.retry.jitter import JitterStrategy, NoJitter, SymmetricJitter
from mp_retry.resilience.retry.policy import RetryPolicy
from mp_retry.resilience.retry.tenacity_adapter import TenacityWait, tenacity_kwargs
from mp_retry.resilience.retry.timers import AsyncTimerFactory, TimerFactory, WaitSignal, async_wait, threading_timer

__all__ = [
    "AsyncTimerFactory", "BackoffStrategy", "ExponentialBackoff", "JitterStrategy",
    "MaxTriesExceededError", "NoJitter", "RetryCancelledError", "RetryError",
    "RetryErrorKind", "RetryExecutor", "RetryPolicy", "SymmetricJitter",
    "TenacityWait", "TimerFactory", "UnretryableError", "WaitSignal",
    "async_wait", "retry", "tenacity_kwargs", "threading_timer",
]
