"""
mp_retry – bounded-retry executor with backoff, jitter and cancellation.

Import path convention::

    from mp_retry.resilience.retry import RetryExecutor, RetryPolicy
    from mp_retry.resilience.cancellation import CancellationToken
    from mp_retry.kernel.errors import BaseError
"""

from mp_retry.resilience.cancellation import CancellationToken
from mp_retry.resilience.retry import (
    MaxTriesExceededError,
    RetryCancelledError,
    RetryError,
    RetryErrorKind,
    RetryExecutor,
    RetryPolicy,
    UnretryableError,
    retry,
)

__version__ = "0.1.0"
__all__ = [
    "CancellationToken",
    "MaxTriesExceededError",
    "RetryCancelledError",
    "RetryError",
    "RetryErrorKind",
    "RetryExecutor",
    "RetryPolicy",
    "UnretryableError",
    "__version__",
    "retry",
]
