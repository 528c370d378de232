"""Resilience – retry executor and cancellation signals."""

from mp_retry.resilience.cancellation import CancellationToken, Deadline, DeadlineExceededError, OperationCancelledError
from mp_retry.resilience.retry import RetryExecutor, RetryPolicy

__all__ = [
    "CancellationToken",
    "Deadline",
    "DeadlineExceededError",
    "OperationCancelledError",
    "RetryExecutor",
    "RetryPolicy",
]
