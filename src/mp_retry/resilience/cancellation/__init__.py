"""Resilience – cancellation signals raced against retry waits."""
from mp_retry.resilience.cancellation.errors import DeadlineExceededError, OperationCancelledError
from mp_retry.resilience.cancellation.deadline import Deadline
from mp_retry.resilience.cancellation.token import CancellationToken

__all__ = [
    "CancellationToken",
    "Deadline",
    "DeadlineExceededError",
    "OperationCancelledError",
]
