"""Resilience – reasons a cancellation token fired."""
from __future__ import annotations

from typing import Any

from mp_retry.kernel.errors import ApplicationError, TimeoutError as AppTimeoutError


class OperationCancelledError(ApplicationError):
    """The caller cancelled the token explicitly."""

    default_code = "operation_cancelled"

    def __init__(self, message: str = "operation cancelled", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


class DeadlineExceededError(AppTimeoutError):
    """The token's deadline passed."""

    default_code = "deadline_exceeded"

    def __init__(self, message: str = "deadline exceeded", **kwargs: Any) -> None:
        super().__init__(message, **kwargs)


__all__ = ["DeadlineExceededError", "OperationCancelledError"]
