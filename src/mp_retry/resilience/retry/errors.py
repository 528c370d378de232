"""Resilience – retry outcome errors.

Every failed :meth:`RetryExecutor.execute` raises exactly one of these, chained
to the exception that ended the loop::

    try:
        executor.execute(fetch)
    except MaxTriesExceededError as exc:
        if exc.has_cause(ConnectionResetError):
            ...
"""
from __future__ import annotations

import enum
from typing import Any, ClassVar

from mp_retry.kernel.errors import ApplicationError, BaseError


class RetryErrorKind(enum.Enum):
    UNRETRYABLE = "unretryable"
    MAX_TRIES_EXCEEDED = "max_tries_exceeded"
    CANCELLED = "cancelled"


def _describe(exc: BaseException) -> str:
    if isinstance(exc, BaseError):
        return exc.message
    return str(exc) or type(exc).__name__


class RetryError(ApplicationError):
    """Base class of the three retry outcomes.

    Attributes
    ----------
    kind:
        Which outcome this is.
    cause:
        The exception that ended the loop (also set as ``__cause__``).
    last_attempt:
        Zero-based index of the last attempt that ran.
    """

    kind: ClassVar[RetryErrorKind]
    prefix: ClassVar[str] = "retry failed"
    default_code = "retry_error"

    def __init__(
        self,
        cause: BaseException,
        *,
        last_attempt: int | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(f"{self.prefix}: {_describe(cause)}", detail=detail, cause=cause)
        self.last_attempt = last_attempt

    def __str__(self) -> str:
        return self.message

    def is_kind(self, kind: RetryErrorKind) -> bool:
        return self.kind is kind

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["kind"] = self.kind.value
        base["last_attempt"] = self.last_attempt
        return base


class UnretryableError(RetryError):
    """The operation failed with an error the retry predicate rejected."""

    kind = RetryErrorKind.UNRETRYABLE
    prefix = "unretryable error"
    default_code = "unretryable"


class MaxTriesExceededError(RetryError):
    """The attempt budget ran out; wraps the last attempt's error."""

    kind = RetryErrorKind.MAX_TRIES_EXCEEDED
    prefix = "reached maximum retries"
    default_code = "max_tries_exceeded"


class RetryCancelledError(RetryError):
    """The cancellation token fired while waiting between attempts.

    ``cause`` is the token's reason (e.g. :class:`DeadlineExceededError`);
    ``last_error`` is the error of the attempt that preceded the wait.
    """

    kind = RetryErrorKind.CANCELLED
    prefix = "retry cancelled"
    default_code = "retry_cancelled"

    def __init__(
        self,
        cause: BaseException,
        *,
        last_error: BaseException | None = None,
        last_attempt: int | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(cause, last_attempt=last_attempt, detail=detail)
        self.last_error = last_error

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.last_error is not None:
            base["last_error"] = repr(self.last_error)
        return base


__all__ = [
    "MaxTriesExceededError",
    "RetryCancelledError",
    "RetryError",
    "RetryErrorKind",
    "UnretryableError",
]
