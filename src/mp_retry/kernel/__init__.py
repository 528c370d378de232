"""Kernel – framework-agnostic building blocks."""

from mp_retry.kernel.errors import ApplicationError, BaseError, TimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
