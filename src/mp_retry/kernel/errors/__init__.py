"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    └── ApplicationError               (application.py)
        ├── TimeoutError
        │   └── DeadlineExceededError  (resilience.cancellation)
        ├── OperationCancelledError    (resilience.cancellation)
        ├── ConfigError                (config.validation)
        └── RetryError                 (resilience.retry)
            ├── UnretryableError
            ├── MaxTriesExceededError
            └── RetryCancelledError
"""

from mp_retry.kernel.errors.application import ApplicationError, TimeoutError
from mp_retry.kernel.errors.base import BaseError

__all__ = [
    "ApplicationError",
    "BaseError",
    "TimeoutError",
]
