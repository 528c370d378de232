"""Resilience – tenacity interoperability.

Optional dependency: ``tenacity``.  Install with::

    pip install mp-retry[tenacity]
"""
from __future__ import annotations

from typing import Any

from mp_retry.resilience.retry.policy import RetryPolicy


def _tenacity() -> Any:
    try:
        import tenacity
    except ImportError as exc:
        raise ImportError(
            "Install 'tenacity' (pip install tenacity) to use the tenacity adapter"
        ) from exc
    return tenacity


class TenacityWait:
    """tenacity ``wait=`` strategy following a :class:`RetryPolicy` schedule.

    tenacity numbers attempts from 1, which matches the count of tries
    already made that :meth:`RetryPolicy.calc_delay` expects.
    """

    def __init__(self, policy: RetryPolicy) -> None:
        self._policy = policy

    def __call__(self, retry_state: Any) -> float:
        return self._policy.calc_delay(retry_state.attempt_number)


def tenacity_kwargs(policy: RetryPolicy, *, reraise: bool = True) -> dict[str, Any]:
    """Keyword arguments for ``tenacity.Retrying`` / ``AsyncRetrying``.

    Example
    -------
    ::

        for attempt in tenacity.Retrying(**tenacity_kwargs(policy)):
            with attempt:
                fetch()
    """
    ten = _tenacity()
    stop = ten.stop_never if policy.unlimited_attempts else ten.stop_after_attempt(max(policy.max_attempts, 1))
    return {
        "stop": stop,
        "wait": TenacityWait(policy),
        "retry": ten.retry_if_exception(policy.should_retry),
        "reraise": reraise,
    }


__all__ = ["TenacityWait", "tenacity_kwargs"]
