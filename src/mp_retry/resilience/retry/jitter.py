"""Resilience – jitter strategies."""
from __future__ import annotations

import abc
import random
from typing import Callable


class JitterStrategy(abc.ABC):
    """Apply randomness to a backoff delay to spread thundering-herd."""

    @abc.abstractmethod
    def apply(self, delay: float, r: float | None = None) -> float: ...


class NoJitter(JitterStrategy):
    def apply(self, delay: float, r: float | None = None) -> float:  # noqa: ARG002
        return delay


class SymmetricJitter(JitterStrategy):
    """Uniform random in ``[delay - a, delay + a)`` with ``a = min(amplitude, delay)``.

    *random_source* returns floats in ``[0, 1)``; it is only consulted when
    the effective amplitude is positive and no explicit *r* is given.
    """

    def __init__(self, amplitude: float, random_source: Callable[[], float] | None = None) -> None:
        self._amplitude = amplitude
        self._random = random_source or random.random

    def apply(self, delay: float, r: float | None = None) -> float:
        amplitude = min(self._amplitude, delay)
        if amplitude <= 0:
            return delay
        if r is None:
            r = self._random()
        return delay + amplitude * (2 * r - 1)


__all__ = ["JitterStrategy", "NoJitter", "SymmetricJitter"]
