"""Shared fixtures for the retry benchmarks."""

from __future__ import annotations

import asyncio

import pytest

from mp_retry.testing import FakeTimer


@pytest.fixture(scope="session")
def run_async():
    """Run a coroutine on one long-lived loop so loop startup stays out of the timings."""
    with asyncio.Runner() as runner:
        yield runner.run


@pytest.fixture
def instant_timer() -> FakeTimer:
    """Wait signals that are already complete; only retry bookkeeping is measured."""
    return FakeTimer()
