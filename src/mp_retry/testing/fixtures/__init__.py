"""Testing fixtures – pytest fixtures for the executor's collaborators."""
from mp_retry.testing.fixtures.cancellation import cancellation_token
from mp_retry.testing.fixtures.timer import fake_timer, sequence_random

__all__ = [
    "cancellation_token",
    "fake_timer",
    "sequence_random",
]
