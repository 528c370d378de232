"""Testing fakes – deterministic doubles for the executor's collaborators."""
from mp_retry.testing.fakes.randomness import SequenceRandom
from mp_retry.testing.fakes.timer import FakeTimer

__all__ = [
    "FakeTimer",
    "SequenceRandom",
]
