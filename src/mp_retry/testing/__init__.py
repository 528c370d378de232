"""Testing support – fakes and generators for code that retries.

Import in your ``conftest.py``::

    pytest_plugins = ["mp_retry.testing.fixtures"]
"""

from mp_retry.testing.fakes import FakeTimer, SequenceRandom
from mp_retry.testing.generators import retry_policy_strategy

__all__ = [
    "FakeTimer",
    "SequenceRandom",
    "retry_policy_strategy",
]
