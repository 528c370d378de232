"""Testing generators – property-based test data."""
from mp_retry.testing.generators.strategies import retry_policy_strategy

__all__ = ["retry_policy_strategy"]
