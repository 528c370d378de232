"""Shared pytest configuration."""

pytest_plugins = ["mp_retry.testing.fixtures"]
