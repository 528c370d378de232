"""Observability – structured logging."""

from mp_retry.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
