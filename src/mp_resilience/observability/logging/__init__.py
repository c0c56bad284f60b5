"""Observability – structured logging helpers."""
from mp_resilience.observability.logging.factory import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
