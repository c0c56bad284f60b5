"""Observability – logging configuration."""

from mp_resilience.observability.logging import JsonLoggerFactory, get_logger

__all__ = ["JsonLoggerFactory", "get_logger"]
