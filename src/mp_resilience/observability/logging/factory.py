"""Observability – JsonLoggerFactory.

Library modules log through the standard :mod:`logging` module with
``event key=value`` messages (``circuit_breaker.opened name=payments``).
Applications call :meth:`JsonLoggerFactory.configure` once at start-up to
render those records, and their own structlog events, as JSON lines.
"""
from __future__ import annotations

import logging
from typing import Any, Literal

import structlog

Renderer = Literal["json", "console"]


class JsonLoggerFactory:
    """Configure structlog and route stdlib records through its formatter."""

    @staticmethod
    def configure(
        level: int = logging.INFO,
        renderer: Renderer = "json",
        stream: Any = None,
    ) -> logging.Handler:
        """Install a single root handler and return it.

        Parameters
        ----------
        level:
            Root logger level.
        renderer:
            ``"json"`` for one JSON object per line, ``"console"`` for
            structlog's human-readable development output.
        stream:
            Target stream; defaults to ``sys.stderr``.
        """
        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
        ]

        structlog.configure(
            processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        final_renderer: Any = (
            structlog.processors.JSONRenderer()
            if renderer == "json"
            else structlog.dev.ConsoleRenderer(colors=False)
        )
        formatter = structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                final_renderer,
            ],
        )
        handler = logging.StreamHandler(stream)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)
        return handler


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger bound to *initial_values*."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["JsonLoggerFactory", "get_logger"]
