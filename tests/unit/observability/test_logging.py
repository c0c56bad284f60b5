"""Unit tests for observability logging."""

from __future__ import annotations

import asyncio
import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from mp_resilience.observability.logging import JsonLoggerFactory, get_logger
from mp_resilience.resilience import Policy
from mp_resilience.resilience.cancellation import CancellationToken


@pytest.fixture()
def restore_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    structlog.reset_defaults()


def _lines(stream: io.StringIO) -> list[dict[str, object]]:
    return [json.loads(line) for line in stream.getvalue().splitlines() if line.strip()]


@pytest.mark.usefixtures("restore_logging")
class TestJsonLoggerFactory:
    def test_installs_single_root_handler(self) -> None:
        handler = JsonLoggerFactory.configure(stream=io.StringIO())
        assert logging.getLogger().handlers == [handler]

    def test_stdlib_records_render_as_json(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)
        logging.getLogger("mp_resilience.test").warning("circuit_breaker.opened name=%s", "p")

        [line] = _lines(stream)
        assert line["event"] == "circuit_breaker.opened name=p"
        assert line["level"] == "warning"
        assert line["logger"] == "mp_resilience.test"
        assert "timestamp" in line

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(level=logging.WARNING, stream=stream)
        logging.getLogger("mp_resilience.test").info("dropped")
        assert _lines(stream) == []

    def test_console_renderer(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(renderer="console", stream=stream)
        logging.getLogger("mp_resilience.test").error("retry.attempt_failed")
        output = stream.getvalue()
        assert "retry.attempt_failed" in output
        with pytest.raises(json.JSONDecodeError):
            json.loads(output.splitlines()[0])

    def test_breaker_transitions_are_logged(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)

        async def fail(_token: CancellationToken | None) -> None:
            raise RuntimeError("down")

        async def run() -> None:
            breaker = Policy.circuit_breaker(1_000, 0.5, 2, 1_000, name="inventory")
            for _ in range(3):
                with pytest.raises(RuntimeError):
                    await breaker.execute_async(fail)

        asyncio.run(run())
        events = [line["event"] for line in _lines(stream)]
        assert "circuit_breaker.opened name=inventory break_duration_ms=1000" in events


@pytest.mark.usefixtures("restore_logging")
class TestGetLogger:
    def test_binds_initial_values(self) -> None:
        stream = io.StringIO()
        JsonLoggerFactory.configure(stream=stream)
        get_logger("svc", request_id="r-1").info("request.done", status=200)

        [line] = _lines(stream)
        assert line["event"] == "request.done"
        assert line["request_id"] == "r-1"
        assert line["status"] == 200
        assert line["logger"] == "svc"
