"""Logging setup tests."""

import logging
from collections.abc import Iterator

import pytest

from libs.infra.telemetry.logs import HANDLER_NAME, configure_logging


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_reconfigure_replaces_service_handler(root_logger: logging.Logger) -> None:
    configure_logging("alert-service", "DEBUG")
    configure_logging("camera-gateway", "WARNING")

    named = [h for h in root_logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "hello", None, None)
    assert "[camera-gateway] x: hello" in named[0].format(record)
    assert root_logger.level == logging.WARNING
