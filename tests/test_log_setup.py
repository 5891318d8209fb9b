"""structlog configuration."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from core.log_setup import configure_logging


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()


def test_json_rendering_at_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("debug", json=True)

    structlog.get_logger("tests.log_setup").debug("cms_request", endpoint="/api/faq")

    line = capsys.readouterr().err.strip().splitlines()[-1]
    event = json.loads(line)
    assert event["event"] == "cms_request"
    assert event["endpoint"] == "/api/faq"
    assert event["level"] == "debug"
    assert event["logger"] == "tests.log_setup"


def test_level_filters_debug(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING", json=True)

    structlog.get_logger("tests.log_setup.quiet").debug("hidden")

    assert "hidden" not in capsys.readouterr().err


def test_unknown_level_falls_back_to_warning(capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("chatty", json=True)

    structlog.get_logger("tests.log_setup.fallback").info("hidden")
    structlog.get_logger("tests.log_setup.fallback").warning("shown")

    err = capsys.readouterr().err
    assert "hidden" not in err
    assert "shown" in err
