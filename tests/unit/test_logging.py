"""Tests for structlog configuration."""

from __future__ import annotations

from collections.abc import Iterator

import orjson
import pytest
import structlog

from recon.config import Settings
from recon.core.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    yield
    structlog.reset_defaults()


def _settings(env: str, level: str = "INFO") -> Settings:
    return Settings(_env_file=None, RECON_ENV=env, RECON_LOG_LEVEL=level)  # type: ignore[call-arg]


def test_production_emits_json(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(_settings("production"))

    get_logger("recon.test").info("Ticker index built", count=73)

    line = capsys.readouterr().out.strip().splitlines()[-1]
    event = orjson.loads(line)
    assert event["event"] == "Ticker index built"
    assert event["count"] == 73
    assert event["level"] == "info"
    assert event["service"] == "recon"
    assert event["env"] == "production"
    assert "timestamp" in event


def test_level_filtering(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(_settings("staging", level="WARNING"))

    log = get_logger("recon.test")
    log.info("hidden")
    log.warning("shown")

    out = capsys.readouterr().out
    assert "hidden" not in out
    assert "shown" in out


def test_development_renders_console(capsys: pytest.CaptureFixture[str]) -> None:
    setup_logging(_settings("development"))

    get_logger("recon.test").info("Recon ready", tickers=3)

    out = capsys.readouterr().out
    assert "Recon ready" in out
    assert "tickers=3" in out
    assert not out.lstrip().startswith("{")
