"""Pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from recon.config import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    """Drop cached settings so env overrides in one test never leak into another."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
