"""Pytest configuration and fixtures for compandauth tests."""

import os

# Keep pytest's own log capture in charge of the root logger
os.environ["CAA_CONFIGURE_LOGGING"] = "false"

import pytest

from compandauth.config.constants import CounterLimits
from compandauth.config.settings import get_settings


COUNTER_LOGGER = "compandauth.features.counter.entities.counter"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Drop CAA_* overrides and the cached settings around every test."""
    for name in list(os.environ):
        if name.startswith("CAA_") and name != "CAA_CONFIGURE_LOGGING":
            monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def max_magnitude():
    """Largest magnitude a counter can hold."""
    return CounterLimits.MAX_MAGNITUDE


@pytest.fixture
def counter_logger():
    """Logger name used by counter transitions."""
    return COUNTER_LOGGER
