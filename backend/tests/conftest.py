"""Shared fixtures: fresh settings and engine caches for every test."""

import sys

import pytest

from passguard.config import get_settings
from passguard.log_config import configure_logging
from passguard.validators import ValidationEngine, build_default_rules, get_validation_engine


@pytest.fixture(autouse=True)
def reset_caches():
    """Drop cached settings/engine so environment changes take effect."""
    configure_logging(log_level="warning", stream=sys.stderr)
    get_settings.cache_clear()
    get_validation_engine.cache_clear()
    yield
    get_settings.cache_clear()
    get_validation_engine.cache_clear()


@pytest.fixture()
def engine() -> ValidationEngine:
    """Engine with the default seven rules."""
    return ValidationEngine(build_default_rules())
