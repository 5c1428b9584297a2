"""
Shared fixtures for SafeCrystals tests
"""

import logging
import os
from typing import Any, Dict, Optional

import pytest

from safecrystals.core import config as config_module
from safecrystals.models.location import Location
from safecrystals.services.provider import ProviderUnavailableError


class FakeProvider:
    """In-memory ConfigurationProvider with a switchable reload failure"""

    def __init__(self, values: Optional[Dict[str, Any]] = None):
        self.values: Dict[str, Any] = dict(values or {})
        self.fail_reload = False
        self.reload_count = 0

    def reload_backing_store(self) -> None:
        self.reload_count += 1
        if self.fail_reload:
            raise ProviderUnavailableError("backing store is broken")

    def get_double(self, key: str, default: float = 0.0) -> float:
        return float(self.values.get(key, default))

    def get_location(self, key: str) -> Optional[Location]:
        return self.values.get(key)


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def portal_location():
    return Location(world="world_the_end", x=0.5, y=64.0, z=0.5)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Run with no SAFECRYSTALS_ variables, no .env file and no cached settings"""
    for name in list(os.environ):
        if name.upper().startswith("SAFECRYSTALS_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setattr(config_module, "_settings", None)
    yield tmp_path


@pytest.fixture
def restore_logging():
    """Undo dictConfig changes to the package logger"""
    package_logger = logging.getLogger("safecrystals")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield package_logger
    package_logger.handlers = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate
