"""
flightfuel Test Configuration and Fixtures

Reference mission profiles and shared component instances.
"""

import pytest

from flightfuel.bootstrap.config import reset_config
from flightfuel.physics.fuel import FuelEngine
from flightfuel.validators.path_validator import PathValidator


APOLLO_11 = [
    ("launch", "earth"),
    ("land", "moon"),
    ("launch", "moon"),
    ("land", "earth"),
]


@pytest.fixture
def validator():
    return PathValidator()


@pytest.fixture
def engine():
    return FuelEngine()


@pytest.fixture
def apollo_path():
    """Apollo 11: (mass, steps)."""
    return 28801, list(APOLLO_11)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch, tmp_path):
    """Isolate tests from FLIGHTFUEL_* variables and config files in the working tree."""
    import os

    for key in list(os.environ):
        if key.startswith("FLIGHTFUEL_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    reset_config()
    yield
    reset_config()


@pytest.fixture(autouse=True)
def clean_logging():
    """Remove handlers installed by setup_logging during a test."""
    import logging
    from flightfuel.bootstrap import entrypoints

    root = logging.getLogger()
    level = root.level
    yield
    for handler in entrypoints._installed_handlers:
        root.removeHandler(handler)
        handler.close()
    entrypoints._installed_handlers.clear()
    root.setLevel(level)
