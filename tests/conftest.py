"""
Shared pytest fixtures for catfold tests.

Configuration fixtures are opt-in rather than autouse: the Hypothesis
property tests must not depend on function-scoped fixtures.
"""

import logging

import pytest

from catfold.config_loader import ConfigLoader, reset_config_loader
from catfold.logging_config import ROOT_LOGGER_NAME, configure_logging


class CallCounter:
    """Callable stub that records how often it was called."""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.func(*args)


@pytest.fixture
def counter():
    """
    Factory for call-counting stubs.

    Returns:
        Callable wrapping a function in a CallCounter.
    """
    return CallCounter


@pytest.fixture
def clean_config(tmp_path, monkeypatch):
    """
    Isolate configuration from the developer's environment.

    Clears every CATFOLD_* setting, points CATFOLD_PROJECT_ROOT at a
    temporary directory and drops the cached loader before and after
    the test.

    Yields:
        Path: The temporary project root.
    """
    for env_var in ConfigLoader.CONFIG_KEY_TO_ENV.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.setenv("CATFOLD_PROJECT_ROOT", str(tmp_path))
    reset_config_loader()

    yield tmp_path

    reset_config_loader()


@pytest.fixture
def fresh_logging(clean_config, monkeypatch):
    """
    Let a test reconfigure the catfold logger, then restore defaults.

    Yields:
        Path: The temporary project root.
    """
    yield clean_config

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in root.handlers[:]:
        handler.close()
        root.removeHandler(handler)
    for env_var in ConfigLoader.CONFIG_KEY_TO_ENV.values():
        monkeypatch.delenv(env_var, raising=False)
    reset_config_loader()
    configure_logging(force=True)
