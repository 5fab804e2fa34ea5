"""Shared fixtures: an isolated registry per test and mock loggers."""
from unittest.mock import MagicMock

import pytest

from ampy_diag import DiagAPI, GlobalRegistry
from ampy_diag import global_utils


def make_logger():
    return MagicMock(spec=["verbose", "debug", "info", "warn", "error"])


@pytest.fixture
def registry():
    return GlobalRegistry()


@pytest.fixture
def api(registry):
    return DiagAPI(registry)


@pytest.fixture
def logger():
    return make_logger()


@pytest.fixture
def clean_global(monkeypatch):
    """Swap in an empty process-wide registry for the duration of the test."""
    fresh = GlobalRegistry()
    monkeypatch.setattr(global_utils, "_default_registry", fresh)
    return fresh
