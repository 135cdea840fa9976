"""
Shared pytest fixtures for do_collections tests.

Every test starts from the default configuration: the DO_COLLECTIONS_*
environment variables are cleared and the cached config and debug trace
logger are rebuilt around each test.
"""

import os

import pytest

from do_collections.config import (
    ENV_DEBUG_LOG,
    ENV_LOG_DIR,
    ENV_NULL_SEED_IS_UNSET,
    reset_config,
)
from do_collections.logging_config import ensure_debug_trace_configured

_ENV_VARS = (ENV_DEBUG_LOG, ENV_LOG_DIR, ENV_NULL_SEED_IS_UNSET)


@pytest.fixture(autouse=True)
def default_config(monkeypatch):
    """
    Run each test with the default configuration.

    Tests that need a different setting call monkeypatch.setenv() and then
    reset_config() themselves.
    """
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    ensure_debug_trace_configured()

    yield

    # Undo whatever the test switched on before monkeypatch restores the env
    for name in _ENV_VARS:
        os.environ.pop(name, None)
    reset_config()
    ensure_debug_trace_configured()


@pytest.fixture
def letters():
    """The five letters most chain tests start from."""
    return ["a", "b", "c", "d", "e"]


@pytest.fixture
def add():
    """Addition as a reduce expression."""
    def _add(accumulator, element):
        return accumulator + element
    return _add
