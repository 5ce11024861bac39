"""Shared test fixtures for the verbosity test suite."""

import pytest

from verbosity import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: tests that start a fresh interpreter")


# ---------------------------------------------------------------------------
# Global cell
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_global_level():
    """Start and finish every test with the global cell Unset."""
    _manager_mod._reset()
    yield
    _manager_mod._reset()


# ---------------------------------------------------------------------------
# Environment
# ---------------------------------------------------------------------------
@pytest.fixture
def empty_env():
    """An environment mapping with no VERBOSITY variable."""
    return {}
