"""
Shared test fixtures.
"""

import pytest

from hooks import HookRegistry, reset_hooks
from module_manager import reset_modules
from module_options import reset_config


@pytest.fixture(autouse=True)
def reset_globals():
    """Give every test fresh process-wide registries and settings."""
    reset_hooks()
    reset_modules()
    reset_config()
    yield
    reset_hooks()
    reset_modules()
    reset_config()


@pytest.fixture
def hooks():
    """A public (front end) request hook registry."""
    return HookRegistry()


@pytest.fixture
def admin_hooks():
    """An admin screen request hook registry."""
    return HookRegistry(is_admin=True)
