"""
Global test configuration for singletons.

Lazy variants are reset around every test so each test sees the
uninitialized state. The eager and enumeration variants are built once per
process and cannot be reset.

Usage:
    pytest                      # all tests
    pytest -m "not slow"        # skip the large thread races
"""

import pytest

from singletons import double_checked, holder, locked, unsynchronized

LAZY_VARIANTS = (unsynchronized, locked, double_checked, holder)


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: races a large number of threads")


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset lazy singleton instances between tests."""
    for module in LAZY_VARIANTS:
        module.reset()
    yield
    for module in LAZY_VARIANTS:
        module.reset()


@pytest.fixture
def thread_count():
    return 100
