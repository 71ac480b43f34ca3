"""Shared fixtures and markers for natprint tests."""

import pytest

from natprint.printers.registry import Strategy, make_printer


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: sweeps a large range of values")


@pytest.fixture(params=list(Strategy), ids=lambda s: s.value)
def strategy(request):
    """Each of the four printer strategies."""
    return request.param


@pytest.fixture
def printer(strategy):
    """A base-10 int32 printer for the current strategy."""
    return make_printer(strategy)
