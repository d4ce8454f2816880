"""Shared fixtures: every operation test runs once per bundled adapter."""

import pytest

from calperiod import ADAPTERS, DateAdapter, Temporal, UnitRegistry, create_temporal
from calperiod import reset_unit_registry


@pytest.fixture(params=sorted(ADAPTERS))
def adapter(request: pytest.FixtureRequest) -> DateAdapter:
    return ADAPTERS[request.param]()


@pytest.fixture
def temporal(adapter: DateAdapter) -> Temporal:
    """Monday-first context with its own unit table."""
    return create_temporal(
        adapter, week_starts_on=1, registry=UnitRegistry.with_defaults()
    )


@pytest.fixture
def sunday_temporal(adapter: DateAdapter) -> Temporal:
    return create_temporal(
        adapter, week_starts_on=0, registry=UnitRegistry.with_defaults()
    )


@pytest.fixture(autouse=True)
def restore_default_registry():
    yield
    reset_unit_registry()


@pytest.fixture(params=[0, 1], ids=["sunday", "monday"])
def week_temporal(request: pytest.FixtureRequest, adapter: DateAdapter) -> Temporal:
    return create_temporal(
        adapter, week_starts_on=request.param, registry=UnitRegistry.with_defaults()
    )
