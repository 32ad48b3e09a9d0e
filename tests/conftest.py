"""Shared fixtures for the property calculator tests."""

import os

import pytest
from loguru import logger

# Qt widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.setdefault("MPLBACKEND", "Agg")

from property_calculator.calculator import create_property  # noqa: E402
from property_calculator.models import (  # noqa: E402
    PropertyAddress,
    PropertyDetails,
    PropertyExpenses,
    RecurringExpense,
)


def make_details(street: str = "123 Main St", city: str = "Springfield", **kwargs) -> PropertyDetails:
    defaults = dict(
        property_type="Detached SFR",
        address=PropertyAddress(street=street, city=city, state="IL", zip="62701"),
        property_status="Primary Residence",
        occupancy_status="Owner",
    )
    defaults.update(kwargs)
    return PropertyDetails(**defaults)


def make_expenses(**kwargs) -> PropertyExpenses:
    defaults = dict(
        principal_interest=1200.0,
        property_taxes=3600.0,
        homeowners_insurance=1200.0,
        hoa_dues=RecurringExpense(amount=300.0, frequency="Quarterly"),
        other_expenses=RecurringExpense(amount=0.0, frequency="Monthly"),
    )
    defaults.update(kwargs)
    return PropertyExpenses(**defaults)


def make_property_with_total(total: float, street: str = "1 Elm St", city: str = "Springfield"):
    """A property whose monthly total is exactly `total` (all of it P&I)."""
    return create_property(
        make_details(street=street, city=city),
        PropertyExpenses(principal_interest=total),
    )


@pytest.fixture
def sample_expenses() -> PropertyExpenses:
    return make_expenses()


@pytest.fixture
def sample_property():
    return create_property(make_details(), make_expenses())


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during the test."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
