"""
Numerical test cases for calculator.py: frequency normalization and the
per-property monthly breakdown.
"""

import pytest

from property_calculator.calculator import (
    breakdown_of,
    compute_monthly_breakdown,
    create_property,
    materialize,
    monthly_equivalent,
)
from property_calculator.models import (
    PaymentFrequency,
    Property,
    PropertyExpenses,
    RecurringExpense,
)

from conftest import make_details, make_expenses


# ── Test 1: Frequency normalization ───────────────────────────────────────────

@pytest.mark.parametrize("amount", [0.0, 1.0, 300.0, 1234.56])
def test_monthly_equivalent_per_frequency(amount):
    """Monthly unchanged; Quarterly /3; Semi-Annual /6; Annual /12."""
    assert monthly_equivalent(amount, PaymentFrequency.MONTHLY) == amount
    assert monthly_equivalent(amount, PaymentFrequency.QUARTERLY) == pytest.approx(amount / 3)
    assert monthly_equivalent(amount, PaymentFrequency.SEMI_ANNUAL) == pytest.approx(amount / 6)
    assert monthly_equivalent(amount, PaymentFrequency.ANNUAL) == pytest.approx(amount / 12)


def test_monthly_equivalent_accepts_plain_strings():
    assert monthly_equivalent(600.0, "Semi-Annual") == 100.0
    assert monthly_equivalent(1200.0, "Annual") == 100.0


def test_unknown_frequency_passes_through(log_messages):
    """An unrecognized frequency is treated as Monthly and logged, never raised."""
    assert monthly_equivalent(250.0, "Biweekly") == 250.0
    assert any("Biweekly" in m for m in log_messages)


# ── Test 2: Breakdown scenario ────────────────────────────────────────────────

def test_breakdown_reference_scenario(sample_expenses):
    """P&I 1200, taxes 3600/yr, insurance 1200/yr, HOA 300/qtr, other 0 -> 1700."""
    b = compute_monthly_breakdown(sample_expenses)

    assert b.principal_interest == 1200.0
    assert b.property_taxes == 300.0
    assert b.homeowners_insurance == 100.0
    assert b.hoa_dues == 100.0
    assert b.other_expenses == 0.0
    assert b.total == 1700.0


def test_taxes_and_insurance_always_annual():
    """Taxes and insurance are divided by 12 regardless of HOA / other frequency."""
    expenses = make_expenses(
        property_taxes=2400.0,
        homeowners_insurance=960.0,
        hoa_dues=RecurringExpense(amount=50.0, frequency="Monthly"),
    )
    b = compute_monthly_breakdown(expenses)
    assert b.property_taxes == 200.0
    assert b.homeowners_insurance == 80.0
    assert b.hoa_dues == 50.0


def test_other_expenses_use_their_own_frequency():
    expenses = make_expenses(other_expenses=RecurringExpense(amount=900.0, frequency="Semi-Annual"))
    assert compute_monthly_breakdown(expenses).other_expenses == 150.0


# ── Test 3: Total invariant & idempotence ─────────────────────────────────────

@pytest.mark.parametrize(
    "expenses",
    [
        make_expenses(),
        make_expenses(principal_interest=987.65, property_taxes=4321.0,
                      homeowners_insurance=1111.11,
                      hoa_dues=RecurringExpense(amount=77.7, frequency="Annual"),
                      other_expenses=RecurringExpense(amount=333.33, frequency="Quarterly")),
        PropertyExpenses(),
    ],
)
def test_total_is_sum_of_categories(expenses):
    b = compute_monthly_breakdown(expenses)
    assert b.total == (
        b.principal_interest + b.property_taxes + b.homeowners_insurance
        + b.hoa_dues + b.other_expenses
    )


def test_breakdown_is_deterministic(sample_expenses):
    assert compute_monthly_breakdown(sample_expenses) == compute_monthly_breakdown(sample_expenses)


def test_no_rounding_applied():
    """Thirds stay unrounded; cents are a display concern."""
    expenses = make_expenses(hoa_dues=RecurringExpense(amount=100.0, frequency="Quarterly"))
    assert compute_monthly_breakdown(expenses).hoa_dues == 100.0 / 3


# ── Test 4: Fully owned property ──────────────────────────────────────────────

def test_all_zero_expenses_yield_zero_breakdown():
    """Owned free & clear with nothing else due: all zero, no error."""
    b = compute_monthly_breakdown(PropertyExpenses())
    assert b.model_dump() == {
        "principal_interest": 0.0,
        "property_taxes": 0.0,
        "homeowners_insurance": 0.0,
        "hoa_dues": 0.0,
        "other_expenses": 0.0,
        "total": 0.0,
    }


# ── Test 5: Materialize ───────────────────────────────────────────────────────

def test_materialize_attaches_fresh_breakdown_without_mutating():
    bare = Property(details=make_details(), expenses=make_expenses())
    assert bare.monthly_expenses is None

    result = materialize(bare)

    assert bare.monthly_expenses is None
    assert result.monthly_expenses.total == 1700.0
    assert result.details.id == bare.details.id


def test_materialize_replaces_stale_breakdown():
    prop = create_property(make_details(), make_expenses())
    edited = prop.model_copy(update={"expenses": make_expenses(principal_interest=0.0)})

    # stale until materialized again
    assert edited.monthly_expenses.total == 1700.0
    assert materialize(edited).monthly_expenses.total == 500.0


def test_breakdown_of_computes_missing_breakdown():
    bare = Property(details=make_details(), expenses=make_expenses())
    assert breakdown_of(bare).total == 1700.0
    assert bare.monthly_expenses is None
