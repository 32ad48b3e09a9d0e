"""
Expense normalization: payment frequencies to a common monthly basis.

Key conventions:
- Principal & interest is entered monthly and passes through unchanged.
- Property taxes and homeowners insurance are always annual (/ 12).
- HOA dues and other expenses carry their own frequency.
- Nothing is rounded here; rounding to cents is a display concern.
"""

from loguru import logger

from property_calculator.data.options import ANNUAL_MONTHS, MONTHS_PER_PERIOD
from property_calculator.models import (
    MonthlyExpenseBreakdown,
    PaymentFrequency,
    Property,
    PropertyDetails,
    PropertyExpenses,
)


def monthly_equivalent(amount: float, frequency: PaymentFrequency | str) -> float:
    """
    Return the monthly equivalent of an amount paid at the given frequency.

    Monthly -> amount, Quarterly -> amount / 3, Semi-Annual -> amount / 6,
    Annual -> amount / 12. An unknown frequency passes the amount through
    unchanged; models reject unknown values, so only raw strings reach it.
    """
    months = MONTHS_PER_PERIOD.get(frequency)
    if months is None:
        logger.warning(f"Unknown payment frequency {frequency!r}; treating as Monthly")
        return amount
    return amount / months


def compute_monthly_breakdown(expenses: PropertyExpenses) -> MonthlyExpenseBreakdown:
    """
    Per-category monthly figures and their total for one property.
    """
    principal_interest = expenses.principal_interest
    property_taxes = expenses.property_taxes / ANNUAL_MONTHS
    homeowners_insurance = expenses.homeowners_insurance / ANNUAL_MONTHS
    hoa_dues = monthly_equivalent(expenses.hoa_dues.amount, expenses.hoa_dues.frequency)
    other_expenses = monthly_equivalent(
        expenses.other_expenses.amount, expenses.other_expenses.frequency
    )

    total = (
        principal_interest
        + property_taxes
        + homeowners_insurance
        + hoa_dues
        + other_expenses
    )

    return MonthlyExpenseBreakdown(
        principal_interest=principal_interest,
        property_taxes=property_taxes,
        homeowners_insurance=homeowners_insurance,
        hoa_dues=hoa_dues,
        other_expenses=other_expenses,
        total=total,
    )


def materialize(prop: Property) -> Property:
    """Return a copy of `prop` carrying a freshly computed breakdown."""
    return prop.model_copy(
        update={"monthly_expenses": compute_monthly_breakdown(prop.expenses)}
    )


def create_property(details: PropertyDetails, expenses: PropertyExpenses) -> Property:
    """Build a new Property with its breakdown already in place."""
    return materialize(Property(details=details, expenses=expenses))


def breakdown_of(prop: Property) -> MonthlyExpenseBreakdown:
    """The stored breakdown, or one computed on the fly when it is missing."""
    if prop.monthly_expenses is not None:
        return prop.monthly_expenses
    return compute_monthly_breakdown(prop.expenses)
