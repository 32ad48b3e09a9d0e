"""
Portfolio aggregation: combined monthly expense and ordering for the summary view.
"""

import unicodedata
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from property_calculator.calculator import breakdown_of
from property_calculator.models import Property


class SortOption(str, Enum):
    ADDRESS = "address"
    EXPENSE_HIGH = "expense-high"
    EXPENSE_LOW = "expense-low"


SORT_LABELS: dict[SortOption, str] = {
    SortOption.ADDRESS: "Address (A-Z)",
    SortOption.EXPENSE_HIGH: "Expense (High-Low)",
    SortOption.EXPENSE_LOW: "Expense (Low-High)",
}


@dataclass
class PortfolioSummary:
    sort_by: SortOption
    count: int
    total_monthly_expense: float
    properties: list[Property] = field(default_factory=list)   # in display order


def total_monthly_expense(properties: Iterable[Property]) -> float:
    """
    Sum of every property's monthly total.
    Missing breakdowns are computed on the fly; the input is left untouched.
    """
    return sum((breakdown_of(p).total for p in properties), 0.0)


def _address_key(prop: Property) -> tuple[str, str]:
    # accents and case ignored first, raw text last so the order stays total
    text = prop.details.address.street_city
    decomposed = unicodedata.normalize("NFKD", text)
    folded = "".join(c for c in decomposed if not unicodedata.combining(c)).casefold()
    return folded, text


def sort_properties(
    properties: Iterable[Property],
    sort_by: SortOption | str = SortOption.ADDRESS,
) -> list[Property]:
    """
    Return a new list of properties in the requested order.

    ADDRESS      : "street, city" A-Z
    EXPENSE_HIGH : monthly total, largest first
    EXPENSE_LOW  : monthly total, smallest first
    Python's sort is stable, so equal keys keep their original relative order.
    """
    sort_by = SortOption(sort_by)
    items = list(properties)

    if sort_by is SortOption.ADDRESS:
        return sorted(items, key=_address_key)
    if sort_by is SortOption.EXPENSE_HIGH:
        return sorted(items, key=lambda p: breakdown_of(p).total, reverse=True)
    return sorted(items, key=lambda p: breakdown_of(p).total)


def summarize_portfolio(
    properties: Iterable[Property],
    sort_by: SortOption | str = SortOption.ADDRESS,
) -> PortfolioSummary:
    """Count, combined monthly expense and display order in one value."""
    items = list(properties)
    return PortfolioSummary(
        sort_by=SortOption(sort_by),
        count=len(items),
        total_monthly_expense=total_monthly_expense(items),
        properties=sort_properties(items, sort_by),
    )
