"""
Form rules applied by the wizard before a step may advance.

Each validator returns {field path: message}; an empty dict means valid.
The models themselves stay permissive (a fully owned property with zero
taxes is a valid record), so these rules live here, not in models.py.
"""

import re

from property_calculator.data.options import ZIP_PATTERN
from property_calculator.models import PropertyAddress, PropertyExpenses

_ZIP_RE = re.compile(ZIP_PATTERN)


def validate_address(address: PropertyAddress) -> dict[str, str]:
    errors: dict[str, str] = {}
    if not address.street.strip():
        errors["address.street"] = "Street address is required"
    if not address.city.strip():
        errors["address.city"] = "City is required"
    if not address.state.strip():
        errors["address.state"] = "State is required"
    if not address.zip.strip():
        errors["address.zip"] = "ZIP code is required"
    elif not _ZIP_RE.match(address.zip.strip()):
        errors["address.zip"] = "Please enter a valid ZIP code"
    return errors


def validate_details(details) -> dict[str, str]:
    """Step 1 rules. Accepts PropertyDetails or anything with an `address`."""
    return validate_address(details.address)


def validate_expenses(expenses: PropertyExpenses) -> dict[str, str]:
    """Step 2 rules: taxes and insurance must be entered."""
    errors: dict[str, str] = {}
    if expenses.property_taxes <= 0:
        errors["propertyTaxes"] = "Property Taxes is required"
    if expenses.homeowners_insurance <= 0:
        errors["homeownersInsurance"] = "Homeowners Insurance is required"
    return errors
