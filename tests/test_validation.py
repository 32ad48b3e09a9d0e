"""Tests for validation.py: the wizard's per-step form rules."""

import pytest

from property_calculator.models import PropertyAddress, PropertyExpenses
from property_calculator.validation import validate_address, validate_details, validate_expenses

from conftest import make_details, make_expenses


class TestDetails:
    def test_complete_details_are_valid(self):
        assert validate_details(make_details()) == {}

    def test_blank_address_reports_every_field(self):
        errors = validate_address(PropertyAddress(street=" ", city="", state="", zip=""))
        assert set(errors) == {"address.street", "address.city", "address.state", "address.zip"}
        assert errors["address.zip"] == "ZIP code is required"

    @pytest.mark.parametrize("zip_code", ["62701", "62701-1234"])
    def test_valid_zip_formats(self, zip_code):
        address = PropertyAddress(street="1 A St", city="X", state="IL", zip=zip_code)
        assert validate_address(address) == {}

    @pytest.mark.parametrize("zip_code", ["6270", "627011", "62701-12", "ABCDE", "62701 1234"])
    def test_invalid_zip_formats(self, zip_code):
        address = PropertyAddress(street="1 A St", city="X", state="IL", zip=zip_code)
        assert validate_address(address) == {"address.zip": "Please enter a valid ZIP code"}


class TestExpenses:
    def test_typical_expenses_are_valid(self):
        assert validate_expenses(make_expenses()) == {}

    def test_zero_principal_interest_is_fine(self):
        assert validate_expenses(make_expenses(principal_interest=0.0)) == {}

    def test_taxes_and_insurance_required(self):
        errors = validate_expenses(PropertyExpenses())
        assert errors == {
            "propertyTaxes": "Property Taxes is required",
            "homeownersInsurance": "Homeowners Insurance is required",
        }
