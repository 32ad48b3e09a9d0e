"""Pydantic v2 models for the property expense calculator.

Attribute names are snake_case; the JSON form uses the camelCase names of the
stored record (``principalInterest``, ``hoaDues.frequency`` ...). Both forms
are accepted on input.
"""

import secrets
import string
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class PropertyType(str, Enum):
    DETACHED_SFR = "Detached SFR"
    PUD_DETACHED = "PUD-Detached"
    CONDO = "Condo"
    ATTACHED_PUD = "Attached PUD"
    MANUFACTURED = "Manufactured"
    MULTI_UNIT = "Multi Unit"


class PropertyStatus(str, Enum):
    PRIMARY_RESIDENCE = "Primary Residence"
    SECOND_HOME = "Second Home"
    INVESTMENT = "Investment"


class OccupancyStatus(str, Enum):
    VACANT = "Vacant"
    OWNER = "Owner"
    TENANT = "Tenant"


class PaymentFrequency(str, Enum):
    MONTHLY = "Monthly"
    QUARTERLY = "Quarterly"
    SEMI_ANNUAL = "Semi-Annual"
    ANNUAL = "Annual"


_ID_ALPHABET = string.ascii_lowercase + string.digits


def generate_id() -> str:
    """Return a random 22-character identifier. Callers only compare ids for equality."""
    return "".join(secrets.choice(_ID_ALPHABET) for _ in range(22))


class _Record(BaseModel):
    # amounts must be finite
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class PropertyAddress(_Record):
    street: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""            # 5-digit or ZIP+4; format checked by validation.py

    @property
    def street_city(self) -> str:
        return f"{self.street}, {self.city}"

    @property
    def one_line(self) -> str:
        return f"{self.street}, {self.city}, {self.state} {self.zip}"


class PropertyDetails(_Record):
    id: str = Field(default_factory=generate_id, frozen=True)  # assigned once, never edited
    property_type: PropertyType
    address: PropertyAddress
    property_status: PropertyStatus
    occupancy_status: OccupancyStatus


class RecurringExpense(_Record):
    amount: float = 0.0
    frequency: PaymentFrequency = PaymentFrequency.MONTHLY

    @field_validator("amount")
    @classmethod
    def validate_amount(cls, v: float) -> float:
        if v < 0:
            raise ValueError("amount cannot be negative")
        return v


class PropertyExpenses(_Record):
    principal_interest: float = 0.0        # Monthly; 0 = owned free and clear
    property_taxes: float = 0.0            # Annual
    homeowners_insurance: float = 0.0      # Annual
    hoa_dues: RecurringExpense = Field(default_factory=RecurringExpense)
    other_expenses: RecurringExpense = Field(default_factory=RecurringExpense)

    @field_validator("principal_interest", "property_taxes", "homeowners_insurance")
    @classmethod
    def validate_non_negative(cls, v: float) -> float:
        if v < 0:
            raise ValueError("expense amounts cannot be negative")
        return v


class MonthlyExpenseBreakdown(_Record):
    principal_interest: float
    property_taxes: float
    homeowners_insurance: float
    hoa_dues: float
    other_expenses: float
    total: float             # sum of the five categories above


class Property(_Record):
    details: PropertyDetails
    expenses: PropertyExpenses
    monthly_expenses: MonthlyExpenseBreakdown | None = None

    @property
    def id(self) -> str:
        return self.details.id
