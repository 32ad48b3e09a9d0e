"""
Fixed option lists and conversion tables.
Update these values when the wizard gains new choices.
"""

# ── Classification choices ────────────────────────────────────────────────────

PROPERTY_TYPES: list[str] = [
    "Detached SFR",
    "PUD-Detached",
    "Condo",
    "Attached PUD",
    "Manufactured",
    "Multi Unit",
]

PROPERTY_STATUSES: list[str] = ["Primary Residence", "Second Home", "Investment"]

OCCUPANCY_STATUSES: list[str] = ["Vacant", "Owner", "Tenant"]

# ── Payment frequencies ──────────────────────────────────────────────────────
# Number of months covered by one payment at each frequency.
# Monthly equivalent = amount / months per period.
MONTHS_PER_PERIOD: dict[str, int] = {
    "Monthly":     1,
    "Quarterly":   3,
    "Semi-Annual": 6,
    "Annual":      12,
}

PAYMENT_FREQUENCIES: list[str] = list(MONTHS_PER_PERIOD.keys())

# Property taxes and homeowners insurance are always entered as annual figures
ANNUAL_MONTHS = 12

# ── Form rules ────────────────────────────────────────────────────────────────
ZIP_PATTERN = r"^\d{5}(-\d{4})?$"

# ── Persistence ───────────────────────────────────────────────────────────────
# Namespace key under which the whole portfolio is stored as one JSON array
STORAGE_KEY = "property_expense_calculator_data"

# ── Presentation ──────────────────────────────────────────────────────────────
CURRENCY_SYMBOL = "$"
DEFAULT_REPORT_FILENAME = "Property_Expense_Summary.pdf"
