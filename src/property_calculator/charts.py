"""Matplotlib drawing shared by the GUI summary tab and the PDF report."""

from matplotlib.axes import Axes
from matplotlib.ticker import FuncFormatter

from property_calculator.calculator import breakdown_of
from property_calculator.models import Property

# (breakdown attribute, legend label, colour), bottom to top
CATEGORY_SERIES: list[tuple[str, str, str]] = [
    ("principal_interest",   "Principal & Interest", "#006794"),
    ("property_taxes",       "Property Taxes",       "#f4a460"),
    ("homeowners_insurance", "Insurance",            "#6baed6"),
    ("hoa_dues",             "HOA Dues",             "#fd8d3c"),
    ("other_expenses",       "Other",                "#9e9ac8"),
]


def _usd_fmt(x: float, _: object) -> str:
    """Compact axis label: 1,500 -> '$1.5k', 250 -> '$250'."""
    if abs(x) >= 1_000:
        return f"${x / 1_000:.1f}k"
    return f"${x:.0f}"


def short_label(prop: Property, width: int = 18) -> str:
    street = prop.details.address.street
    return street if len(street) <= width else street[: width - 1] + "…"


def draw_breakdown_chart(ax: Axes, properties: list[Property]) -> None:
    """
    Stacked bar per property: one segment per expense category, so the
    composition of each monthly total is visible side by side.
    """
    ax.clear()
    if not properties:
        ax.text(0.5, 0.5, "No properties", ha="center", va="center", transform=ax.transAxes)
        ax.set_axis_off()
        return

    breakdowns = [breakdown_of(p) for p in properties]
    x = range(len(properties))
    bottoms = [0.0] * len(properties)

    for attr, label, colour in CATEGORY_SERIES:
        values = [getattr(b, attr) for b in breakdowns]
        ax.bar(x, values, bottom=bottoms, label=label, color=colour)
        bottoms = [b + v for b, v in zip(bottoms, values)]

    ax.set_xticks(list(x))
    ax.set_xticklabels([short_label(p) for p in properties], rotation=30, ha="right", fontsize=8)
    ax.set_ylabel("Monthly expense")
    ax.set_title("Monthly Expense by Property")
    ax.yaxis.set_major_formatter(FuncFormatter(_usd_fmt))
    ax.legend(loc="upper right", fontsize=8)
