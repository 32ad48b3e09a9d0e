"""
Portfolio reports: plain text and paginated PDF.

Both take a PortfolioSummary (properties already in display order) so the
report always matches what the summary screen shows. Currency is rounded to
cents here and only here.
"""

import math
from datetime import date
from pathlib import Path

from loguru import logger
from matplotlib.backends.backend_pdf import PdfPages
from matplotlib.figure import Figure

from property_calculator.calculator import breakdown_of
from property_calculator.charts import draw_breakdown_chart
from property_calculator.data.options import CURRENCY_SYMBOL
from property_calculator.exceptions import ReportError
from property_calculator.models import Property
from property_calculator.portfolio import SORT_LABELS, PortfolioSummary

REPORT_TITLE = "Property Expense Summary"
SUMMARY_HEADERS = ["Property Address", "Type", "Status", "Monthly Expense"]
DETAIL_HEADERS = ["Expense Type", "Monthly Amount", "Original Amount"]


# ── Formatting ────────────────────────────────────────────────────────────────

def format_currency(value: float | None) -> str:
    """`1234.5` -> `"$1,234.50"`; None / NaN -> `"$0.00"`."""
    if value is None or math.isnan(value):
        value = 0.0
    sign = "-" if value < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(value):,.2f}"


def expense_rows(prop: Property) -> list[tuple[str, str, str]]:
    """
    (label, monthly amount, original amount) rows for one property.
    HOA and other expenses appear only when non-zero; the total row is last.
    """
    expenses = prop.expenses
    monthly = breakdown_of(prop)

    rows = [
        (
            "Principal & Interest",
            format_currency(monthly.principal_interest),
            "None (Owned Free & Clear)" if expenses.principal_interest == 0 else "Monthly",
        ),
        (
            "Property Taxes",
            format_currency(monthly.property_taxes),
            f"{format_currency(expenses.property_taxes)} Annually",
        ),
        (
            "Homeowners Insurance",
            format_currency(monthly.homeowners_insurance),
            f"{format_currency(expenses.homeowners_insurance)} Annually",
        ),
    ]
    if expenses.hoa_dues.amount > 0:
        rows.append((
            "HOA Dues",
            format_currency(monthly.hoa_dues),
            f"{format_currency(expenses.hoa_dues.amount)} {expenses.hoa_dues.frequency.value}",
        ))
    if expenses.other_expenses.amount > 0:
        rows.append((
            "Other Expenses",
            format_currency(monthly.other_expenses),
            f"{format_currency(expenses.other_expenses.amount)} {expenses.other_expenses.frequency.value}",
        ))
    rows.append(("Total Monthly Expense", format_currency(monthly.total), ""))
    return rows


def summary_row(prop: Property) -> list[str]:
    details = prop.details
    return [
        details.address.one_line,
        details.property_type.value,
        details.property_status.value,
        format_currency(breakdown_of(prop).total),
    ]


# ── Plain text ────────────────────────────────────────────────────────────────

def generate_report_text(summary: PortfolioSummary) -> str:
    """Build the full plain-text report as a single string."""
    lines = [
        REPORT_TITLE,
        f"Generated: {date.today().isoformat()}",
        f"Sorted by: {SORT_LABELS[summary.sort_by]}",
        "=" * 72,
        "",
        f"Total Properties:          {summary.count}",
        f"Combined Monthly Expense:  {format_currency(summary.total_monthly_expense)}",
        "",
        "PROPERTIES",
    ]
    if not summary.properties:
        lines.append("  No properties added yet.")

    for prop in summary.properties:
        address, ptype, status, total = summary_row(prop)
        lines.append(f"  {address:<44} {ptype:<14} {status:<18} {total:>12}")

    for index, prop in enumerate(summary.properties, start=1):
        details = prop.details
        lines += [
            "",
            f"Property #{index}: {details.address.one_line}",
            f"  Type: {details.property_type.value} | Status: {details.property_status.value}"
            f" | Occupancy: {details.occupancy_status.value}",
        ]
        for label, monthly, original in expense_rows(prop):
            lines.append(f"  {label:<24} {monthly:>12}  {original}".rstrip())

    return "\n".join(lines)


def export_text(summary: PortfolioSummary, path: str | Path) -> Path:
    path = Path(path)
    try:
        path.write_text(generate_report_text(summary), encoding="utf-8")
    except OSError as exc:
        raise ReportError(f"Cannot write report to {path}: {exc}") from exc
    logger.info(f"Text report written to {path}")
    return path


# ── PDF ───────────────────────────────────────────────────────────────────────

PAGE_SIZE = (8.5, 11.0)            # US Letter, inches
TOP, BOTTOM, LEFT, WIDTH = 0.94, 0.06, 0.07, 0.86
ROW_H = 0.022                      # one table row / text line, figure fraction
GAP = 0.02
HEADER_FILL = "#006794"
STRIPE_FILL = "#f2f2f2"


class _PdfLayout:
    """Top-down layout cursor that starts a new page when a block won't fit."""

    def __init__(self, pdf: PdfPages) -> None:
        self._pdf = pdf
        self._fig: Figure | None = None
        self._y = TOP
        self.pages = 0

    def _flush(self) -> None:
        if self._fig is not None:
            self._pdf.savefig(self._fig)
            self.pages += 1
            self._fig = None

    def new_page(self) -> Figure:
        self._flush()
        self._fig = Figure(figsize=PAGE_SIZE)
        self._y = TOP
        return self._fig

    def rows_left(self) -> int:
        if self._fig is None:
            return 0
        return int((self._y - BOTTOM) / ROW_H)

    def ensure(self, height: float) -> None:
        if self._fig is None or self._y - height < BOTTOM:
            self.new_page()

    def text(self, text: str, size: int = 10, bold: bool = False) -> None:
        height = ROW_H * max(size, 10) / 10
        self.ensure(height)
        self._fig.text(
            LEFT, self._y, text,
            fontsize=size, fontweight="bold" if bold else "normal", va="top",
        )
        self._y -= height

    def table(
        self,
        headers: list[str],
        rows: list[list[str]],
        col_widths: list[float],
        striped: bool = False,
    ) -> None:
        height = ROW_H * (len(rows) + 1)
        self.ensure(height)
        ax = self._fig.add_axes([LEFT, self._y - height, WIDTH, height])
        ax.set_axis_off()
        tbl = ax.table(
            cellText=rows,
            colLabels=headers,
            colWidths=col_widths,
            cellLoc="left",
            bbox=[0, 0, 1, 1],
        )
        tbl.auto_set_font_size(False)
        tbl.set_fontsize(8)
        for (r, _c), cell in tbl.get_celld().items():
            if r == 0:
                cell.set_facecolor(HEADER_FILL)
                cell.set_text_props(color="white", fontweight="bold")
            elif striped and r % 2 == 0:
                cell.set_facecolor(STRIPE_FILL)
        self._y -= height + GAP

    def gap(self) -> None:
        self._y -= GAP

    def chart_page(self, properties: list[Property]) -> None:
        fig = self.new_page()
        ax = fig.add_axes([0.1, 0.45, 0.82, 0.45])
        draw_breakdown_chart(ax, properties)

    def close(self) -> int:
        self._flush()
        return self.pages


def _write_pdf(pdf: PdfPages, summary: PortfolioSummary) -> int:
    layout = _PdfLayout(pdf)
    layout.new_page()
    layout.text(REPORT_TITLE, size=18, bold=True)
    layout.gap()
    layout.text(f"Total Properties: {summary.count}", size=12)
    layout.text(
        f"Combined Monthly Expense: {format_currency(summary.total_monthly_expense)}", size=12
    )
    layout.text(f"Generated {date.today().isoformat()}  |  Sorted by {SORT_LABELS[summary.sort_by]}", size=8)
    layout.gap()

    if not summary.properties:
        layout.text("No properties added yet.")
        return layout.close()

    # Summary table, split across pages when it runs long
    pending = [summary_row(p) for p in summary.properties]
    while pending:
        if layout.rows_left() < 3:
            layout.new_page()
        take = layout.rows_left() - 2
        layout.table(SUMMARY_HEADERS, pending[:take], [0.46, 0.16, 0.2, 0.18])
        pending = pending[take:]

    # One breakdown block per property; a block never straddles two pages
    for index, prop in enumerate(summary.properties, start=1):
        rows = [list(r) for r in expense_rows(prop)]
        details = prop.details
        layout.ensure(ROW_H * (len(rows) + 4) + GAP)
        layout.text(f"Property #{index}: {details.address.one_line}", size=10, bold=True)
        layout.text(
            f"Type: {details.property_type.value} | Status: {details.property_status.value}",
            size=9,
        )
        layout.table(DETAIL_HEADERS, rows, [0.38, 0.24, 0.38], striped=True)

    layout.chart_page(summary.properties)
    return layout.close()


def export_pdf(summary: PortfolioSummary, path: str | Path) -> int:
    """
    Write the paginated PDF report: summary table, per-property breakdown
    tables, then a breakdown chart. Returns the number of pages written.
    """
    path = Path(path)
    try:
        with PdfPages(path, metadata={"Title": REPORT_TITLE}) as pdf:
            pages = _write_pdf(pdf, summary)
    except OSError as exc:
        raise ReportError(f"Cannot write PDF to {path}: {exc}") from exc
    logger.info(f"PDF report written to {path} ({pages} pages)")
    return pages
