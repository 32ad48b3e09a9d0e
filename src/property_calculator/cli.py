"""
Interactive Rich CLI for the Property Expense Calculator.

Wizard flow for each property:
  1. Property details (type, address, status, occupancy)
  2. Property expenses (P&I, taxes, insurance, HOA, other)
  3. Result panel (monthly total + breakdown)

Main menu: add / edit / delete a property, portfolio summary, export
(PDF or plain text), clear all, quit.
"""

import sys
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Confirm, FloatPrompt, Prompt
from rich.table import Table

from property_calculator import __version__
from property_calculator.calculator import breakdown_of, create_property
from property_calculator.config import AppConfig
from property_calculator.data.options import (
    OCCUPANCY_STATUSES,
    PAYMENT_FREQUENCIES,
    PROPERTY_STATUSES,
    PROPERTY_TYPES,
)
from property_calculator.exceptions import (
    ConfigurationError,
    PropertyCalculatorError,
    PropertyNotFoundError,
)
from property_calculator.log import setup_logging
from property_calculator.models import (
    Property,
    PropertyAddress,
    PropertyDetails,
    PropertyExpenses,
    RecurringExpense,
)
from property_calculator.portfolio import SORT_LABELS, PortfolioSummary, SortOption, summarize_portfolio
from property_calculator.report import (
    expense_rows,
    export_pdf,
    export_text,
    format_currency,
)
from property_calculator.storage import JsonFileRepository, PropertyRepository
from property_calculator.validation import validate_details, validate_expenses

console = Console()


def _show_errors(errors: dict[str, str]) -> None:
    for message in errors.values():
        console.print(f"  [red]{message}[/red]")
    console.print("  Please re-enter this step.\n")


# ── Banner ────────────────────────────────────────────────────────────────────

def show_banner(config: AppConfig) -> None:
    body = (
        "[bold cyan]Property Expense Calculator[/bold cyan]\n"
        "[dim]Calculate standardized monthly expenses across multiple properties[/dim]\n"
        f"[dim]v{__version__}  |  data: {config.storage_path}[/dim]"
    )
    console.print(Panel(body, expand=False, border_style="cyan"))
    console.print()


# ── Step 1: Details ───────────────────────────────────────────────────────────

def _ask_text(label: str, current: str) -> str:
    if current:
        return Prompt.ask(label, default=current)
    return Prompt.ask(label)


def prompt_property_details(existing: PropertyDetails | None = None) -> PropertyDetails:
    """Prompt until the details pass validation. Editing keeps the existing id."""
    if existing is None:
        address = PropertyAddress()
        type_default = PROPERTY_TYPES[0]
        status_default = PROPERTY_STATUSES[0]
        occupancy_default = OCCUPANCY_STATUSES[1]
    else:
        address = existing.address
        type_default = existing.property_type.value
        status_default = existing.property_status.value
        occupancy_default = existing.occupancy_status.value

    while True:
        console.print("[bold]Step 1 of 2: Property Details[/bold]\n")
        property_type = Prompt.ask("  Property type", choices=PROPERTY_TYPES, default=type_default)
        address = PropertyAddress(
            street=_ask_text("  Street address", address.street),
            city=_ask_text("  City", address.city),
            state=_ask_text("  State", address.state),
            zip=_ask_text("  ZIP code", address.zip),
        )
        property_status = Prompt.ask(
            "  Property status", choices=PROPERTY_STATUSES, default=status_default
        )
        occupancy_status = Prompt.ask(
            "  Occupancy", choices=OCCUPANCY_STATUSES, default=occupancy_default
        )
        console.print()

        fields = dict(
            property_type=property_type,
            address=address,
            property_status=property_status,
            occupancy_status=occupancy_status,
        )
        if existing is not None:
            fields["id"] = existing.id
        details = PropertyDetails(**fields)

        errors = validate_details(details)
        if not errors:
            return details
        _show_errors(errors)
        type_default, status_default, occupancy_default = (
            property_type, property_status, occupancy_status,
        )


# ── Step 2: Expenses ──────────────────────────────────────────────────────────

def _prompt_recurring(label: str, existing: RecurringExpense) -> RecurringExpense:
    amount = FloatPrompt.ask(f"  {label} amount (0 if none)", default=existing.amount)
    frequency = existing.frequency.value
    if amount > 0:
        frequency = Prompt.ask(
            f"  {label} frequency", choices=PAYMENT_FREQUENCIES, default=frequency
        )
    return RecurringExpense(amount=amount, frequency=frequency)


def prompt_property_expenses(existing: PropertyExpenses | None = None) -> PropertyExpenses:
    """Prompt until taxes and insurance are entered and all amounts are valid."""
    existing = existing or PropertyExpenses()
    while True:
        console.print("[bold]Step 2 of 2: Property Expenses[/bold]\n")
        console.print("  [dim]Principal & interest is monthly; enter 0 if owned free & clear.[/dim]")
        try:
            expenses = PropertyExpenses(
                principal_interest=FloatPrompt.ask(
                    "  Principal & interest (monthly)", default=existing.principal_interest
                ),
                property_taxes=FloatPrompt.ask(
                    "  Property taxes (annual)", default=existing.property_taxes
                ),
                homeowners_insurance=FloatPrompt.ask(
                    "  Homeowners insurance (annual)", default=existing.homeowners_insurance
                ),
                hoa_dues=_prompt_recurring("HOA dues", existing.hoa_dues),
                other_expenses=_prompt_recurring("Other expenses", existing.other_expenses),
            )
        except ValidationError as exc:
            console.print(f"  [red]Invalid input: {exc.errors()[0]['msg']}[/red]\n")
            continue
        console.print()

        errors = validate_expenses(expenses)
        if not errors:
            return expenses
        _show_errors(errors)


# ── Step 3: Result ────────────────────────────────────────────────────────────

def build_breakdown_table(prop: Property) -> Table:
    table = Table(border_style="blue", show_header=True)
    table.add_column("Expense Type")
    table.add_column("Monthly Amount", justify="right")
    table.add_column("Original Amount", style="dim")
    rows = expense_rows(prop)
    for label, monthly, original in rows[:-1]:
        table.add_row(label, monthly, original)
    label, monthly, _ = rows[-1]
    table.add_row(f"[bold]{label}[/bold]", f"[bold green]{monthly}[/bold green]", "")
    return table


def show_property_result(prop: Property) -> None:
    details = prop.details
    console.print("[bold]Property Expense Results[/bold]\n")
    header = (
        f"[bold]{details.address.one_line}[/bold]\n"
        f"[dim]{details.property_type.value} · {details.property_status.value} · "
        f"{details.occupancy_status.value}[/dim]\n\n"
        f"Total Monthly Expense: [bold green]{format_currency(breakdown_of(prop).total)}[/bold green]"
    )
    console.print(Panel(header, border_style="green", expand=False))
    console.print(build_breakdown_table(prop))
    console.print()


# ── Summary ───────────────────────────────────────────────────────────────────

def build_summary_table(summary: PortfolioSummary) -> Table:
    table = Table(
        title=f"Portfolio sorted by {SORT_LABELS[summary.sort_by]}",
        border_style="blue",
        show_lines=True,
    )
    table.add_column("#", justify="center", style="bold")
    table.add_column("Property Address", min_width=24)
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Monthly Expense", justify="right")
    table.add_column("ID", style="dim")

    for index, prop in enumerate(summary.properties, start=1):
        details = prop.details
        table.add_row(
            str(index),
            details.address.one_line,
            details.property_type.value,
            details.property_status.value,
            format_currency(breakdown_of(prop).total),
            details.id,
        )
    return table


def show_summary(summary: PortfolioSummary) -> None:
    console.print(
        f"  Total Properties: [bold]{summary.count}[/bold]    "
        f"Combined Monthly Expense: [bold green]"
        f"{format_currency(summary.total_monthly_expense)}[/bold green]\n"
    )
    if not summary.properties:
        console.print('  [dim]No properties added yet. Choose "add" to get started.[/dim]\n')
        return
    console.print(build_summary_table(summary))
    console.print()


def prompt_sort_option(default: SortOption) -> SortOption:
    choices = [o.value for o in SortOption]
    for option in SortOption:
        console.print(f"  [dim]{option.value:<13} {SORT_LABELS[option]}[/dim]")
    return SortOption(Prompt.ask("  Sort by", choices=choices, default=default.value))


# ── Export ────────────────────────────────────────────────────────────────────

def export_report(summary: PortfolioSummary, default_path: str) -> None:
    fmt = Prompt.ask("  Export format", choices=["pdf", "txt"], default="pdf")
    default = default_path if fmt == "pdf" else str(Path(default_path).with_suffix(".txt"))
    path = Path(Prompt.ask("  Output file path", default=default))

    if fmt == "pdf":
        pages = export_pdf(summary, path)
        console.print(f"  [green]PDF saved to {path.resolve()} ({pages} pages)[/green]")
    else:
        export_text(summary, path)
        console.print(f"  [green]Report saved to {path.resolve()}[/green]")


# ── Menu actions ──────────────────────────────────────────────────────────────

def add_property(repo: PropertyRepository) -> Property:
    details = prompt_property_details()
    expenses = prompt_property_expenses()
    prop = create_property(details, expenses)
    repo.upsert(prop)
    show_property_result(prop)
    return prop


def edit_property(repo: PropertyRepository) -> Property | None:
    property_id = Prompt.ask("  ID of the property to edit").strip()
    try:
        existing = repo.get(property_id)
    except PropertyNotFoundError as exc:
        console.print(f"  [red]{exc}[/red]")
        return None
    details = prompt_property_details(existing.details)
    expenses = prompt_property_expenses(existing.expenses)
    prop = create_property(details, expenses)
    repo.upsert(prop)
    show_property_result(prop)
    return prop


def delete_property(repo: PropertyRepository) -> None:
    property_id = Prompt.ask("  ID of the property to delete").strip()
    if Confirm.ask(f"  Delete property {property_id}?", default=False):
        repo.delete_by_id(property_id)
        console.print("  [yellow]Deleted.[/yellow]")


MENU_CHOICES = ["add", "edit", "delete", "summary", "export", "clear", "quit"]


def run(repo: PropertyRepository, config: AppConfig) -> None:
    sort_by = config.default_sort
    while True:
        action = Prompt.ask("[bold]Action[/bold]", choices=MENU_CHOICES, default="add")
        console.print()
        try:
            if action == "add":
                add_property(repo)
            elif action == "edit":
                edit_property(repo)
            elif action == "delete":
                delete_property(repo)
            elif action == "summary":
                sort_by = prompt_sort_option(sort_by)
                show_summary(summarize_portfolio(repo.load_all(), sort_by))
            elif action == "export":
                summary = summarize_portfolio(repo.load_all(), sort_by)
                if summary.count == 0:
                    console.print("  [yellow]Nothing to export yet.[/yellow]\n")
                else:
                    export_report(summary, config.report_file)
            elif action == "clear":
                if Confirm.ask("  Remove ALL stored properties?", default=False):
                    repo.clear_all()
                    console.print("  [yellow]All properties removed.[/yellow]")
            else:
                return
        except PropertyCalculatorError as exc:
            console.print(f"  [red]{exc}[/red]")
        console.print()


# ── Main entry point ──────────────────────────────────────────────────────────

def main() -> None:
    try:
        config = AppConfig.from_env()
    except ConfigurationError as exc:
        console.print(f"[red]Configuration error: {exc}[/red]")
        sys.exit(2)
    setup_logging(config.log_level)

    try:
        show_banner(config)
        run(JsonFileRepository(config.data_dir), config)
        console.print("\n[bold cyan]Done.[/bold cyan]")
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(0)


if __name__ == "__main__":
    main()
