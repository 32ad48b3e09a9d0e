"""
Tests for the Rich CLI wizard. Prompts are answered from scripted lists and
console output is captured into a string buffer.
"""

import io
import math

import pytest
from rich.console import Console
from rich.prompt import Confirm, FloatPrompt, Prompt

from property_calculator import cli
from property_calculator.config import AppConfig
from property_calculator.portfolio import SortOption, summarize_portfolio
from property_calculator.storage import InMemoryRepository

from conftest import make_expenses, make_property_with_total


# ── Helpers ───────────────────────────────────────────────────────────────────

def feed(monkeypatch, prompt_cls, answers):
    """Answer successive `prompt_cls.ask(...)` calls from `answers`."""
    remaining = iter(answers)
    monkeypatch.setattr(prompt_cls, "ask", lambda *args, **kwargs: next(remaining))


@pytest.fixture
def output(monkeypatch):
    buffer = io.StringIO()
    monkeypatch.setattr(cli, "console", Console(file=buffer, width=160, color_system=None))
    return buffer


DETAIL_ANSWERS = [
    "Condo", "77 Harbor Way", "Portland", "OR", "97201", "Investment", "Tenant",
]
EXPENSE_FLOATS = [1200.0, 3600.0, 1200.0, 300.0, 0.0]


# ── Step 1 ────────────────────────────────────────────────────────────────────

def test_prompt_property_details(monkeypatch, output):
    feed(monkeypatch, Prompt, DETAIL_ANSWERS)
    details = cli.prompt_property_details()

    assert details.property_type.value == "Condo"
    assert details.address.one_line == "77 Harbor Way, Portland, OR 97201"
    assert details.property_status.value == "Investment"
    assert details.occupancy_status.value == "Tenant"


def test_prompt_property_details_repeats_until_valid(monkeypatch, output):
    bad_zip = DETAIL_ANSWERS[:4] + ["972"] + DETAIL_ANSWERS[5:]
    feed(monkeypatch, Prompt, bad_zip + DETAIL_ANSWERS)

    details = cli.prompt_property_details()

    assert details.address.zip == "97201"
    assert "Please enter a valid ZIP code" in output.getvalue()


def test_editing_details_keeps_id(monkeypatch, output, sample_property):
    feed(monkeypatch, Prompt, DETAIL_ANSWERS)
    details = cli.prompt_property_details(sample_property.details)
    assert details.id == sample_property.id


# ── Step 2 ────────────────────────────────────────────────────────────────────

def test_prompt_property_expenses(monkeypatch, output):
    feed(monkeypatch, FloatPrompt, EXPENSE_FLOATS)
    feed(monkeypatch, Prompt, ["Quarterly"])   # only HOA is non-zero

    assert cli.prompt_property_expenses() == make_expenses()


def test_prompt_property_expenses_requires_taxes_and_insurance(monkeypatch, output):
    feed(monkeypatch, FloatPrompt, [1200.0, 0.0, 0.0, 0.0, 0.0] + EXPENSE_FLOATS)
    feed(monkeypatch, Prompt, ["Quarterly"])

    expenses = cli.prompt_property_expenses()

    assert expenses.property_taxes == 3600.0
    text = output.getvalue()
    assert "Property Taxes is required" in text
    assert "Homeowners Insurance is required" in text


def test_negative_amount_is_reprompted(monkeypatch, output):
    feed(monkeypatch, FloatPrompt, [-5.0, 3600.0, 1200.0, 0.0, 0.0] + EXPENSE_FLOATS)
    feed(monkeypatch, Prompt, ["Quarterly"])

    expenses = cli.prompt_property_expenses()

    assert expenses.principal_interest == 1200.0
    assert "Invalid input" in output.getvalue()


@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_non_finite_amount_is_reprompted(monkeypatch, output, tmp_path, bad):
    repo = InMemoryRepository()
    repo.upsert(make_property_with_total(400.0))
    feed(monkeypatch, Prompt, ["add"] + DETAIL_ANSWERS + ["Quarterly", "quit"])
    feed(monkeypatch, FloatPrompt, [1200.0, bad, 1200.0, 0.0, 0.0] + EXPENSE_FLOATS)

    cli.run(repo, AppConfig(data_dir=tmp_path))

    stored = repo.load_all()
    assert len(stored) == 2
    assert all(math.isfinite(p.monthly_expenses.total) for p in stored)
    assert "Invalid input" in output.getvalue()


# ── Result & summary ──────────────────────────────────────────────────────────

def test_show_property_result(output, sample_property):
    cli.show_property_result(sample_property)
    text = output.getvalue()
    assert "$1,700.00" in text
    assert "$300.00 Quarterly" in text
    assert "Total Monthly Expense" in text


def test_show_summary_lists_properties_in_order(output):
    portfolio = [
        make_property_with_total(500.0, street="1 Low St"),
        make_property_with_total(900.0, street="2 High St"),
    ]
    cli.show_summary(summarize_portfolio(portfolio, SortOption.EXPENSE_HIGH))
    text = output.getvalue()

    assert "$1,400.00" in text
    assert text.index("2 High St") < text.index("1 Low St")


def test_show_summary_empty(output):
    cli.show_summary(summarize_portfolio([]))
    assert "No properties added yet" in output.getvalue()


# ── Menu loop ─────────────────────────────────────────────────────────────────

def test_add_property_then_quit(monkeypatch, output, tmp_path):
    repo = InMemoryRepository()
    feed(monkeypatch, Prompt, ["add"] + DETAIL_ANSWERS + ["Quarterly", "quit"])
    feed(monkeypatch, FloatPrompt, EXPENSE_FLOATS)

    cli.run(repo, AppConfig(data_dir=tmp_path))

    [stored] = repo.load_all()
    assert stored.details.address.street == "77 Harbor Way"
    assert stored.monthly_expenses.total == 1700.0


def test_delete_and_clear(monkeypatch, output, tmp_path):
    repo = InMemoryRepository()
    keep = make_property_with_total(1.0)
    drop = make_property_with_total(2.0)
    repo.save_all([keep, drop])

    feed(monkeypatch, Prompt, ["delete", drop.id, "quit"])
    feed(monkeypatch, Confirm, [True])
    cli.run(repo, AppConfig(data_dir=tmp_path))
    assert [p.id for p in repo.load_all()] == [keep.id]

    feed(monkeypatch, Prompt, ["clear", "quit"])
    feed(monkeypatch, Confirm, [True])
    cli.run(repo, AppConfig(data_dir=tmp_path))
    assert repo.load_all() == []


def test_edit_unknown_id_reports_error(monkeypatch, output, tmp_path):
    feed(monkeypatch, Prompt, ["edit", "nope", "quit"])
    cli.run(InMemoryRepository(), AppConfig(data_dir=tmp_path))
    assert "No property with id 'nope'" in output.getvalue()


def test_export_writes_text_report(monkeypatch, output, tmp_path):
    repo = InMemoryRepository()
    repo.save_all([make_property_with_total(800.0)])
    target = tmp_path / "report.txt"
    feed(monkeypatch, Prompt, ["export", "txt", str(target), "quit"])

    cli.run(repo, AppConfig(data_dir=tmp_path))

    assert "$800.00" in target.read_text(encoding="utf-8")


def test_export_with_nothing_stored(monkeypatch, output, tmp_path):
    feed(monkeypatch, Prompt, ["export", "quit"])
    cli.run(InMemoryRepository(), AppConfig(data_dir=tmp_path))
    assert "Nothing to export yet" in output.getvalue()
