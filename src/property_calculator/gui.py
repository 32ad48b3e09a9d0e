"""
PyQt6 GUI for the Property Expense Calculator.

Layout:
  QMainWindow
  ├── StepIndicator            ← "1 Details · 2 Expenses · 3 Results"
  └── QStackedWidget
        ├── Page 0: DetailsPage
        ├── Page 1: ExpensesPage
        ├── Page 2: ResultsPage
        └── Page 3: SummaryPage (sort selector, table, chart)

Signal flow:
  DetailsPage "Next"  → validate_details() → ExpensesPage
  ExpensesPage "Calculate" → validate_expenses() → create_property()
      → repository.upsert() → ResultsPage
  SummaryPage sort / edit / delete → summarize_portfolio() → refresh()
"""

import sys
from pathlib import Path

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure
from pydantic import ValidationError
from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QApplication,
    QComboBox,
    QDoubleSpinBox,
    QFileDialog,
    QFormLayout,
    QFrame,
    QHBoxLayout,
    QHeaderView,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QStackedWidget,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from property_calculator.calculator import breakdown_of, compute_monthly_breakdown, create_property
from property_calculator.charts import draw_breakdown_chart
from property_calculator.config import AppConfig
from property_calculator.data.options import (
    OCCUPANCY_STATUSES,
    PAYMENT_FREQUENCIES,
    PROPERTY_STATUSES,
    PROPERTY_TYPES,
)
from property_calculator.exceptions import ConfigurationError, PropertyCalculatorError
from property_calculator.log import setup_logging
from property_calculator.models import (
    Property,
    PropertyAddress,
    PropertyDetails,
    PropertyExpenses,
    RecurringExpense,
)
from property_calculator.portfolio import SORT_LABELS, SortOption, summarize_portfolio
from property_calculator.report import expense_rows, export_pdf, format_currency
from property_calculator.storage import JsonFileRepository, PropertyRepository
from property_calculator.validation import validate_details, validate_expenses

# ── Page index constants ──────────────────────────────────────────────────────
PAGE_DETAILS = 0
PAGE_EXPENSES = 1
PAGE_RESULTS = 2
PAGE_SUMMARY = 3

_RIGHT = Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter


def _hline() -> QFrame:
    line = QFrame()
    line.setFrameShape(QFrame.Shape.HLine)
    line.setFrameShadow(QFrame.Shadow.Sunken)
    return line


def _title(text: str) -> QLabel:
    label = QLabel(text)
    label.setStyleSheet("font-size: 15px; font-weight: bold;")
    return label


def _error_label() -> QLabel:
    label = QLabel("")
    label.setStyleSheet("color: #cc0000; font-size: 11px;")
    label.setWordWrap(True)
    return label


def _money_box(maximum: float = 1_000_000_000_000) -> QDoubleSpinBox:
    box = QDoubleSpinBox()
    box.setRange(0.0, maximum)
    box.setDecimals(2)
    box.setSingleStep(50.0)
    box.setPrefix("$ ")
    box.setGroupSeparatorShown(True)
    return box


# ── Step indicator ────────────────────────────────────────────────────────────

class StepIndicator(QWidget):
    """Three-step progress strip; the current step is highlighted."""

    STEPS = ["Property Details", "Expenses", "Results"]

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QHBoxLayout(self)
        layout.setContentsMargins(14, 8, 14, 8)
        self._labels: list[QLabel] = []
        for i, name in enumerate(self.STEPS, start=1):
            label = QLabel(f"{i}  {name}")
            layout.addWidget(label)
            self._labels.append(label)
        layout.addStretch()
        self.current = 0
        self.set_step(0)

    def set_step(self, step: int) -> None:
        self.current = step
        for i, label in enumerate(self._labels):
            if i == step:
                label.setStyleSheet("font-weight: bold; color: #006794;")
            elif i < step:
                label.setStyleSheet("color: #2ca02c;")
            else:
                label.setStyleSheet("color: #888888;")


# ── Step 1: Details ───────────────────────────────────────────────────────────

class DetailsPage(QWidget):
    """Property type, address, status and occupancy."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._editing_id: str | None = None

        outer = QVBoxLayout(self)
        outer.setContentsMargins(14, 14, 14, 14)
        outer.addWidget(_title("Property Details"))
        outer.addWidget(_hline())

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        self.property_type = QComboBox()
        self.property_type.addItems(PROPERTY_TYPES)
        form.addRow("Property type:", self.property_type)

        self.street = QLineEdit()
        self.street.setPlaceholderText("123 Main St")
        form.addRow("Street address:", self.street)
        self.city = QLineEdit()
        form.addRow("City:", self.city)
        self.state = QLineEdit()
        self.state.setMaxLength(2)
        form.addRow("State:", self.state)
        self.zip = QLineEdit()
        self.zip.setPlaceholderText("12345 or 12345-6789")
        form.addRow("ZIP code:", self.zip)

        self.property_status = QComboBox()
        self.property_status.addItems(PROPERTY_STATUSES)
        form.addRow("Property status:", self.property_status)

        self.occupancy_status = QComboBox()
        self.occupancy_status.addItems(OCCUPANCY_STATUSES)
        form.addRow("Occupancy:", self.occupancy_status)

        outer.addLayout(form)

        self.next_btn = QPushButton("Next: Expenses")
        outer.addWidget(self.next_btn)
        self.error_label = _error_label()
        outer.addWidget(self.error_label)
        outer.addStretch()

    def load(self, details: PropertyDetails | None) -> None:
        """Fill the form from `details`, or clear it for a new property."""
        self.error_label.setText("")
        if details is None:
            self._editing_id = None
            self.property_type.setCurrentIndex(0)
            for field in (self.street, self.city, self.state, self.zip):
                field.clear()
            self.property_status.setCurrentIndex(0)
            self.occupancy_status.setCurrentIndex(0)
            return
        self._editing_id = details.id
        self.property_type.setCurrentText(details.property_type.value)
        self.street.setText(details.address.street)
        self.city.setText(details.address.city)
        self.state.setText(details.address.state)
        self.zip.setText(details.address.zip)
        self.property_status.setCurrentText(details.property_status.value)
        self.occupancy_status.setCurrentText(details.occupancy_status.value)

    def current_details(self) -> PropertyDetails | None:
        """Validated details, or None with the errors shown inline."""
        fields = dict(
            property_type=self.property_type.currentText(),
            address=PropertyAddress(
                street=self.street.text().strip(),
                city=self.city.text().strip(),
                state=self.state.text().strip(),
                zip=self.zip.text().strip(),
            ),
            property_status=self.property_status.currentText(),
            occupancy_status=self.occupancy_status.currentText(),
        )
        if self._editing_id is not None:
            fields["id"] = self._editing_id
        details = PropertyDetails(**fields)

        errors = validate_details(details)
        if errors:
            self.error_label.setText("\n".join(errors.values()))
            return None
        self.error_label.setText("")
        return details


# ── Step 2: Expenses ──────────────────────────────────────────────────────────

class ExpensesPage(QWidget):
    """
    Expense inputs with a live monthly-total preview.
    P&I is monthly, taxes and insurance annual, HOA / other carry a frequency.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        # box name -> (value shown after load, exact stored amount)
        self._loaded: dict[str, tuple[float, float]] = {}
        outer = QVBoxLayout(self)
        outer.setContentsMargins(14, 14, 14, 14)
        outer.addWidget(_title("Property Expenses"))
        outer.addWidget(_hline())

        form = QFormLayout()
        form.setLabelAlignment(Qt.AlignmentFlag.AlignRight)

        self.principal_interest = _money_box()
        self.principal_interest.setToolTip("Monthly payment. Enter 0 if owned free & clear.")
        form.addRow("Principal & interest (monthly):", self.principal_interest)

        self.property_taxes = _money_box()
        form.addRow("Property taxes (annual):", self.property_taxes)

        self.homeowners_insurance = _money_box()
        form.addRow("Homeowners insurance (annual):", self.homeowners_insurance)

        self.hoa_amount = _money_box()
        self.hoa_frequency = QComboBox()
        self.hoa_frequency.addItems(PAYMENT_FREQUENCIES)
        form.addRow("HOA dues:", self._pair(self.hoa_amount, self.hoa_frequency))

        self.other_amount = _money_box()
        self.other_frequency = QComboBox()
        self.other_frequency.addItems(PAYMENT_FREQUENCIES)
        form.addRow("Other expenses:", self._pair(self.other_amount, self.other_frequency))

        outer.addLayout(form)
        outer.addWidget(_hline())

        self.preview_label = QLabel("")
        self.preview_label.setStyleSheet("font-size: 13px;")
        outer.addWidget(self.preview_label)

        buttons = QHBoxLayout()
        self.back_btn = QPushButton("Back")
        self.calc_btn = QPushButton("Calculate")
        self.calc_btn.setStyleSheet("QPushButton { font-weight: bold; padding: 7px; }")
        buttons.addWidget(self.back_btn)
        buttons.addStretch()
        buttons.addWidget(self.calc_btn)
        outer.addLayout(buttons)

        self.error_label = _error_label()
        outer.addWidget(self.error_label)
        outer.addStretch()

        for box in (
            self.principal_interest, self.property_taxes, self.homeowners_insurance,
            self.hoa_amount, self.other_amount,
        ):
            box.valueChanged.connect(self._update_preview)
        self.hoa_frequency.currentTextChanged.connect(self._update_preview)
        self.other_frequency.currentTextChanged.connect(self._update_preview)
        self._update_preview()

    def _pair(self, amount: QDoubleSpinBox, frequency: QComboBox) -> QWidget:
        box = QWidget()
        row = QHBoxLayout(box)
        row.setContentsMargins(0, 0, 0, 0)
        row.addWidget(amount, 2)
        row.addWidget(frequency, 1)
        return box

    def load(self, expenses: PropertyExpenses | None) -> None:
        """
        Fill the boxes from `expenses`. The boxes show cents only, so the exact
        stored amounts are remembered and kept unless the user edits a box.
        """
        self.error_label.setText("")
        expenses = expenses or PropertyExpenses()
        self._loaded = {}
        amounts = {
            "principal_interest": expenses.principal_interest,
            "property_taxes": expenses.property_taxes,
            "homeowners_insurance": expenses.homeowners_insurance,
            "hoa_amount": expenses.hoa_dues.amount,
            "other_amount": expenses.other_expenses.amount,
        }
        for name, amount in amounts.items():
            box: QDoubleSpinBox = getattr(self, name)
            box.setValue(amount)
            self._loaded[name] = (box.value(), amount)
        self.hoa_frequency.setCurrentText(expenses.hoa_dues.frequency.value)
        self.other_frequency.setCurrentText(expenses.other_expenses.frequency.value)
        self._update_preview()

    def _amount(self, name: str) -> float:
        value = getattr(self, name).value()
        shown, stored = self._loaded.get(name, (None, value))
        return stored if value == shown else value

    def _build(self) -> PropertyExpenses:
        return PropertyExpenses(
            principal_interest=self._amount("principal_interest"),
            property_taxes=self._amount("property_taxes"),
            homeowners_insurance=self._amount("homeowners_insurance"),
            hoa_dues=RecurringExpense(
                amount=self._amount("hoa_amount"), frequency=self.hoa_frequency.currentText()
            ),
            other_expenses=RecurringExpense(
                amount=self._amount("other_amount"), frequency=self.other_frequency.currentText()
            ),
        )

    def _update_preview(self) -> None:
        total = compute_monthly_breakdown(self._build()).total
        self.preview_label.setText(f"Estimated monthly expense: <b>{format_currency(total)}</b>")

    def current_expenses(self) -> PropertyExpenses | None:
        """Validated expenses, or None with the errors shown inline."""
        try:
            expenses = self._build()
        except ValidationError as exc:
            self.error_label.setText(exc.errors()[0]["msg"])
            return None
        errors = validate_expenses(expenses)
        if errors:
            self.error_label.setText("\n".join(errors.values()))
            return None
        self.error_label.setText("")
        return expenses


# ── Breakdown table ───────────────────────────────────────────────────────────

class BreakdownTableWidget(QTableWidget):
    """Read-only expense breakdown for one property (label, monthly, original)."""

    _HEADERS = ["Expense Type", "Monthly Amount", "Original Amount"]

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(0, len(self._HEADERS), parent)
        self.setHorizontalHeaderLabels(self._HEADERS)
        self.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.verticalHeader().setVisible(False)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)

    def refresh(self, prop: Property) -> None:
        rows = expense_rows(prop)
        self.clearContents()
        self.setRowCount(len(rows))
        for row, (label, monthly, original) in enumerate(rows):
            self.setItem(row, 0, QTableWidgetItem(label))
            amount = QTableWidgetItem(monthly)
            amount.setTextAlignment(_RIGHT)
            self.setItem(row, 1, amount)
            self.setItem(row, 2, QTableWidgetItem(original))
        last = len(rows) - 1
        font = self.item(last, 0).font()
        font.setBold(True)
        for col in range(2):
            self.item(last, col).setFont(font)


# ── Step 3: Results ───────────────────────────────────────────────────────────

class ResultsPage(QWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(14, 14, 14, 14)
        outer.addWidget(_title("Property Expense Results"))
        outer.addWidget(_hline())

        self.address_label = QLabel("")
        self.address_label.setStyleSheet("font-weight: bold;")
        outer.addWidget(self.address_label)
        self.type_label = QLabel("")
        outer.addWidget(self.type_label)

        outer.addWidget(QLabel("Total Monthly Expense"))
        self.total_label = QLabel("")
        self.total_label.setStyleSheet("font-size: 22px; font-weight: bold; color: #006794;")
        outer.addWidget(self.total_label)

        self.breakdown_table = BreakdownTableWidget()
        outer.addWidget(self.breakdown_table)

        buttons = QHBoxLayout()
        self.add_another_btn = QPushButton("Add Another Property")
        self.summary_btn = QPushButton("Go to Summary")
        buttons.addWidget(self.add_another_btn)
        buttons.addStretch()
        buttons.addWidget(self.summary_btn)
        outer.addLayout(buttons)

    def refresh(self, prop: Property) -> None:
        details = prop.details
        self.address_label.setText(details.address.one_line)
        self.type_label.setText(
            f"{details.property_type.value} · {details.property_status.value} · "
            f"{details.occupancy_status.value}"
        )
        self.total_label.setText(format_currency(breakdown_of(prop).total))
        self.breakdown_table.refresh(prop)


# ── Summary ───────────────────────────────────────────────────────────────────

class BreakdownChartWidget(QWidget):
    """Stacked bar of each property's monthly expense categories."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._fig = Figure(constrained_layout=True)
        self._canvas = FigureCanvasQTAgg(self._fig)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.addWidget(self._canvas)

    def refresh(self, properties: list[Property]) -> None:
        self._fig.clear()
        ax = self._fig.add_subplot(111)
        draw_breakdown_chart(ax, properties)
        self._canvas.draw()


class SummaryPage(QWidget):
    """
    Portfolio overview. Rows follow the selected sort option; the property
    id of each row is kept in UserRole so edit / delete act on the right one.
    """

    sort_changed = pyqtSignal(object)     # SortOption

    _HEADERS = ["Property Address", "Type", "Status", "Monthly Expense"]

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        outer = QVBoxLayout(self)
        outer.setContentsMargins(14, 14, 14, 14)

        top = QHBoxLayout()
        top.addWidget(_title("Property Summary"))
        top.addStretch()
        top.addWidget(QLabel("Sort by:"))
        self.sort_combo = QComboBox()
        for option, label in SORT_LABELS.items():
            self.sort_combo.addItem(label, option.value)
        top.addWidget(self.sort_combo)
        outer.addLayout(top)

        totals = QHBoxLayout()
        self.count_label = QLabel("")
        self.total_label = QLabel("")
        self.total_label.setStyleSheet("font-weight: bold; color: #006794;")
        totals.addWidget(self.count_label)
        totals.addStretch()
        totals.addWidget(self.total_label)
        outer.addLayout(totals)

        self.table = QTableWidget(0, len(self._HEADERS))
        self.table.setHorizontalHeaderLabels(self._HEADERS)
        self.table.setEditTriggers(QTableWidget.EditTrigger.NoEditTriggers)
        self.table.setSelectionBehavior(QTableWidget.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QTableWidget.SelectionMode.SingleSelection)
        self.table.verticalHeader().setVisible(False)
        hdr = self.table.horizontalHeader()
        hdr.setSectionResizeMode(QHeaderView.ResizeMode.ResizeToContents)
        hdr.setStretchLastSection(True)
        outer.addWidget(self.table, 2)

        self.empty_label = QLabel('No properties added yet. Click "Add New Property" to get started.')
        self.empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        outer.addWidget(self.empty_label)

        self.chart = BreakdownChartWidget()
        outer.addWidget(self.chart, 3)

        buttons = QHBoxLayout()
        self.add_btn = QPushButton("Add New Property")
        self.edit_btn = QPushButton("Edit")
        self.delete_btn = QPushButton("Delete")
        self.export_btn = QPushButton("Export Results (PDF)")
        for btn in (self.add_btn, self.edit_btn, self.delete_btn):
            buttons.addWidget(btn)
        buttons.addStretch()
        buttons.addWidget(self.export_btn)
        outer.addLayout(buttons)

        self.sort_combo.currentIndexChanged.connect(
            lambda _: self.sort_changed.emit(self.sort_option())
        )

    def sort_option(self) -> SortOption:
        return SortOption(self.sort_combo.currentData())

    def set_sort_option(self, option: SortOption) -> None:
        self.sort_combo.setCurrentIndex(self.sort_combo.findData(SortOption(option).value))

    def refresh(self, summary) -> None:
        """Repopulate from a PortfolioSummary."""
        self.count_label.setText(f"Total Properties: {summary.count}")
        self.total_label.setText(
            f"Combined Monthly Expense: {format_currency(summary.total_monthly_expense)}"
        )

        self.table.clearContents()
        self.table.setRowCount(len(summary.properties))
        for row, prop in enumerate(summary.properties):
            details = prop.details
            cells = [
                details.address.one_line,
                details.property_type.value,
                details.property_status.value,
                format_currency(breakdown_of(prop).total),
            ]
            for col, text in enumerate(cells):
                item = QTableWidgetItem(text)
                if col == 3:
                    item.setTextAlignment(_RIGHT)
                item.setData(Qt.ItemDataRole.UserRole, details.id)
                self.table.setItem(row, col, item)

        has_rows = summary.count > 0
        self.table.setVisible(has_rows)
        self.empty_label.setVisible(not has_rows)
        self.edit_btn.setEnabled(has_rows)
        self.delete_btn.setEnabled(has_rows)
        self.export_btn.setEnabled(has_rows)
        self.chart.refresh(summary.properties)

    def selected_id(self) -> str | None:
        row = self.table.currentRow()
        if row < 0:
            return None
        item = self.table.item(row, 0)
        return item.data(Qt.ItemDataRole.UserRole) if item else None


# ── Main window ───────────────────────────────────────────────────────────────

class PropertyWindow(QMainWindow):
    def __init__(self, repository: PropertyRepository, config: AppConfig | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Property Expense Calculator")
        self.setMinimumSize(900, 650)

        self._repo = repository
        self._config = config or AppConfig()
        self._properties: list[Property] = repository.load_all()
        self._sort_by = self._config.default_sort

        toolbar = self.addToolBar("Main")
        toolbar.setMovable(False)
        self._summary_action = toolbar.addAction("Summary")
        self._summary_action.triggered.connect(self.show_summary)
        self._export_action = toolbar.addAction("Export PDF…")
        self._export_action.triggered.connect(self._on_export)

        central = QWidget()
        layout = QVBoxLayout(central)
        layout.setContentsMargins(0, 0, 0, 0)
        self.step_indicator = StepIndicator()
        layout.addWidget(self.step_indicator)
        layout.addWidget(_hline())

        self.stack = QStackedWidget()
        self.details_page = DetailsPage()
        self.expenses_page = ExpensesPage()
        self.results_page = ResultsPage()
        self.summary_page = SummaryPage()
        for page in (self.details_page, self.expenses_page, self.results_page, self.summary_page):
            self.stack.addWidget(page)
        layout.addWidget(self.stack)
        self.setCentralWidget(central)

        self.details_page.next_btn.clicked.connect(self._on_details_next)
        self.expenses_page.back_btn.clicked.connect(lambda: self._go(PAGE_DETAILS))
        self.expenses_page.calc_btn.clicked.connect(self._on_calculate)
        self.results_page.add_another_btn.clicked.connect(self.start_new_property)
        self.results_page.summary_btn.clicked.connect(self.show_summary)
        self.summary_page.add_btn.clicked.connect(self.start_new_property)
        self.summary_page.edit_btn.clicked.connect(self._on_edit)
        self.summary_page.delete_btn.clicked.connect(self._on_delete)
        self.summary_page.export_btn.clicked.connect(self._on_export)
        self.summary_page.sort_changed.connect(self._on_sort_changed)
        self.summary_page.set_sort_option(self._sort_by)

        self._update_export_state()
        if self._properties:
            self.show_summary()
        else:
            self.start_new_property()

    # ── Navigation ────────────────────────────────────────────────────────────

    def _go(self, page: int) -> None:
        self.stack.setCurrentIndex(page)
        self.step_indicator.setVisible(page != PAGE_SUMMARY)
        if page != PAGE_SUMMARY:
            self.step_indicator.set_step(page)

    def start_new_property(self) -> None:
        self.details_page.load(None)
        self.expenses_page.load(None)
        self._go(PAGE_DETAILS)
        self.statusBar().showMessage("Enter the property details.")

    def edit_property(self, property_id: str) -> None:
        prop = next((p for p in self._properties if p.id == property_id), None)
        if prop is None:
            return
        self.details_page.load(prop.details)
        self.expenses_page.load(prop.expenses)
        self._go(PAGE_DETAILS)
        self.statusBar().showMessage(f"Editing {prop.details.address.one_line}")

    def show_summary(self) -> None:
        self.summary_page.refresh(self.summary())
        self._go(PAGE_SUMMARY)

    def summary(self):
        return summarize_portfolio(self._properties, self._sort_by)

    # ── Slots ─────────────────────────────────────────────────────────────────

    def _on_details_next(self) -> None:
        if self.details_page.current_details() is not None:
            self._go(PAGE_EXPENSES)

    def _on_calculate(self) -> None:
        details = self.details_page.current_details()
        if details is None:
            self._go(PAGE_DETAILS)
            return
        expenses = self.expenses_page.current_expenses()
        if expenses is None:
            return

        prop = create_property(details, expenses)
        try:
            self._repo.upsert(prop)
        except PropertyCalculatorError as exc:
            self.statusBar().showMessage(f"Save failed: {exc}")
            return

        for i, existing in enumerate(self._properties):
            if existing.id == prop.id:
                self._properties[i] = prop
                break
        else:
            self._properties.append(prop)

        self.results_page.refresh(prop)
        self._go(PAGE_RESULTS)
        self._update_export_state()
        self.statusBar().showMessage(
            f"Saved · monthly expense {format_currency(breakdown_of(prop).total)}"
        )

    def _on_sort_changed(self, option: SortOption) -> None:
        self._sort_by = option
        self.summary_page.refresh(self.summary())

    def _on_edit(self) -> None:
        property_id = self.summary_page.selected_id()
        if property_id is None:
            self.statusBar().showMessage("Select a property to edit.")
            return
        self.edit_property(property_id)

    def _on_delete(self) -> None:
        property_id = self.summary_page.selected_id()
        if property_id is None:
            self.statusBar().showMessage("Select a property to delete.")
            return
        answer = QMessageBox.question(self, "Delete Property", "Delete the selected property?")
        if answer == QMessageBox.StandardButton.Yes:
            self.delete_property(property_id)

    def delete_property(self, property_id: str) -> None:
        try:
            self._repo.delete_by_id(property_id)
        except PropertyCalculatorError as exc:
            self.statusBar().showMessage(f"Delete failed: {exc}")
            return
        self._properties = [p for p in self._properties if p.id != property_id]
        self._update_export_state()
        self.show_summary()

    def _update_export_state(self) -> None:
        self._export_action.setEnabled(bool(self._properties))

    def export_to(self, path: str | Path) -> int:
        """Write the PDF report for the current sort order; returns pages written."""
        pages = export_pdf(self.summary(), path)
        self.statusBar().showMessage(f"Report saved to {path}")
        return pages

    def _on_export(self) -> None:
        """Open save dialog and write the PDF report."""
        if not self._properties:
            return
        path, _ = QFileDialog.getSaveFileName(
            self,
            "Export Results",
            self._config.report_file,
            "PDF files (*.pdf);;All files (*)",
        )
        if not path:
            return
        try:
            self.export_to(path)
        except PropertyCalculatorError as exc:
            self.statusBar().showMessage(f"Export failed: {exc}")


# ── Entry point ───────────────────────────────────────────────────────────────

def main() -> None:
    try:
        config = AppConfig.from_env()
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        sys.exit(2)
    setup_logging(config.log_level)

    app = QApplication(sys.argv)
    app.setApplicationName("Property Expense Calculator")
    window = PropertyWindow(JsonFileRepository(config.data_dir), config)
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
