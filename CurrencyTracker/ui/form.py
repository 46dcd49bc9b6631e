"""Expense entry form and base currency selector.

This module provides:
    - PopupCombobox: combo box whose popup grows to fit its widest item
    - ExpenseForm: inputs for a new expense and the Add button
    - BaseCurrencyBar: selector for the currency totals are reported in
"""
import logging
from typing import Optional

from PySide6 import QtWidgets, QtCore

from . import ui
from .actions import signals
from ..core import tracker
from ..core.currency import Currency
from ..core.ledger import Category, Expense
from ..settings import lib
from ..status import status


class PopupCombobox(QtWidgets.QComboBox):
    """Combo box that expands its popup to fit content width."""

    def showPopup(self) -> None:
        metrics = self.fontMetrics()
        widest = max((metrics.horizontalAdvance(self.itemText(i)) for i in range(self.count())), default=0)

        padding = ui.Size.Margin(2.0)
        sb_width = self.view().verticalScrollBar().sizeHint().width()
        width = max(widest + self.iconSize().width() + padding + sb_width, self.width())
        self.view().setMinimumWidth(width)

        super().showPopup()


class ExpenseForm(QtWidgets.QWidget):
    """Collects the fields of a new expense.

    A successful add clears the form. A rejected add keeps every field as typed and
    shows the validation message in a warning dialog.
    """
    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('CurrencyTrackerExpenseForm')

        self.date_edit: QtWidgets.QDateEdit
        self.category_combo: PopupCombobox
        self.currency_combo: PopupCombobox
        self.amount_edit: QtWidgets.QLineEdit
        self.description_edit: QtWidgets.QLineEdit
        self.add_button: QtWidgets.QPushButton

        self._create_ui()
        self._connect_signals()
        self.reset()

    def _create_ui(self) -> None:
        QtWidgets.QHBoxLayout(self)
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(ui.Size.Indicator(2.0))

        self.date_edit = QtWidgets.QDateEdit(parent=self)
        self.date_edit.setCalendarPopup(True)
        self.date_edit.setDisplayFormat('yyyy-MM-dd')
        self.layout().addWidget(self.date_edit, 0)

        self.category_combo = PopupCombobox(parent=self)
        self.category_combo.setPlaceholderText('Category')
        for category in Category:
            self.category_combo.addItem(lib.settings.category_display_name(category.value), userData=category.value)
        self.layout().addWidget(self.category_combo, 0)

        self.currency_combo = PopupCombobox(parent=self)
        self.currency_combo.setPlaceholderText('Currency')
        for currency in Currency:
            self.currency_combo.addItem(currency.value, userData=currency.value)
        self.layout().addWidget(self.currency_combo, 0)

        self.amount_edit = QtWidgets.QLineEdit(parent=self)
        self.amount_edit.setPlaceholderText('Amount')
        self.layout().addWidget(self.amount_edit, 0)

        self.description_edit = QtWidgets.QLineEdit(parent=self)
        self.description_edit.setPlaceholderText('Description')
        self.layout().addWidget(self.description_edit, 1)

        self.add_button = QtWidgets.QPushButton('Add', parent=self)
        self.add_button.setDefault(True)
        self.layout().addWidget(self.add_button, 0)

    def _connect_signals(self) -> None:
        self.add_button.clicked.connect(self.add_expense)
        self.amount_edit.returnPressed.connect(self.add_expense)
        self.description_edit.returnPressed.connect(self.add_expense)

    def values(self) -> dict:
        """Return the current field values as passed to the tracker."""
        return {
            'date': self.date_edit.date().toPython(),
            'category': self.category_combo.currentData(),
            'currency': self.currency_combo.currentData(),
            'amount': self.amount_edit.text(),
            'description': self.description_edit.text(),
        }

    @QtCore.Slot()
    def reset(self) -> None:
        """Return every field to its initial state."""
        self.date_edit.setDate(QtCore.QDate.currentDate())
        self.category_combo.setCurrentIndex(-1)
        self.currency_combo.setCurrentIndex(-1)
        self.amount_edit.clear()
        self.description_edit.clear()

    @QtCore.Slot()
    def add_expense(self) -> Optional[Expense]:
        """Submit the form to the tracker.

        Returns:
            The recorded expense, or None if the input was rejected.
        """
        try:
            expense = tracker.tracker.add_expense(**self.values())
        except status.BaseStatusException as ex:
            self.show_warning(ex.status_message)
            return None

        self.reset()
        return expense

    def show_warning(self, message: str) -> None:
        QtWidgets.QMessageBox.warning(self, 'Invalid Input', message, QtWidgets.QMessageBox.Ok)


class BaseCurrencyBar(QtWidgets.QWidget):
    """Label and combo box selecting the tracker's base currency."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('CurrencyTrackerBaseCurrencyBar')

        self.combo: PopupCombobox

        self._create_ui()
        self._connect_signals()
        self.sync_from_tracker()

    def _create_ui(self) -> None:
        QtWidgets.QHBoxLayout(self)
        self.layout().setContentsMargins(0, 0, 0, 0)
        self.layout().setSpacing(ui.Size.Indicator(2.0))

        label = QtWidgets.QLabel('Base Currency:', parent=self)
        self.layout().addWidget(label, 0)

        self.combo = PopupCombobox(parent=self)
        for currency in Currency:
            self.combo.addItem(currency.value, userData=currency.value)
        self.layout().addWidget(self.combo, 0)
        self.layout().addStretch(1)

    def _connect_signals(self) -> None:
        self.combo.currentIndexChanged.connect(self.on_index_changed)
        signals.baseCurrencyChanged.connect(self.sync_from_tracker)

    @QtCore.Slot(int)
    def on_index_changed(self, index: int) -> None:
        value = self.combo.itemData(index)
        if not value:
            return
        try:
            tracker.tracker.set_base_currency(value)
        except ValueError as ex:
            logging.error(f'Could not set base currency: {ex}')

    def sync_from_tracker(self, *args) -> None:
        """Select the tracker's base currency without emitting a change."""
        index = self.combo.findData(tracker.tracker.base_currency.value)
        if index == self.combo.currentIndex():
            return
        self.combo.blockSignals(True)
        self.combo.setCurrentIndex(index)
        self.combo.blockSignals(False)
