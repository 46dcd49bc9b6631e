"""Table model of the recorded expenses, one row per expense in insertion order."""
import enum
import logging
from typing import Any, List, Optional

from PySide6 import QtCore, QtGui

from ...core import tracker
from ...core.ledger import Expense
from ...settings import lib
from ...settings import locale
from ...ui import ui
from ...ui.actions import signals

ExpenseRole = QtCore.Qt.UserRole + 1


class Columns(enum.IntEnum):
    Date = 0
    Category = 1
    Currency = 2
    Amount = 3
    Description = 4


class ExpenseTableModel(QtCore.QAbstractTableModel):
    """Mirrors the tracker's ledger.

    Rows are appended as :attr:`signals.expenseAdded` fires. The Amount column shows
    the amount as entered, in its own currency; the tooltip shows the base amount
    frozen when the expense was added.
    """

    def __init__(self, parent: Optional[QtCore.QObject] = None) -> None:
        super().__init__(parent=parent)
        self._data: List[Expense] = []

        self._connect_signals()
        self.init_data()

    def _connect_signals(self) -> None:
        signals.expenseAdded.connect(self.append_expense)
        signals.initializationRequested.connect(self.init_data)

        @QtCore.Slot(str, object)
        def _meta(key: str, _: object) -> None:
            # category colours fall back to the theme text colour
            if key == 'theme' and self._data:
                self.dataChanged.emit(
                    self.index(0, 0),
                    self.index(self.rowCount() - 1, self.columnCount() - 1),
                )

        signals.metadataChanged.connect(_meta)

    @QtCore.Slot()
    def init_data(self) -> None:
        """Reload every row from the tracker."""
        self.beginResetModel()
        self._data = list(tracker.tracker.expenses())
        self.endResetModel()
        logging.debug(f'Loaded {len(self._data)} expenses')

    @QtCore.Slot(object)
    def append_expense(self, expense: Expense) -> None:
        """Add a row for a newly recorded expense."""
        row = len(self._data)
        self.beginInsertRows(QtCore.QModelIndex(), row, row)
        self._data.append(expense)
        self.endInsertRows()

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(self._data)

    def columnCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        if parent.isValid():
            return 0
        return len(Columns)

    def headerData(self, section: int, orientation: QtCore.Qt.Orientation,
                   role: int = QtCore.Qt.DisplayRole) -> Any:
        if orientation == QtCore.Qt.Horizontal and role == QtCore.Qt.DisplayRole:
            return Columns(section).name
        return None

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._data):
            return None

        expense = self._data[index.row()]
        column = index.column()

        if role == ExpenseRole:
            return expense

        if column == Columns.Date:
            if role in (QtCore.Qt.DisplayRole, QtCore.Qt.ToolTipRole):
                return expense.date.isoformat()
            if role == QtCore.Qt.EditRole:
                return expense.date

        elif column == Columns.Category:
            if role == QtCore.Qt.DisplayRole:
                return lib.settings.category_display_name(expense.category.value)
            if role == QtCore.Qt.EditRole:
                return expense.category.value
            if role == QtCore.Qt.DecorationRole:
                return ui.category_color(expense.category.value)

        elif column == Columns.Currency:
            if role in (QtCore.Qt.DisplayRole, QtCore.Qt.EditRole):
                return expense.currency.value

        elif column == Columns.Amount:
            if role == QtCore.Qt.DisplayRole:
                return locale.format_amount(expense.amount, expense.currency.value, lib.settings['locale'])
            if role == QtCore.Qt.EditRole:
                return expense.amount
            if role == QtCore.Qt.ToolTipRole:
                base = locale.format_amount(expense.base_amount, expense.base_currency.value, lib.settings['locale'])
                return f'{base} at the time of entry'
            if role == QtCore.Qt.TextAlignmentRole:
                return QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter
            if role == QtCore.Qt.ForegroundRole and expense.amount <= 0:
                return ui.Color.DisabledText()

        elif column == Columns.Description:
            if role in (QtCore.Qt.DisplayRole, QtCore.Qt.EditRole, QtCore.Qt.ToolTipRole):
                return expense.description

        if role == QtCore.Qt.FontRole and column == Columns.Amount:
            font = QtGui.QFont()
            font.setBold(True)
            return font

        return None
