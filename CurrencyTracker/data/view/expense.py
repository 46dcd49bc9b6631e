"""Table view listing the recorded expenses."""
from typing import Optional

from PySide6 import QtWidgets, QtCore

from ..model.expense import ExpenseTableModel, Columns
from ...ui import ui


class ExpenseTableView(QtWidgets.QTableView):
    """Read-only table of expenses. New rows are scrolled into view."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('CurrencyTrackerExpenseTableView')

        self.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.setShowGrid(False)
        self.setWordWrap(False)

        self.setItemDelegate(ui.RoundedRowDelegate(parent=self))

        self.setModel(ExpenseTableModel(parent=self))
        self._init_headers()
        self._connect_signals()

    def _init_headers(self) -> None:
        header = self.horizontalHeader()
        header.setDefaultAlignment(QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter)
        header.setHighlightSections(False)
        for column in (Columns.Date, Columns.Category, Columns.Currency, Columns.Amount):
            header.setSectionResizeMode(column.value, QtWidgets.QHeaderView.ResizeToContents)
        header.setSectionResizeMode(Columns.Description.value, QtWidgets.QHeaderView.Stretch)

        header = self.verticalHeader()
        header.setDefaultSectionSize(ui.Size.RowHeight(1.0))
        header.setHidden(True)

    def _connect_signals(self) -> None:
        self.model().rowsInserted.connect(self.on_rows_inserted)

    @QtCore.Slot(QtCore.QModelIndex, int, int)
    def on_rows_inserted(self, parent: QtCore.QModelIndex, first: int, last: int) -> None:
        self.scrollTo(self.model().index(last, 0))
