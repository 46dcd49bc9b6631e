"""Label showing the ledger total in the current base currency."""
from typing import Optional

from PySide6 import QtWidgets, QtCore

from ...core import tracker
from ...ui.actions import signals


class TotalLabel(QtWidgets.QLabel):
    """Displays ``Total: <value> <CODE>`` and refreshes on every ledger or base currency change."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent=parent)
        self.setObjectName('CurrencyTrackerTotalLabel')
        self.setAlignment(QtCore.Qt.AlignRight | QtCore.Qt.AlignVCenter)

        signals.expenseAdded.connect(self.refresh)
        signals.baseCurrencyChanged.connect(self.refresh)
        signals.initializationRequested.connect(self.refresh)

        self.refresh()

    def refresh(self, *args) -> None:
        """Recompute the total from the tracker."""
        self.setText(str(tracker.tracker.total()))
