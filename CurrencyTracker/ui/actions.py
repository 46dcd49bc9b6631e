"""Application-wide Qt signals for CurrencyTracker.

This module provides:
    - Signals: custom Qt signals for settings changes, ledger updates,
      base currency selection, UI actions (showLogs) and error reporting.
"""
import logging

from PySide6 import QtCore


class Signals(QtCore.QObject):
    """Centralized Qt signals for application config, ledger, and UI events."""
    initializationRequested = QtCore.Signal()

    metadataChanged = QtCore.Signal(str, object)

    expenseAdded = QtCore.Signal(object)
    baseCurrencyChanged = QtCore.Signal(str)

    showLogs = QtCore.Signal()

    error = QtCore.Signal(str)

    def __init__(self):
        super().__init__()
        self._connect_signals()

    def _connect_signals(self):
        @QtCore.Slot(str, object)
        def metadata_changed(key: str, value: object) -> None:
            if key != 'theme':
                return

            from PySide6 import QtWidgets
            if not QtWidgets.QApplication.instance():
                return

            try:
                from . import ui
                ui.apply_theme()
            except (OSError, KeyError, RuntimeError) as ex:
                logging.warning(f'Could not apply the {value} theme: {ex}')

        self.metadataChanged.connect(metadata_changed)


signals = Signals()
