"""The log dock: a filterable table of the session's log records."""
import logging

from PySide6 import QtCore, QtWidgets, QtGui

from . import log
from .model import Columns, LogEntry, LogFilterProxyModel, LogTableModel, get_handler
from ..ui import ui
from ..ui.dockable_widget import DockableWidget

LEVEL_ACTIONS = (
    ('Debug', logging.DEBUG),
    ('Info', logging.INFO),
    ('Warning', logging.WARNING),
    ('Error', logging.ERROR),
    ('Critical', logging.CRITICAL),
)


class LogTableView(QtWidgets.QTableView):
    """Read-only, newest-first table of log records."""

    def __init__(self, parent=None):
        super().__init__(parent=parent)
        self.setEditTriggers(QtWidgets.QAbstractItemView.NoEditTriggers)
        self.setSelectionBehavior(QtWidgets.QAbstractItemView.SelectRows)
        self.setSelectionMode(QtWidgets.QAbstractItemView.SingleSelection)
        self.setWordWrap(True)
        self.setItemDelegate(ui.RoundedRowDelegate(parent=self))

        proxy = LogFilterProxyModel(self)
        proxy.setSourceModel(LogTableModel(parent=self))
        self.setModel(proxy)

        header = self.horizontalHeader()
        header.setDefaultAlignment(QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter)
        header.setDefaultSectionSize(ui.Size.DefaultWidth(0.3))
        for column in Columns:
            mode = QtWidgets.QHeaderView.Stretch if column == Columns.Message else QtWidgets.QHeaderView.Interactive
            header.setSectionResizeMode(column.value, mode)

        self.verticalHeader().setDefaultSectionSize(ui.Size.RowHeight(1.0))
        self.verticalHeader().setHidden(True)

        self.setSortingEnabled(True)
        self.sortByColumn(Columns.Date, QtCore.Qt.DescendingOrder)

        proxy.rowsInserted.connect(self.on_rows_inserted)
        self.activated.connect(self.on_entry_activated)

    def source_model(self) -> LogTableModel:
        return self.model().sourceModel()

    @QtCore.Slot()
    def on_rows_inserted(self):
        header = self.horizontalHeader()
        newest_first = (
                header.sortIndicatorSection() == Columns.Date.value and
                header.sortIndicatorOrder() == QtCore.Qt.DescendingOrder
        )
        if newest_first:
            self.scrollToTop()
        else:
            self.scrollToBottom()

    @QtCore.Slot(QtCore.QModelIndex)
    def on_entry_activated(self, index: QtCore.QModelIndex) -> None:
        if not index.isValid():
            return
        row = self.model().mapToSource(index).row()
        LogEntryDialog(self.source_model().get_entry(row), parent=self.window()).open()

    def sizeHint(self):
        return QtCore.QSize(ui.Size.DefaultWidth(1.0), ui.Size.DefaultHeight(0.5))


class LogEntryDialog(QtWidgets.QDialog):
    """Shows one log record's full message."""

    def __init__(self, entry: LogEntry, parent=None):
        super().__init__(parent)
        self.setWindowTitle('Log Entry')
        self.setAttribute(QtCore.Qt.WA_DeleteOnClose, True)
        self.setMinimumSize(ui.Size.DefaultWidth(0.5), ui.Size.DefaultHeight(0.2))

        layout = QtWidgets.QVBoxLayout(self)
        o = ui.Size.Margin(0.5)
        layout.setContentsMargins(o, o, o, o)

        layout.addWidget(QtWidgets.QLabel(f'{entry.date}  {entry.module}  {entry.level.name}', parent=self), 0)

        editor = QtWidgets.QPlainTextEdit(entry.message, parent=self)
        editor.setReadOnly(True)
        layout.addWidget(editor, 1)


class LogDockWidget(DockableWidget):
    """Dock hosting :class:`LogTableView`. Polling pauses while the dock is hidden."""

    def __init__(self, parent=None) -> None:
        super().__init__('Logs', parent)
        self.setObjectName('CurrencyTrackerLogDockWidget')

        self.view = LogTableView(self)
        self.view.setContextMenuPolicy(QtCore.Qt.ActionsContextMenu)
        self.setWidget(self.view)

        proxy = self.view.model()
        self._add_level_menu(
            'App Level', 'Set application logging level',
            logging.getLogger().level, log.set_logging_level
        )
        self._add_level_menu(
            'View Filter', 'Hide records below the chosen level',
            proxy.filter_level(), proxy.set_filter_level
        )

        action = QtGui.QAction('Clear Logs', self)
        action.triggered.connect(self.clear_logs)
        self.view.addAction(action)

        self.visibilityChanged.connect(self.on_visibility_changed)

    def _add_level_menu(self, title, tooltip, current, apply_level):
        menu = QtWidgets.QMenu(self)
        group = QtGui.QActionGroup(menu)
        group.setExclusive(True)

        for name, level in LEVEL_ACTIONS:
            action = menu.addAction(name)
            action.setData(level)
            action.setCheckable(True)
            action.setChecked(level == current)
            group.addAction(action)
        group.triggered.connect(lambda a: apply_level(a.data()))

        action = QtGui.QAction(title, self)
        action.setToolTip(tooltip)
        action.setMenu(menu)
        self.view.addAction(action)

    @QtCore.Slot()
    def clear_logs(self) -> None:
        try:
            get_handler().clear_logs()
        except RuntimeError as ex:
            logging.warning(f'Could not clear the log tank: {ex}')
        self.view.source_model().clear_logs()

    @QtCore.Slot(bool)
    def on_visibility_changed(self, visible: bool) -> None:
        if visible:
            self.view.source_model().resume()
        else:
            self.view.source_model().pause()
