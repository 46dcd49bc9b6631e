"""The CurrencyTracker main window.

The central area stacks the base currency selector, the entry form, the expense
table and the total. The pie chart docks on the right and the logs dock, hidden
until needed, at the bottom.
"""
import logging

from PySide6 import QtWidgets, QtCore, QtGui

from . import ui
from .ui import Theme
from .actions import signals
from .form import BaseCurrencyBar, ExpenseForm
from ..data.view.expense import ExpenseTableView
from ..data.view.piechart import PieChartDockWidget
from ..data.view.summary import TotalLabel
from ..log.view import LogDockWidget
from ..settings import lib

#: Default window size in pixels
WINDOW_SIZE = (850, 600)

#: QSettings key of the saved dock layout
WINDOW_STATE_KEY = 'MainWindow/windowState'

window = None


def show():
    """Create the main window on first call and show it."""
    global window

    if window is None:
        window = MainWindow()
    window.show()


class MainWindow(QtWidgets.QMainWindow):
    def __init__(self, parent=None):
        super().__init__(parent)
        self.setObjectName('CurrencyTrackerMainWindow')
        self.setWindowTitle(lib.settings['name'])
        self.setDockOptions(
            self.dockOptions() | QtWidgets.QMainWindow.AllowNestedDocks | QtWidgets.QMainWindow.AnimatedDocks
        )

        central = QtWidgets.QWidget(self)
        central.setProperty('rounded', True)
        margin = ui.Size.Margin(1.0)
        column = QtWidgets.QVBoxLayout(central)
        column.setContentsMargins(margin, margin, margin, margin)
        column.setSpacing(ui.Size.Margin(0.5))

        self.base_currency_bar = BaseCurrencyBar(parent=central)
        self.form = ExpenseForm(parent=central)
        self.expense_view = ExpenseTableView(parent=central)
        self.total_label = TotalLabel(parent=central)

        column.addWidget(self.base_currency_bar)
        column.addWidget(self.form)
        column.addWidget(self.expense_view, 1)
        column.addWidget(self.total_label)
        self.setCentralWidget(central)

        self.piechart_view = PieChartDockWidget(parent=self)
        self.addDockWidget(QtCore.Qt.RightDockWidgetArea, self.piechart_view)

        self.log_view = LogDockWidget(parent=self)
        self.addDockWidget(QtCore.Qt.BottomDockWidgetArea, self.log_view)
        self.log_view.hide()

        self.toolbar = QtWidgets.QToolBar('Panels', self)
        self.toolbar.setObjectName('CurrencyTrackerActionToolBar')
        self.toolbar.setMovable(False)
        self.addToolBar(QtCore.Qt.TopToolBarArea, self.toolbar)
        self._add_dock_action('Pie Chart', 'Ctrl+1', self.piechart_view)
        self._add_dock_action('Logs', 'Ctrl+2', self.log_view)
        self.toolbar.addSeparator()
        self._add_theme_action()

        self.statusBar().setSizeGripEnabled(True)

        signals.showLogs.connect(self.show_logs)
        signals.error.connect(self.show_status_message)

        self.load_window_settings()

    def _add_dock_action(self, label, shortcut, dock):
        action = QtGui.QAction(label, self)
        action.setCheckable(True)
        action.setChecked(not dock.isHidden())
        action.setShortcut(shortcut)
        action.setShortcutContext(QtCore.Qt.ApplicationShortcut)
        action.toggled.connect(lambda checked: self.set_dock_visible(dock, checked))
        dock.toggled.connect(action.setChecked)

        self.toolbar.addAction(action)
        self.addAction(action)
        logging.debug(f'Dock action "{label}" bound to {shortcut}')

    def _add_theme_action(self):
        self.theme_action = QtGui.QAction('Light Theme', self)
        self.theme_action.setCheckable(True)
        self.theme_action.setChecked(ui.current_theme() == Theme.Light)
        self.theme_action.setShortcut('Ctrl+T')
        self.theme_action.setShortcutContext(QtCore.Qt.ApplicationShortcut)
        self.theme_action.toggled.connect(self.set_light_theme)

        self.toolbar.addAction(self.theme_action)
        self.addAction(self.theme_action)

    @QtCore.Slot(bool)
    def set_light_theme(self, enabled: bool) -> None:
        """Switch the session theme. Widgets restyle via ``metadataChanged``."""
        lib.settings['theme'] = (Theme.Light if enabled else Theme.Dark).value

    @staticmethod
    def set_dock_visible(dock: QtWidgets.QDockWidget, visible: bool) -> None:
        dock.setVisible(visible)
        if visible:
            dock.raise_()

    @QtCore.Slot()
    def show_logs(self) -> None:
        self.set_dock_visible(self.log_view, True)

    @QtCore.Slot(str)
    def show_status_message(self, message: str) -> None:
        self.statusBar().showMessage(message, 5000)

    def sizeHint(self):
        return QtCore.QSize(*WINDOW_SIZE)

    def closeEvent(self, event) -> None:
        QtCore.QSettings(lib.app_name, lib.app_name).setValue(WINDOW_STATE_KEY, self.saveState())
        super().closeEvent(event)

    def load_window_settings(self) -> None:
        """Center a default-sized window on screen and restore the saved dock layout."""
        self.resize(self.sizeHint())

        screen = QtGui.QGuiApplication.primaryScreen()
        if screen:
            frame = self.frameGeometry()
            frame.moveCenter(screen.availableGeometry().center())
            self.move(frame.topLeft())

        state = QtCore.QSettings(lib.app_name, lib.app_name).value(WINDOW_STATE_KEY)
        if isinstance(state, QtCore.QByteArray):
            self.restoreState(state)
