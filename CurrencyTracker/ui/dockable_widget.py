"""Base class of the chart and log docks."""
from typing import Optional

from PySide6 import QtWidgets, QtCore, QtGui

#: Title bar menu entries and the dock areas they move the widget to
DOCK_AREAS = {
    'Dock Left': QtCore.Qt.LeftDockWidgetArea,
    'Dock Right': QtCore.Qt.RightDockWidgetArea,
    'Dock Top': QtCore.Qt.TopDockWidgetArea,
    'Dock Bottom': QtCore.Qt.BottomDockWidgetArea,
}

_FEATURES = (
    ('movable', QtWidgets.QDockWidget.DockWidgetMovable),
    ('floatable', QtWidgets.QDockWidget.DockWidgetFloatable),
    ('closable', QtWidgets.QDockWidget.DockWidgetClosable),
)


class DockableWidget(QtWidgets.QDockWidget):
    """A dock that can go to any area and reports visibility changes via :attr:`toggled`.

    Right-clicking the title bar offers floating and re-docking.
    """
    toggled = QtCore.Signal(bool)

    def __init__(
            self,
            title: str,
            parent: Optional[QtWidgets.QWidget] = None,
            movable: bool = True,
            floatable: bool = True,
            closable: bool = True,
            min_width: Optional[int] = None,
            min_height: Optional[int] = None,
            size_hint: Optional[QtCore.QSize] = None,
    ) -> None:
        super().__init__(title, parent)
        enabled = {'movable': movable, 'floatable': floatable, 'closable': closable}

        features = QtWidgets.QDockWidget.NoDockWidgetFeatures
        for name, flag in _FEATURES:
            if enabled[name]:
                features |= flag
        self.setFeatures(features)
        self.setAllowedAreas(QtCore.Qt.AllDockWidgetAreas)

        if min_width is not None:
            self.setMinimumWidth(min_width)
        if min_height is not None:
            self.setMinimumHeight(min_height)
        self._preferred_size = size_hint

        self.visibilityChanged.connect(self.toggled)

    def sizeHint(self) -> QtCore.QSize:
        return self._preferred_size or super().sizeHint()

    def main_window(self) -> Optional[QtWidgets.QMainWindow]:
        widget = self.parentWidget()
        while widget is not None:
            if isinstance(widget, QtWidgets.QMainWindow):
                return widget
            widget = widget.parentWidget()
        return None

    def contextMenuEvent(self, event: QtGui.QContextMenuEvent) -> None:
        in_title_bar = event.pos().y() <= self.style().pixelMetric(QtWidgets.QStyle.PM_TitleBarHeight)
        if not in_title_bar:
            super().contextMenuEvent(event)
            return

        menu = QtWidgets.QMenu(self)
        menu.addAction('Toggle Floating', lambda: self.setFloating(not self.isFloating()))
        window = self.main_window()
        if window is not None:
            menu.addSeparator()
            for label, area in DOCK_AREAS.items():
                menu.addAction(label, lambda a=area: window.addDockWidget(a, self))
        menu.exec(event.globalPos())
        event.accept()
