"""Chart data shared by the category charts.

:class:`ChartModel` turns the tracker's category breakdown into angular slices.
:class:`BaseChartView` keeps the model in sync with the app signals and handles
hovering. Subclasses only lay out and paint.
"""
import logging
import math
from dataclasses import dataclass
from typing import List

from PySide6 import QtCore, QtGui, QtWidgets

from . import ui
from .actions import signals
from ..core import tracker
from ..settings import lib, locale

#: Qt angles are expressed in 1/16th of a degree
QT_CIRCLE: int = 360 * 16
#: Slices start at twelve o'clock
QT_ROTATION: int = 90 * 16

#: Settings that change how slices are coloured
CHART_METADATA_KEYS = ('theme',)


@dataclass(frozen=True, slots=True)
class ChartSlice:
    category: str
    amount_txt: str
    value: float
    color: QtGui.QColor
    start_qt: int
    span_qt: int
    display_name: str = ''
    share: float = 0.0

    @property
    def label(self) -> str:
        return self.display_name or self.category

    @property
    def mid_deg(self) -> float:
        return (self.start_qt + self.span_qt / 2.0) / 16.0


class ChartModel(QtCore.QObject):
    """Slices of the categories with a positive sum in the base currency."""

    def __init__(self, parent: QtCore.QObject = None) -> None:
        super().__init__(parent)
        self._slices: List[ChartSlice] = []
        self._version: int = 0

    @property
    def slices(self) -> List[ChartSlice]:
        return self._slices

    @property
    def version(self) -> int:
        """Incremented on every rebuild or clear."""
        return self._version

    def rebuild(self) -> None:
        """Recompute slices from :meth:`TrackerAPI.breakdown`.

        Each span is the category's share of the circle. The rounding remainder
        goes to the largest slice so the spans always add up to a full circle.
        Shares are taken relative to the largest sum, so huge but finite sums
        cannot overflow. A non-finite sum leaves the chart empty.
        """
        breakdown = tracker.tracker.breakdown()
        if not breakdown:
            logging.debug('Nothing to chart')
            self.clear()
            return

        if not all(math.isfinite(value) for _, value in breakdown):
            logging.warning('Category sums are too large to chart')
            self.clear()
            return

        largest = max(range(len(breakdown)), key=lambda i: breakdown[i][1])
        peak = breakdown[largest][1]
        ratios = [value / peak for _, value in breakdown]
        shares = [ratio / sum(ratios) for ratio in ratios]
        spans = [round(share * QT_CIRCLE) for share in shares]
        spans[largest] += QT_CIRCLE - sum(spans)

        code = tracker.tracker.base_currency.value
        loc = lib.settings['locale']

        slices = []
        start = QT_ROTATION
        for (category, value), span, share in zip(breakdown, spans, shares):
            slices.append(ChartSlice(
                category=category.value,
                amount_txt=locale.format_amount(value, code, loc),
                value=value,
                color=ui.category_color(category.value),
                start_qt=start % QT_CIRCLE,
                span_qt=span,
                display_name=lib.settings.category_display_name(category.value),
                share=share,
            ))
            start += span

        self._slices = slices
        self._version += 1

    def clear(self) -> None:
        self._slices = []
        self._version += 1


class BaseChartView(QtWidgets.QWidget):
    """Widget base for the category charts.

    Data is rebuilt shortly after an expense is added, the base currency changes
    or the theme changes. Layout is recomputed only when the model or the
    widget size changed since the last paint.
    """
    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.model = ChartModel(parent=self)

        self.show_legend: bool = True
        self.show_tooltip: bool = True
        self.hover_index: int = -1
        self._layout_key = None

        self._rebuild_timer = QtCore.QTimer(self)
        self._rebuild_timer.setSingleShot(True)
        self._rebuild_timer.setInterval(50)
        self._rebuild_timer.timeout.connect(self.init_data)

        self.setMouseTracking(True)
        self.setContextMenuPolicy(QtCore.Qt.ActionsContextMenu)
        self.setMinimumSize(ui.Size.DefaultWidth(0.4), ui.Size.DefaultWidth(0.4))
        self.setSizePolicy(QtWidgets.QSizePolicy.Expanding, QtWidgets.QSizePolicy.Expanding)

        signals.expenseAdded.connect(self.start_init_data_timer)
        signals.baseCurrencyChanged.connect(self.start_init_data_timer)
        signals.initializationRequested.connect(self.start_init_data_timer)
        signals.metadataChanged.connect(self.on_metadata_changed)

        self._init_actions()

    def _init_actions(self) -> None:
        for label, attr, shortcut in (
                ('Toggle Legend', 'show_legend', 'Alt+1'),
                ('Toggle Tooltip', 'show_tooltip', 'Alt+2'),
        ):
            action = QtGui.QAction(label, self)
            action.setCheckable(True)
            action.setChecked(getattr(self, attr))
            action.setShortcut(shortcut)
            action.setShortcutContext(QtCore.Qt.WidgetShortcut)
            action.toggled.connect(lambda checked, a=attr: self._set_flag(a, checked))
            self.addAction(action)

        separator = QtGui.QAction(self)
        separator.setSeparator(True)
        self.addAction(separator)

        action = QtGui.QAction('Reload Chart', self)
        action.setShortcut('Ctrl+R')
        action.setShortcutContext(QtCore.Qt.WidgetShortcut)
        action.triggered.connect(self.start_init_data_timer)
        self.addAction(action)

    def _set_flag(self, attr: str, value: bool) -> None:
        setattr(self, attr, value)
        self.invalidate_layout()

    def start_init_data_timer(self, *args) -> None:
        self._rebuild_timer.start()

    def on_metadata_changed(self, key: str, value: object) -> None:
        if key in CHART_METADATA_KEYS:
            self.start_init_data_timer()

    @QtCore.Slot()
    def init_data(self) -> None:
        self.model.rebuild()
        self.invalidate_layout()

    def invalidate_layout(self) -> None:
        self._layout_key = None
        self.update()

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        key = (self.model.version, self.width(), self.height(), self.show_legend)
        if key != self._layout_key:
            self.layout_chart()
            self._layout_key = key

        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        self.paint_chart(painter)
        painter.end()

    def layout_chart(self) -> None:
        raise NotImplementedError

    def paint_chart(self, painter: QtGui.QPainter) -> None:
        raise NotImplementedError

    def slice_at(self, pos: QtCore.QPoint) -> int:
        raise NotImplementedError

    def mouseMoveEvent(self, event: QtGui.QMouseEvent) -> None:
        self._set_hover(self.slice_at(event.position().toPoint()))
        if self.show_tooltip:
            self.update()
        super().mouseMoveEvent(event)

    def leaveEvent(self, event: QtCore.QEvent) -> None:
        self._set_hover(-1)
        super().leaveEvent(event)

    def _set_hover(self, index: int) -> None:
        if index == self.hover_index:
            return
        self.hover_index = index
        self.update()
