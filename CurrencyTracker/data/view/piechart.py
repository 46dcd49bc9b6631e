"""Pie chart of the spending per category, in the base currency."""
import math
from typing import List, Optional

from PySide6 import QtCore, QtGui, QtWidgets

from ...ui import ui
from ...ui.basechart import BaseChartView, ChartSlice
from ...ui.dockable_widget import DockableWidget

CHART_TITLE: str = 'Spending by Category'
EMPTY_TEXT: str = 'No expenses'


def bold_font(size: int) -> tuple[QtGui.QFont, QtGui.QFontMetrics]:
    font = QtGui.QFont(QtWidgets.QApplication.font())
    font.setPixelSize(size)
    font.setBold(True)
    return font, QtGui.QFontMetrics(font)


def wedge(rect: QtCore.QRectF, sl: ChartSlice) -> QtGui.QPainterPath:
    """Closed path of a slice drawn in ``rect``."""
    path = QtGui.QPainterPath()
    path.moveTo(rect.center())
    path.arcTo(rect, sl.start_qt / 16.0, sl.span_qt / 16.0)
    path.closeSubpath()
    return path


class PieChartView(BaseChartView):
    """Titled pie with a side legend. The hovered slice is pushed outwards."""

    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(parent)
        self.pop_px = ui.Size.Indicator(3.0)
        self._pie_rect = QtCore.QRectF()
        self._legend_rect = QtCore.QRectF()
        self._wedges: List[QtGui.QPainterPath] = []

    def _legend_lines(self) -> List[str]:
        return [f'{sl.label}  {sl.amount_txt}' for sl in self.model.slices]

    def _popped(self, sl: ChartSlice) -> QtCore.QRectF:
        theta = math.radians(sl.mid_deg)
        return self._pie_rect.translated(self.pop_px * math.cos(theta), -self.pop_px * math.sin(theta))

    def layout_chart(self) -> None:
        margin = ui.Size.Margin(1.0)
        _, title_metrics = bold_font(ui.Size.LargeText())
        _, metrics = bold_font(ui.Size.MediumText())

        area = QtCore.QRectF(self.rect()).adjusted(
            margin, margin + title_metrics.height() + ui.Size.Indicator(2.0), -margin, -margin)

        legend_width = 0
        if self.show_legend and self.model.slices:
            legend_width = max(metrics.horizontalAdvance(t) for t in self._legend_lines())
            legend_width += metrics.height() + margin
        self._legend_rect = QtCore.QRectF(area.right() - legend_width, area.top(), legend_width, area.height())
        area.setRight(area.right() - legend_width)

        edge = max(0.0, min(area.width(), area.height()) - self.pop_px * 2)
        self._pie_rect = QtCore.QRectF(0, 0, edge, edge)
        self._pie_rect.moveCenter(area.center())

        self._wedges = [wedge(self._popped(sl), sl) for sl in self.model.slices]

    def slice_at(self, pos: QtCore.QPoint) -> int:
        point = QtCore.QPointF(pos)
        return next((i for i, path in enumerate(self._wedges) if path.contains(point)), -1)

    def paint_chart(self, painter: QtGui.QPainter) -> None:
        radius = ui.Size.Indicator(2.0)
        inset = ui.Size.Margin(0.5)
        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(ui.Color.VeryDarkBackground())
        painter.drawRoundedRect(self.rect(), radius, radius)
        painter.setBrush(ui.Color.DarkBackground())
        painter.drawRoundedRect(self.rect().adjusted(inset, inset, -inset, -inset), radius, radius)

        font, metrics = bold_font(ui.Size.LargeText())
        painter.setFont(font)
        painter.setPen(ui.Color.Text())
        margin = ui.Size.Margin(1.0)
        painter.drawText(
            QtCore.QRect(margin, margin, self.width() - margin * 2, metrics.height()),
            QtCore.Qt.AlignCenter, CHART_TITLE
        )

        if not self.model.slices:
            font, _ = bold_font(ui.Size.MediumText())
            painter.setFont(font)
            painter.setPen(ui.Color.DisabledText())
            painter.drawText(self._pie_rect, QtCore.Qt.AlignCenter, EMPTY_TEXT)
            return

        painter.setPen(QtCore.Qt.NoPen)
        for index, sl in enumerate(self.model.slices):
            painter.setBrush(sl.color)
            rect = self._popped(sl) if index == self.hover_index else self._pie_rect
            painter.drawPie(rect, sl.start_qt, sl.span_qt)

        if self.show_legend:
            self._paint_legend(painter)
        if self.show_tooltip:
            self._paint_tooltip(painter)

    def _paint_legend(self, painter: QtGui.QPainter) -> None:
        font, metrics = bold_font(ui.Size.MediumText())
        painter.setFont(font)

        pad = ui.Size.Indicator(1.0)
        swatch = metrics.height() - pad
        row_height = metrics.height() + pad
        x = self._legend_rect.left() + pad * 2
        y = self._pie_rect.center().y() - row_height * len(self.model.slices) / 2

        for index, (sl, text) in enumerate(zip(self.model.slices, self._legend_lines())):
            painter.setPen(QtCore.Qt.NoPen)
            painter.setBrush(sl.color)
            painter.drawRoundedRect(QtCore.QRectF(x, y + pad / 2, swatch, swatch), pad, pad)

            painter.setPen(ui.Color.SelectedText() if index == self.hover_index else ui.Color.Text())
            painter.drawText(QtCore.QPointF(x + swatch + pad * 2, y + metrics.ascent()), text)
            y += row_height

    def _paint_tooltip(self, painter: QtGui.QPainter) -> None:
        if not 0 <= self.hover_index < len(self.model.slices):
            return

        sl = self.model.slices[self.hover_index]
        text = f'{sl.label}: {sl.amount_txt} ({sl.share * 100.0:.1f}%)'

        font, metrics = bold_font(ui.Size.MediumText())
        painter.setFont(font)
        pad = ui.Size.Indicator(2.0)

        box = QtCore.QRectF(0, 0, metrics.horizontalAdvance(text) + pad * 2, metrics.height() + pad * 2)
        cursor = self.mapFromGlobal(QtGui.QCursor.pos())
        box.moveCenter(QtCore.QPointF(cursor.x(), cursor.y() - box.height() / 2 - pad))
        # keep the box inside the widget
        bounds = QtCore.QRectF(self.rect())
        box.moveLeft(max(bounds.left(), min(box.left(), bounds.right() - box.width())))
        if box.top() < bounds.top():
            box.moveTop(cursor.y() + pad)

        painter.setPen(QtCore.Qt.NoPen)
        painter.setBrush(ui.Color.VeryDarkBackground())
        painter.drawRoundedRect(box, pad, pad)
        painter.setPen(ui.Color.Text())
        painter.drawText(box, QtCore.Qt.AlignCenter, text)


class PieChartDockWidget(DockableWidget):
    def __init__(self, parent: Optional[QtWidgets.QWidget] = None) -> None:
        super().__init__(
            'Pie Chart',
            parent,
            min_width=ui.Size.DefaultWidth(0.5),
            min_height=ui.Size.DefaultWidth(0.4),
        )
        self.setObjectName('CurrencyTrackerPieChartDockWidget')

        self.chart = PieChartView(self)
        self.chart.setObjectName('CurrencyTrackerPieChartView')
        self.setWidget(self.chart)
