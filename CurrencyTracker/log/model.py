"""Qt models over the in-memory log tank.

:class:`LogTableModel` polls the :class:`~CurrencyTracker.log.log.TankHandler`
and appends the records it has not seen yet. :class:`LogFilterProxyModel`
hides rows below a minimum level.
"""
import dataclasses
import enum
import logging
import re
from typing import Any, List, Optional

from PySide6 import QtCore, QtGui

from .log import LOG_DATEFMT, TankHandler
from ..ui import ui


class Columns(enum.IntEnum):
    Date = 0
    Module = 1
    Level = 2
    Message = 3


class Level(enum.IntEnum):
    NOTSET = logging.NOTSET
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class Roles:
    """Custom model roles."""
    LOG_LEVEL = QtCore.Qt.UserRole + 1


#: Matches records formatted with log.LOG_FORMAT
LOG_RECORD_RE = re.compile(
    r'^\[(?P<date>[^\]]+)\]\s+<(?P<module>[^>]+)>\s+(?P<level>[^:]+):\s+(?P<message>.*)$',
    flags=re.DOTALL
)


@dataclasses.dataclass(frozen=True, slots=True)
class LogEntry:
    """A parsed log line. Unparsable lines keep their full text as the message."""
    date: str
    module: str
    level: Level
    message: str

    @classmethod
    def parse(cls, raw: str) -> 'LogEntry':
        match = LOG_RECORD_RE.match(raw)
        if not match:
            return cls(date='', module='', level=Level.NOTSET, message=raw)

        level = Level.__members__.get(match.group('level').strip().upper(), Level.NOTSET)
        return cls(
            date=match.group('date'),
            module=match.group('module'),
            level=level,
            message=match.group('message').rstrip(),
        )


def get_handler() -> TankHandler:
    """Return the root logger's TankHandler.

    Raises:
        RuntimeError: If there is not exactly one TankHandler installed.
    """
    tanks = [h for h in logging.getLogger().handlers if isinstance(h, TankHandler)]
    if len(tanks) != 1:
        raise RuntimeError(f'Expected one TankHandler on the root logger, found {len(tanks)}')
    return tanks[0]


class LogTableModel(QtCore.QAbstractTableModel):
    """Table of :class:`LogEntry` rows fed from the tank on a timer."""

    def __init__(self, parent: Optional[QtCore.QObject] = None, fetch_interval_ms: int = 1000):
        super().__init__(parent=parent)
        self._entries: List[LogEntry] = []
        self._paused = False

        self._timer = QtCore.QTimer(self)
        self._timer.setInterval(fetch_interval_ms)
        self._timer.timeout.connect(self.fetch_new_logs)
        self._timer.start()

    @QtCore.Slot()
    def pause(self) -> None:
        self._paused = True

    @QtCore.Slot()
    def resume(self) -> None:
        self._paused = False

    def rowCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        return 0 if parent.isValid() else len(self._entries)

    def columnCount(self, parent: QtCore.QModelIndex = QtCore.QModelIndex()) -> int:
        return 0 if parent.isValid() else len(Columns)

    def data(self, index: QtCore.QModelIndex, role: int = QtCore.Qt.DisplayRole) -> Any:
        if not index.isValid() or not 0 <= index.row() < len(self._entries):
            return None

        entry = self._entries[index.row()]

        if role in (QtCore.Qt.DisplayRole, QtCore.Qt.EditRole):
            return {
                Columns.Date: entry.date,
                Columns.Module: entry.module,
                Columns.Level: entry.level.name,
                Columns.Message: entry.message,
            }.get(index.column())

        if role == Roles.LOG_LEVEL:
            return entry.level.value

        if role == QtCore.Qt.TextAlignmentRole:
            return QtCore.Qt.AlignLeft | QtCore.Qt.AlignVCenter

        if role == QtCore.Qt.FontRole and entry.level >= Level.ERROR:
            font = QtGui.QFont()
            font.setBold(True)
            return font

        if role == QtCore.Qt.ForegroundRole:
            if entry.level >= Level.ERROR:
                return ui.Color.Red()
            if entry.level == Level.WARNING:
                return ui.Color.Yellow()
            if entry.level == Level.DEBUG:
                return ui.Color.Blue()

        return None

    def headerData(self, section: int, orientation, role: int = QtCore.Qt.DisplayRole) -> Any:
        if orientation == QtCore.Qt.Horizontal and role == QtCore.Qt.DisplayRole:
            return Columns(section).name
        return super().headerData(section, orientation, role)

    def get_entry(self, row: int) -> LogEntry:
        return self._entries[row]

    @QtCore.Slot()
    def clear_logs(self) -> None:
        self.beginResetModel()
        self._entries = []
        self.endResetModel()

    @QtCore.Slot()
    def fetch_new_logs(self) -> None:
        """Append the tank's records that are not in the model yet."""
        if self._paused:
            return

        try:
            messages = get_handler().get_logs(logging.NOTSET)
        except RuntimeError:
            return

        # The tank was cleared elsewhere
        if len(messages) < len(self._entries):
            self.clear_logs()

        first = len(self._entries)
        new = [LogEntry.parse(m) for m in messages[first:]]
        if not new:
            return

        self.beginInsertRows(QtCore.QModelIndex(), first, first + len(new) - 1)
        self._entries.extend(new)
        self.endInsertRows()


class LogFilterProxyModel(QtCore.QSortFilterProxyModel):
    """Hides rows below :meth:`filter_level` and sorts the date column chronologically."""

    def __init__(self, parent: Optional[QtCore.QObject] = None):
        super().__init__(parent)
        self._filter_level = logging.NOTSET

    def filter_level(self) -> int:
        return self._filter_level

    def set_filter_level(self, level: int) -> None:
        self._filter_level = level
        self.invalidateFilter()

    def filterAcceptsRow(self, source_row: int, source_parent: QtCore.QModelIndex) -> bool:
        index = self.sourceModel().index(source_row, Columns.Date, source_parent)
        level = index.data(Roles.LOG_LEVEL)
        return level is None or level >= self._filter_level

    def lessThan(self, left: QtCore.QModelIndex, right: QtCore.QModelIndex) -> bool:
        left_value = left.data(QtCore.Qt.DisplayRole) or ''
        right_value = right.data(QtCore.Qt.DisplayRole) or ''

        if left.column() == Columns.Date and right.column() == Columns.Date:
            left_dt = QtCore.QDateTime.fromString(left_value, _qt_date_format())
            right_dt = QtCore.QDateTime.fromString(right_value, _qt_date_format())
            if left_dt.isValid() and right_dt.isValid():
                return left_dt < right_dt

        return left_value < right_value


def _qt_date_format() -> str:
    # LOG_DATEFMT written with Qt's format characters
    return LOG_DATEFMT.replace('%Y', 'yyyy').replace('%m', 'MM').replace('%d', 'dd').replace(
        '%H', 'HH').replace('%M', 'mm').replace('%S', 'ss')
