"""Root logger configuration for CurrencyTracker.

Every record is kept in memory by :class:`TankHandler` so the log dock can show
the session's history. Qt's own warnings are routed into the ``Qt`` logger.
"""
import logging
import sys

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

from ..ui.actions import signals

LOG_LEVEL = logging.DEBUG
LOG_FORMAT = '[%(asctime)s] <%(module)s> %(levelname)s:  %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

LOG_LEVELS = (
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL,
)

#: Python logging method per Qt message type
QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def set_logging_level(level):
    """Apply ``level`` to the root logger and each of its handlers.

    Raises:
        ValueError: If level is not one of :data:`LOG_LEVELS`.
    """
    if not isinstance(level, int) or isinstance(level, bool):
        raise ValueError(f'Logging level must be an integer, got {type(level)}.')
    if level not in LOG_LEVELS:
        raise ValueError(f'Unknown logging level {level}, must be one of {LOG_LEVELS}.')

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def qt_message_handler(mode, context, message):
    """Forward a Qt message to the ``Qt`` logger. Fatal messages exit the process."""
    level = QT_LEVELS.get(mode, logging.DEBUG)
    logging.getLogger('Qt').log(level, message.strip())

    if mode == QtMsgType.QtFatalMsg:
        sys.exit(1)


def setup_logging(enable_stream_handler=True, enable_qt_handler=True, log_level=LOG_LEVEL):
    """Replace the root logger's handlers with ours.

    Args:
        enable_stream_handler (bool): Also print records to stdout.
        enable_qt_handler (bool): Route Qt's messages through Python logging.
        log_level (int): Level of the root logger and the installed handlers.
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    handlers = []
    if enable_stream_handler:
        handlers.append(logging.StreamHandler(sys.stdout))
    handlers.append(TankHandler())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(log_level)

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(log_level)
        root_logger.addHandler(handler)

    if enable_qt_handler:
        qInstallMessageHandler(qt_message_handler)


class TankHandler(logging.Handler):
    """Keeps every formatted record in memory.

    Attributes:
        tank (list[tuple[int, str]]): ``(levelno, message)`` pairs in emission order.
    """

    def __init__(self):
        super().__init__()
        self.tank = []

    def emit(self, record):
        try:
            self.tank.append((record.levelno, self.format(record)))
        except Exception:
            self.handleError(record)
            return

        # errors bring up the log dock
        if record.levelno >= logging.ERROR:
            signals.showLogs.emit()

    def get_logs(self, level=logging.NOTSET):
        """Return the stored messages at or above ``level``."""
        return [msg for lvl, msg in self.tank if lvl >= level]

    def clear_logs(self):
        self.tank.clear()
