"""
CurrencyTracker: desktop application for recording expenses in several currencies.

Each expense is converted into the selected base currency when it is added. The
window lists the expenses, their total and a per-category pie chart.

This package provides:

- :mod:`CurrencyTracker.core` – The ledger, currency conversion, validation and aggregation.
- :mod:`CurrencyTracker.data` – Qt models and views for the expense table, total and chart.
- :mod:`CurrencyTracker.ui` – The PySide6 main window, entry form and theming.
- :mod:`CurrencyTracker.settings` – Bundled configuration and locale-aware formatting.
- :mod:`CurrencyTracker.status` – Status codes and user-facing exceptions.
- :mod:`CurrencyTracker.log` – In-app logging with a log viewer.

Use :func:`CurrencyTracker.exec_` to launch the application.
"""
import sys

from PySide6 import QtCore

# Fail on Python < 3.11
if not (sys.version_info.major == 3 and sys.version_info.minor >= 11):
    raise RuntimeError('CurrencyTracker requires Python 3.11 or higher.')

__version__ = '0.1.0'
__description__ = 'CurrencyTracker: desktop application for tracking expenses in multiple currencies.'

from .log import log

log.setup_logging()


def exec_() -> None:
    """Launch the CurrencyTracker GUI application and enter its event loop."""
    from .ui import app
    from .ui import main
    from .ui.actions import signals
    application = app.Application(sys.argv)
    main.show()

    QtCore.QTimer.singleShot(100, signals.initializationRequested)

    sys.exit(application.exec())


if __name__ == '__main__':
    exec_()
