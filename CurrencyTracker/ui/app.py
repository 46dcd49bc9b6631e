"""Application setup for CurrencyTracker.

This module provides:
    - set_model_id: set the Windows AppUserModelID so the taskbar groups our windows
    - Application: QApplication subclass configuring application metadata and theme
"""
import ctypes
import sys
import uuid
from typing import Optional, Sequence

from PySide6 import QtCore, QtWidgets


def set_model_id() -> None:
    """Set the Windows model id of the process. No-op on other platforms."""
    if QtCore.QSysInfo().productType() not in ('windows', 'winrt'):
        return

    hresult = ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(
        f'CurrencyTracker-{uuid.uuid4()}'
    )
    if hresult != 0:
        raise RuntimeError(f'SetCurrentProcessExplicitAppUserModelID failed with code {hresult}')


class Application(QtWidgets.QApplication):
    """QApplication that applies the CurrencyTracker name, version and stylesheet."""

    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        if argv is None:
            argv = sys.argv

        super().__init__(list(argv))
        set_model_id()

        from .. import __version__
        from ..settings import lib
        self.setApplicationName(lib.app_name)
        self.setApplicationDisplayName(lib.settings['name'])
        self.setOrganizationName('')
        self.setApplicationVersion(__version__)
        self.setQuitOnLastWindowClosed(True)

        from . import ui
        ui.apply_theme()
