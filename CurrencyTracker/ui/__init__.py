"""
UI package: application actions, main application setup, theming, and widgets.

This package provides:

- :mod:`CurrencyTracker.ui.actions` – Application-wide Qt signals.
- :mod:`CurrencyTracker.ui.app` – QApplication subclass and setup functions for high-DPI.
- :mod:`CurrencyTracker.ui.main` – Main window composition.
- :mod:`CurrencyTracker.ui.form` – Expense entry form and base currency selector.
- :mod:`CurrencyTracker.ui.ui` – Styling constants for sizes and colors.
- :mod:`CurrencyTracker.ui.basechart` – Chart slice model and base chart widget.
- :mod:`CurrencyTracker.ui.dockable_widget` – Base class for dockable widgets.
"""
