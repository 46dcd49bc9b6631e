"""
Logging subsystem: handlers, models, and views for application logging.

Modules:

- :mod:`CurrencyTracker.log.log` – Log handler integrating with Python logging.
- :mod:`CurrencyTracker.log.model` – Table model and proxy for displaying and filtering in-memory logs.
- :mod:`CurrencyTracker.log.view` – Qt views and dock widgets for rendering log messages.
"""
