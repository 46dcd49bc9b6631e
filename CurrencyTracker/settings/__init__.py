"""
Settings package: bundled configuration and locale-aware formatting.

- :mod:`CurrencyTracker.settings.lib` – Loading and validating the bundled settings.json.
- :mod:`CurrencyTracker.settings.locale` – Babel-backed number and currency formatting.
"""
