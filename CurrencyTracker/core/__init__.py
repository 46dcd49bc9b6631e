"""
Core package: the expense ledger, currency conversion and aggregation.

- :mod:`CurrencyTracker.core.currency` – Supported currencies and the swappable rate provider.
- :mod:`CurrencyTracker.core.ledger` – Expense records and the append-only ledger.
- :mod:`CurrencyTracker.core.aggregate` – Total and per-category breakdown functions.
- :mod:`CurrencyTracker.core.validation` – Form input validation.
- :mod:`CurrencyTracker.core.tracker` – The session state (ledger and base currency).
"""
