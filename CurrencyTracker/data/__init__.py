"""
Data package: Qt models and views over the tracker state.

- :mod:`CurrencyTracker.data.model.expense` – Table model of recorded expenses.
- :mod:`CurrencyTracker.data.view.expense` – Expense table view.
- :mod:`CurrencyTracker.data.view.summary` – Total label.
- :mod:`CurrencyTracker.data.view.piechart` – Spending by category pie chart.
"""
