"""The tracker session: the ledger plus the currently selected base currency.

All mutations go through :class:`TrackerAPI`, which broadcasts the change over
the application-wide signals so views can recompute the total and breakdown.

Example:

    .. code-block:: python

        from CurrencyTracker.core import tracker

        tracker.tracker.add_expense(datetime.date.today(), 'Food', 'USD', '10', 'Lunch')
        str(tracker.tracker.total())  # 'Total: 10.00 USD'

"""
import datetime
import logging
from typing import List, Optional, Tuple, Union

from . import aggregate
from . import validation
from .currency import Currency, CurrencyLike, as_currency
from .ledger import Category, Expense, Ledger


class TrackerAPI:
    """Holds the session state and applies user actions to it."""

    def __init__(self, base_currency: Optional[CurrencyLike] = None) -> None:
        """Create a session with an empty ledger.

        Args:
            base_currency: Initial base currency. Defaults to the configured one.
        """
        if base_currency is None:
            from ..settings import lib
            base_currency = lib.settings['base_currency']

        self._base_currency: Currency = as_currency(base_currency)
        self.ledger: Ledger = Ledger()

    @property
    def base_currency(self) -> Currency:
        """The currency totals are reported in and new expenses are converted to."""
        return self._base_currency

    def set_base_currency(self, value: CurrencyLike) -> None:
        """Select a new base currency.

        Already recorded expenses keep the base amount computed when they were added.

        Args:
            value: The new base currency.

        Raises:
            ValueError: If value is not a supported currency.
        """
        value = as_currency(value)
        if value == self._base_currency:
            return

        logging.info(f'Base currency changed from {self._base_currency} to {value}')
        self._base_currency = value

        from ..ui.actions import signals
        signals.baseCurrencyChanged.emit(value.value)

    def add_expense(
            self,
            date: Optional[datetime.date],
            category: Union[Category, str, None],
            currency: Union[Currency, str, None],
            amount: Union[str, float, None],
            description: Optional[str],
    ) -> Expense:
        """Validate the input, convert it into the base currency and append it to the ledger.

        Returns:
            Expense: The recorded expense.

        Raises:
            status.InvalidAmountException: If the amount does not parse as a number.
            status.MissingFieldsException: If any other field is empty.
            ValueError: If category or currency is an unknown name. The form only
                offers known members, so this is a caller error.
        """
        expense = validation.make_expense(
            date, category, currency, amount, description, self._base_currency
        )
        self.ledger.append(expense)
        logging.info(
            f'Added {expense.category} expense: {expense.amount} {expense.currency} '
            f'({expense.base_amount} {expense.base_currency})'
        )

        from ..ui.actions import signals
        signals.expenseAdded.emit(expense)
        return expense

    def expenses(self) -> Tuple[Expense, ...]:
        """Return every recorded expense in insertion order."""
        return self.ledger.all()

    def total(self) -> aggregate.Total:
        """Return the total of the ledger labelled with the current base currency."""
        return aggregate.total(self.ledger, self._base_currency)

    def breakdown(self) -> List[Tuple[Category, float]]:
        """Return the per-category sums with a strictly positive value."""
        return aggregate.by_category(self.ledger, Category)


tracker: Optional[TrackerAPI] = TrackerAPI()
