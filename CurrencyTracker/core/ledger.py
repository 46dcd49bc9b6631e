"""The in-memory expense ledger.

The ledger is an ordered, append-only sequence of :class:`Expense` records.
Each record keeps the amount as entered together with its base currency
equivalent, computed once when the record was created.
"""
import dataclasses
import datetime
import enum
import logging
from typing import Iterator, List, Tuple

import pandas as pd

from .currency import Currency


class Category(enum.StrEnum):
    """Expense categories, in display order."""
    Food = 'Food'
    Travel = 'Travel'
    Bills = 'Bills'
    Shopping = 'Shopping'
    Other = 'Other'


#: Column names of :meth:`Ledger.to_frame`.
LEDGER_DATA_COLUMNS: List[str] = [
    'date',
    'category',
    'currency',
    'amount',
    'base_amount',
    'base_currency',
    'description',
]


@dataclasses.dataclass(frozen=True, slots=True)
class Expense:
    """A single recorded expense.

    ``base_amount`` is ``amount`` converted into ``base_currency``, the base
    currency in effect when the expense was added. It is never recomputed.
    """
    date: datetime.date
    category: Category
    currency: Currency
    amount: float
    base_amount: float
    description: str
    base_currency: Currency = Currency.USD


class Ledger:
    """Ordered, append-only collection of expenses."""

    def __init__(self) -> None:
        self._expenses: List[Expense] = []

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(tuple(self._expenses))

    def __getitem__(self, index: int) -> Expense:
        return self._expenses[index]

    def append(self, expense: Expense) -> None:
        """Add an expense to the end of the ledger.

        Args:
            expense (Expense): The record to add.

        Raises:
            TypeError: If ``expense`` is not an Expense instance.
        """
        if not isinstance(expense, Expense):
            raise TypeError(f'Expected an Expense, got {type(expense)}')

        self._expenses.append(expense)
        logging.debug(f'Ledger: appended expense #{len(self._expenses)}: {expense}')

    def all(self) -> Tuple[Expense, ...]:
        """Return every expense in insertion order."""
        return tuple(self._expenses)

    def to_frame(self) -> pd.DataFrame:
        """Return a snapshot of the ledger as a DataFrame, one row per expense.

        Enum columns hold their plain string values.
        """
        if not self._expenses:
            df = pd.DataFrame(columns=LEDGER_DATA_COLUMNS)
            df['amount'] = df['amount'].astype(float)
            df['base_amount'] = df['base_amount'].astype(float)
            return df

        rows = []
        for expense in self._expenses:
            row = dataclasses.asdict(expense)
            for k in ('category', 'currency', 'base_currency'):
                row[k] = str(row[k])
            rows.append(row)
        return pd.DataFrame(rows, columns=LEDGER_DATA_COLUMNS)
