"""Totals and per-category breakdowns computed from a ledger snapshot.

Both functions are stateless: every call recomputes from the ledger's current
contents. The base currency is passed in explicitly by the caller.
"""
import dataclasses
from typing import Iterable, List, Tuple

from .currency import Currency, CurrencyLike, as_currency
from .ledger import Category, Ledger


def format_total(value: float, currency: CurrencyLike) -> str:
    """Render a total as shown by the total label, e.g. ``Total: 30.00 USD``."""
    return f'Total: {value:.2f} {as_currency(currency).value}'


@dataclasses.dataclass(frozen=True, slots=True)
class Total:
    """Sum of the ledger's base amounts, labelled with a currency code."""
    value: float
    currency: Currency

    def __str__(self) -> str:
        return format_total(self.value, self.currency)


def total(ledger: Ledger, base_currency: CurrencyLike) -> Total:
    """Sum every expense's ``base_amount``.

    Args:
        ledger (Ledger): The ledger to read.
        base_currency (Currency): The currency code the total is labelled with.

    Returns:
        Total: The summed value and its currency label.
    """
    df = ledger.to_frame()
    value = float(df['base_amount'].sum()) if not df.empty else 0.0
    return Total(value=value, currency=as_currency(base_currency))


def by_category(ledger: Ledger, categories: Iterable[Category] = Category) -> List[Tuple[Category, float]]:
    """Sum ``base_amount`` per category.

    Only categories with a strictly positive sum are returned, in the order of
    ``categories``. Expenses whose category sums to zero or less still count
    towards :func:`total`.

    Args:
        ledger (Ledger): The ledger to read.
        categories (Iterable[Category]): Categories to report, in output order.

    Returns:
        list[tuple[Category, float]]: ``(category, sum)`` pairs.
    """
    df = ledger.to_frame()
    if df.empty:
        return []

    sums = df.groupby('category', sort=False)['base_amount'].sum()

    breakdown = []
    for category in categories:
        value = float(sums.get(category.value, 0.0))
        if value > 0:
            breakdown.append((category, value))
    return breakdown
