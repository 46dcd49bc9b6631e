"""Validation of raw expense form input.

Turns the values read from the entry form into an :class:`~CurrencyTracker.core.ledger.Expense`,
or raises the status exception whose message is shown to the user.
"""
import datetime
import enum
import math
import re
from typing import Optional, Type, Union

from . import currency
from .currency import Currency, CurrencyLike
from .ledger import Category, Expense
from ..status import status

#: Plain decimal or exponent notation. No digit separators, no nan or infinity.
AMOUNT_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


def parse_amount(value: Union[str, float, int, None]) -> float:
    """Parse the amount field.

    Leading and trailing whitespace is ignored. Zero and negative numbers are accepted.

    Raises:
        status.InvalidAmountException: If the value is not a finite decimal number.
    """
    if isinstance(value, bool) or value is None:
        raise status.InvalidAmountException
    if isinstance(value, str):
        text = value.strip()
        if not AMOUNT_RE.fullmatch(text):
            raise status.InvalidAmountException
        value = text

    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        raise status.InvalidAmountException from None

    # 1e309 parses to inf
    if not math.isfinite(number):
        raise status.InvalidAmountException
    return number


def _as_member(enum_cls: Type[enum.StrEnum], value) -> Optional[enum.StrEnum]:
    # None and empty strings are unselected fields
    if value is None or value == '':
        return None
    return enum_cls(value)


def make_expense(
        date: Optional[datetime.date],
        category: Union[Category, str, None],
        currency_code: Union[Currency, str, None],
        amount: Union[str, float, None],
        description: Optional[str],
        base_currency: CurrencyLike,
) -> Expense:
    """Validate form input and build an expense converted into ``base_currency``.

    The amount is checked first: an unparsable amount is reported even when other
    fields are also missing. An amount too large to convert into ``base_currency``
    is reported as invalid too.

    Args:
        date: The expense date.
        category: The selected category.
        currency_code: The currency the amount was entered in.
        amount: The amount as typed.
        description: Free text, must not be empty.
        base_currency: The base currency in effect now.

    Returns:
        Expense: The new, immutable expense.

    Raises:
        status.InvalidAmountException: If the amount does not parse as a number.
        status.MissingFieldsException: If date, category, currency or description is empty.
        ValueError: If category or currency is a string naming no known member.
    """
    value = parse_amount(amount)

    category = _as_member(Category, category)
    currency_code = _as_member(Currency, currency_code)

    if date is None or category is None or currency_code is None or not description:
        raise status.MissingFieldsException

    if isinstance(date, datetime.datetime):
        date = date.date()

    base_currency = currency.as_currency(base_currency)
    base_amount = currency.convert(value, currency_code, base_currency)
    if not math.isfinite(base_amount):
        raise status.InvalidAmountException

    return Expense(
        date=date,
        category=category,
        currency=currency_code,
        amount=value,
        base_amount=base_amount,
        description=description,
        base_currency=base_currency,
    )
