"""Currencies and conversion rates.

The rate source is kept behind :class:`RateProvider` so the placeholder table
shipped here can be replaced by a real provider with :func:`set_provider`
without touching the ledger or the aggregate functions.

Example:

    .. code-block:: python

        from CurrencyTracker.core import currency

        currency.rate('USD', 'INR')  # 82.0
        currency.convert(10.0, currency.Currency.EUR, currency.Currency.GBP)  # 11.0

"""
import abc
import enum
import logging
from typing import Dict, Tuple, Union


class Currency(enum.StrEnum):
    """Currencies an expense can be entered in, and totals reported in."""
    USD = 'USD'
    EUR = 'EUR'
    GBP = 'GBP'
    INR = 'INR'
    JPY = 'JPY'
    AUD = 'AUD'


CurrencyLike = Union[Currency, str]

#: Explicit placeholder rates. The pairs are deliberately not inverses of each other.
PLACEHOLDER_RATES: Dict[Tuple[Currency, Currency], float] = {
    (Currency.USD, Currency.INR): 82.0,
    (Currency.INR, Currency.USD): 0.012,
}

#: Rate used for every unequal pair missing from PLACEHOLDER_RATES.
DEFAULT_RATE: float = 1.1


def as_currency(value: CurrencyLike) -> Currency:
    """Coerce a currency code to a :class:`Currency` member.

    Raises:
        ValueError: If the code is not one of the supported currencies.
    """
    if isinstance(value, Currency):
        return value
    try:
        return Currency(value)
    except ValueError:
        raise ValueError(f'Unsupported currency: {value!r}, must be one of {[c.value for c in Currency]}') from None


class RateProvider(abc.ABC):
    """Interface of a source of conversion rates."""

    @abc.abstractmethod
    def rate(self, from_currency: Currency, to_currency: Currency) -> float:
        """Return the factor converting one unit of ``from_currency`` into ``to_currency``."""
        raise NotImplementedError


class PlaceholderRateProvider(RateProvider):
    """Hardcoded rate table standing in for a real exchange rate feed."""

    def __init__(self, rates: Dict[Tuple[Currency, Currency], float] = None, default: float = DEFAULT_RATE):
        self._rates = dict(PLACEHOLDER_RATES if rates is None else rates)
        self._default = default

    def rate(self, from_currency: Currency, to_currency: Currency) -> float:
        if from_currency == to_currency:
            return 1.0
        return self._rates.get((from_currency, to_currency), self._default)


provider: RateProvider = PlaceholderRateProvider()


def set_provider(new_provider: RateProvider) -> None:
    """Replace the module-level rate provider.

    Args:
        new_provider (RateProvider): The provider used by subsequent :func:`rate` calls.

    Raises:
        TypeError: If ``new_provider`` is not a RateProvider.
    """
    global provider

    if not isinstance(new_provider, RateProvider):
        raise TypeError(f'Expected a RateProvider, got {type(new_provider)}')

    logging.debug(f'Rate provider set to {new_provider.__class__.__name__}')
    provider = new_provider


def rate(from_currency: CurrencyLike, to_currency: CurrencyLike) -> float:
    """Return the multiplicative factor converting ``from_currency`` into ``to_currency``."""
    return provider.rate(as_currency(from_currency), as_currency(to_currency))


def convert(amount: float, from_currency: CurrencyLike, to_currency: CurrencyLike) -> float:
    """Convert ``amount`` using the current rate provider."""
    return amount * rate(from_currency, to_currency)
