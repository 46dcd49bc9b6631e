"""
Currency amount formatting with Babel.

"""
import logging

from babel import Locale, UnknownLocaleError, numbers

DEFAULT_LOCALE: str = 'en_US'


def _parse_locale(locale: str) -> Locale:
    try:
        return Locale.parse(locale or DEFAULT_LOCALE)
    except (ValueError, TypeError, UnknownLocaleError) as ex:
        logging.debug(f'Invalid locale "{locale}", using {DEFAULT_LOCALE}: {ex}')
        return Locale.parse(DEFAULT_LOCALE)


def format_amount(value: float, currency: str, locale: str) -> str:
    """
    Format a float as a currency string in the given currency.

    Args:
        value (float): The numeric value to be formatted.
        currency (str): Currency code, e.g. 'EUR'.
        locale (str): Locale string, e.g. 'fr_FR'.

    Returns:
        str: The formatted currency string.
    """
    try:
        return numbers.format_currency(value, currency=str(currency), locale=_parse_locale(locale))
    except Exception as ex:
        logging.debug(f'Error formatting currency: {ex}')
        return str(value)
