"""Tests for CurrencyTracker.core.validation."""
import datetime
import unittest

from CurrencyTracker.core import currency
from CurrencyTracker.core import validation
from CurrencyTracker.core.currency import Currency
from CurrencyTracker.core.ledger import Category
from CurrencyTracker.status import status

TODAY = datetime.date(2024, 3, 15)


class ParseAmountTests(unittest.TestCase):
    def test_numbers(self):
        self.assertEqual(validation.parse_amount('12.5'), 12.5)
        self.assertEqual(validation.parse_amount('  7 '), 7.0)
        self.assertEqual(validation.parse_amount('-3'), -3.0)
        self.assertEqual(validation.parse_amount('0'), 0.0)
        self.assertEqual(validation.parse_amount('1e3'), 1000.0)
        self.assertEqual(validation.parse_amount(4), 4.0)

    def test_invalid(self):
        for value in ('abc', '', '   ', '12,50', None, True, '1_000', '1 000', '0x10', '1e', '.'):
            with self.subTest(value=value):
                with self.assertRaises(status.InvalidAmountException):
                    validation.parse_amount(value)

    def test_non_finite_values_are_invalid(self):
        for value in ('nan', 'NaN', 'inf', '-Infinity', 'infinity', '1e309', float('inf'), float('nan'), 10 ** 400):
            with self.subTest(value=value):
                with self.assertRaises(status.InvalidAmountException):
                    validation.parse_amount(value)

    def test_decimal_forms(self):
        self.assertEqual(validation.parse_amount('+2.'), 2.0)
        self.assertEqual(validation.parse_amount('.5'), 0.5)
        self.assertEqual(validation.parse_amount('-1.5E-2'), -0.015)


class MakeExpenseTests(unittest.TestCase):
    def setUp(self) -> None:
        currency.set_provider(currency.PlaceholderRateProvider())

    def test_valid_input(self):
        expense = validation.make_expense(TODAY, 'Food', 'USD', '10', 'Lunch', Currency.INR)
        self.assertEqual(expense.date, TODAY)
        self.assertIs(expense.category, Category.Food)
        self.assertIs(expense.currency, Currency.USD)
        self.assertEqual(expense.amount, 10.0)
        self.assertAlmostEqual(expense.base_amount, 820.0)
        self.assertIs(expense.base_currency, Currency.INR)
        self.assertEqual(expense.description, 'Lunch')

    def test_datetime_is_reduced_to_date(self):
        expense = validation.make_expense(
            datetime.datetime(2024, 3, 15, 12, 30), Category.Bills, Currency.EUR, 1, 'Power', 'EUR'
        )
        self.assertEqual(expense.date, TODAY)

    def test_invalid_amount_message(self):
        with self.assertRaises(status.InvalidAmountException) as ctx:
            validation.make_expense(TODAY, 'Food', 'USD', 'abc', 'Lunch', 'USD')
        self.assertEqual(ctx.exception.status_message, 'Amount must be a valid number.')

    def test_amount_is_checked_before_other_fields(self):
        with self.assertRaises(status.InvalidAmountException):
            validation.make_expense(None, None, None, 'abc', '', 'USD')

    def test_missing_fields(self):
        cases = (
            (None, 'Food', 'USD', 'Lunch'),
            (TODAY, None, 'USD', 'Lunch'),
            (TODAY, '', 'USD', 'Lunch'),
            (TODAY, 'Food', None, 'Lunch'),
            (TODAY, 'Food', 'USD', ''),
            (TODAY, 'Food', 'USD', None),
        )
        for date, category, code, description in cases:
            with self.subTest(date=date, category=category, code=code, description=description):
                with self.assertRaises(status.MissingFieldsException) as ctx:
                    validation.make_expense(date, category, code, '5', description, 'USD')
                self.assertEqual(ctx.exception.status_message, 'Please fill all fields.')

    def test_whitespace_description_is_accepted(self):
        expense = validation.make_expense(TODAY, 'Other', 'GBP', '1', '   ', 'USD')
        self.assertEqual(expense.description, '   ')

    def test_zero_and_negative_amounts_are_accepted(self):
        self.assertEqual(validation.make_expense(TODAY, 'Other', 'USD', '0', 'x', 'USD').base_amount, 0.0)
        self.assertEqual(validation.make_expense(TODAY, 'Other', 'USD', '-4', 'x', 'USD').base_amount, -4.0)

    def test_conversion_overflow_is_invalid_amount(self):
        with self.assertRaises(status.InvalidAmountException):
            validation.make_expense(TODAY, 'Food', 'EUR', '1.7e308', 'x', 'USD')

    def test_unknown_category_raises(self):
        with self.assertRaises(ValueError):
            validation.make_expense(TODAY, 'Rent', 'USD', '1', 'x', 'USD')


if __name__ == '__main__':
    unittest.main()
