"""Tests for CurrencyTracker.core.tracker, including the end-to-end session scenarios."""
import datetime
import unittest

from CurrencyTracker.core import tracker
from CurrencyTracker.core.currency import Currency
from CurrencyTracker.core.ledger import Category
from CurrencyTracker.status import status
from CurrencyTracker.ui.actions import signals
from tests.base import CoreTestCase, SignalRecorder, mute_ui_signals

TODAY = datetime.date.today()


class TrackerTests(CoreTestCase):
    def test_default_base_currency_comes_from_settings(self):
        self.assertIs(tracker.tracker.base_currency, Currency.USD)

    def test_explicit_base_currency(self):
        self.assertIs(tracker.TrackerAPI('GBP').base_currency, Currency.GBP)

    def test_initial_total_label(self):
        self.assertEqual(str(tracker.tracker.total()), 'Total: 0.00 USD')
        self.assertEqual(tracker.tracker.breakdown(), [])

    def test_two_food_expenses(self):
        tracker.tracker.add_expense(TODAY, 'Food', 'USD', '10', 'Breakfast')
        tracker.tracker.add_expense(TODAY, 'Food', 'USD', '20', 'Dinner')

        self.assertEqual(str(tracker.tracker.total()), 'Total: 30.00 USD')
        self.assertEqual(tracker.tracker.breakdown(), [(Category.Food, 30.0)])

    def test_base_amount_is_frozen_when_base_changes(self):
        tracker.tracker.add_expense(TODAY, 'Bills', 'USD', '100', 'Rent')
        tracker.tracker.set_base_currency(Currency.INR)

        expense = tracker.tracker.expenses()[0]
        self.assertEqual(expense.base_amount, 100.0)
        self.assertIs(expense.base_currency, Currency.USD)
        self.assertEqual(str(tracker.tracker.total()), 'Total: 100.00 INR')

    def test_new_expenses_use_current_base(self):
        tracker.tracker.set_base_currency('INR')
        expense = tracker.tracker.add_expense(TODAY, 'Travel', 'USD', '2', 'Bus')
        self.assertAlmostEqual(expense.base_amount, 164.0)

    def test_invalid_amount_leaves_ledger_unchanged(self):
        tracker.tracker.add_expense(TODAY, 'Food', 'USD', '1', 'Snack')
        with SignalRecorder(signals.error) as recorder:
            with self.assertRaises(status.InvalidAmountException):
                tracker.tracker.add_expense(TODAY, 'Food', 'USD', 'abc', 'Snack')
        self.assertEqual(len(tracker.tracker.expenses()), 1)
        self.assertEqual(recorder.calls, [('Amount must be a valid number.',)])

    def test_empty_description_leaves_ledger_unchanged(self):
        with SignalRecorder(signals.error) as recorder:
            with self.assertRaises(status.MissingFieldsException):
                tracker.tracker.add_expense(TODAY, 'Food', 'USD', '5', '')
        self.assertEqual(len(tracker.tracker.expenses()), 0)
        self.assertEqual(recorder.calls, [('Please fill all fields.',)])

    def test_add_expense_emits_signal(self):
        with SignalRecorder(signals.expenseAdded) as recorder:
            expense = tracker.tracker.add_expense(TODAY, 'Shopping', 'EUR', '3', 'Socks')
        self.assertEqual(recorder.calls, [(expense,)])

    def test_set_base_currency_emits_only_on_change(self):
        with SignalRecorder(signals.baseCurrencyChanged) as recorder:
            tracker.tracker.set_base_currency('USD')
            tracker.tracker.set_base_currency('EUR')
            tracker.tracker.set_base_currency(Currency.EUR)
        self.assertEqual(recorder.calls, [('EUR',)])

    def test_set_base_currency_rejects_unknown_code(self):
        with self.assertRaises(ValueError):
            tracker.tracker.set_base_currency('XYZ')
        self.assertIs(tracker.tracker.base_currency, Currency.USD)

    def test_muted_signals_do_not_block_state_changes(self):
        with mute_ui_signals():
            tracker.tracker.add_expense(TODAY, 'Other', 'JPY', '1000', 'Gift')
        self.assertAlmostEqual(tracker.tracker.total().value, 1100.0)


if __name__ == '__main__':
    unittest.main()
