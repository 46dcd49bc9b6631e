"""Tests for the expense entry form and base currency selector."""
import datetime
from unittest.mock import patch

from PySide6 import QtCore

from CurrencyTracker.core import tracker
from CurrencyTracker.core.currency import Currency
from CurrencyTracker.data.view.summary import TotalLabel
from CurrencyTracker.ui.form import BaseCurrencyBar, ExpenseForm
from tests.base import BaseTestCase


class ExpenseFormTests(BaseTestCase):
    def setUp(self) -> None:
        super().setUp()
        self.form = ExpenseForm()
        self.warning = patch.object(ExpenseForm, 'show_warning').start()
        self.addCleanup(patch.stopall)

    def fill(self, category='Food', currency='USD', amount='10', description='Lunch') -> None:
        self.form.category_combo.setCurrentIndex(self.form.category_combo.findData(category))
        self.form.currency_combo.setCurrentIndex(self.form.currency_combo.findData(currency))
        self.form.amount_edit.setText(amount)
        self.form.description_edit.setText(description)

    def test_initial_state(self):
        values = self.form.values()
        self.assertEqual(values['date'], datetime.date.today())
        self.assertIsNone(values['category'])
        self.assertIsNone(values['currency'])
        self.assertEqual(values['amount'], '')
        self.assertEqual(values['description'], '')

    def test_successful_add_resets_form(self):
        self.fill()
        self.form.date_edit.setDate(QtCore.QDate(2023, 1, 2))

        expense = self.form.add_expense()

        self.assertIsNotNone(expense)
        self.assertEqual(expense.date, datetime.date(2023, 1, 2))
        self.assertEqual(len(tracker.tracker.expenses()), 1)
        self.assertEqual(self.form.category_combo.currentIndex(), -1)
        self.assertEqual(self.form.currency_combo.currentIndex(), -1)
        self.assertEqual(self.form.amount_edit.text(), '')
        self.assertEqual(self.form.description_edit.text(), '')
        self.assertEqual(self.form.date_edit.date().toPython(), datetime.date.today())
        self.warning.assert_not_called()

    def test_invalid_amount_keeps_form_state(self):
        self.fill(amount='abc')

        self.assertIsNone(self.form.add_expense())

        self.warning.assert_called_once_with('Amount must be a valid number.')
        self.assertEqual(len(tracker.tracker.expenses()), 0)
        self.assertEqual(self.form.amount_edit.text(), 'abc')
        self.assertEqual(self.form.values()['category'], 'Food')

    def test_digit_separators_are_rejected(self):
        self.fill(amount='1_000')
        self.assertIsNone(self.form.add_expense())
        self.warning.assert_called_once_with('Amount must be a valid number.')
        self.assertEqual(str(tracker.tracker.total()), 'Total: 0.00 USD')

    def test_missing_description_shows_message(self):
        self.fill(description='')
        self.assertIsNone(self.form.add_expense())
        self.warning.assert_called_once_with('Please fill all fields.')
        self.assertEqual(len(tracker.tracker.expenses()), 0)

    def test_add_button_submits(self):
        self.assertEqual(self.form.add_button.text(), 'Add')
        self.fill()
        self.form.add_button.click()
        self.assertEqual(len(tracker.tracker.expenses()), 1)


class BaseCurrencyBarTests(BaseTestCase):
    def test_selector_drives_tracker_and_total(self):
        bar = BaseCurrencyBar()
        label = TotalLabel()
        self.assertEqual(bar.combo.currentData(), 'USD')
        self.assertEqual(label.text(), 'Total: 0.00 USD')

        tracker.tracker.add_expense(datetime.date.today(), 'Bills', 'USD', '100', 'Rent')
        self.assertEqual(label.text(), 'Total: 100.00 USD')

        bar.combo.setCurrentIndex(bar.combo.findData('INR'))
        self.assertIs(tracker.tracker.base_currency, Currency.INR)
        self.assertEqual(label.text(), 'Total: 100.00 INR')
        self.assertEqual(tracker.tracker.expenses()[0].base_amount, 100.0)

    def test_selector_follows_tracker(self):
        bar = BaseCurrencyBar()
        tracker.tracker.set_base_currency('GBP')
        self.assertEqual(bar.combo.currentData(), 'GBP')
