"""Tests for CurrencyTracker.core.ledger."""
import dataclasses
import datetime
import unittest

from CurrencyTracker.core.currency import Currency
from CurrencyTracker.core.ledger import Category, Expense, Ledger, LEDGER_DATA_COLUMNS


def make(amount=10.0, category=Category.Food, base_amount=None) -> Expense:
    return Expense(
        date=datetime.date(2024, 1, 1),
        category=category,
        currency=Currency.USD,
        amount=amount,
        base_amount=amount if base_amount is None else base_amount,
        description='Lunch',
    )


class LedgerTests(unittest.TestCase):
    def test_new_ledger_is_empty(self):
        ledger = Ledger()
        self.assertEqual(len(ledger), 0)
        self.assertEqual(ledger.all(), ())

    def test_append_grows_by_one_and_keeps_prior_records(self):
        ledger = Ledger()
        first = make(1.0)
        ledger.append(first)
        before = ledger.all()

        ledger.append(make(2.0))
        self.assertEqual(len(ledger), 2)
        self.assertEqual(ledger.all()[:1], before)
        self.assertIs(ledger[0], first)

    def test_insertion_order(self):
        ledger = Ledger()
        items = [make(float(i)) for i in range(5)]
        for item in items:
            ledger.append(item)
        self.assertEqual(list(ledger), items)

    def test_append_rejects_non_expense(self):
        with self.assertRaises(TypeError):
            Ledger().append({'amount': 1.0})

    def test_expense_is_immutable(self):
        expense = make()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            expense.base_amount = 99.0

    def test_all_returns_a_snapshot(self):
        ledger = Ledger()
        snapshot = ledger.all()
        ledger.append(make())
        self.assertEqual(snapshot, ())

    def test_to_frame_empty(self):
        df = Ledger().to_frame()
        self.assertTrue(df.empty)
        self.assertEqual(list(df.columns), LEDGER_DATA_COLUMNS)
        self.assertEqual(df['base_amount'].sum(), 0.0)

    def test_to_frame_holds_plain_strings(self):
        ledger = Ledger()
        ledger.append(make(5.0, Category.Bills))
        df = ledger.to_frame()
        self.assertEqual(len(df), 1)
        self.assertEqual(df.loc[0, 'category'], 'Bills')
        self.assertEqual(df.loc[0, 'currency'], 'USD')
        self.assertEqual(df.loc[0, 'base_amount'], 5.0)


if __name__ == '__main__':
    unittest.main()
