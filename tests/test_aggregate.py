"""Tests for CurrencyTracker.core.aggregate."""
import datetime
import random
import unittest

from CurrencyTracker.core import aggregate
from CurrencyTracker.core.currency import Currency
from CurrencyTracker.core.ledger import Category, Expense, Ledger


def expense(category: Category, base_amount: float) -> Expense:
    return Expense(
        date=datetime.date(2024, 5, 1),
        category=category,
        currency=Currency.USD,
        amount=base_amount,
        base_amount=base_amount,
        description='item',
    )


class TotalTests(unittest.TestCase):
    def test_empty_ledger(self):
        result = aggregate.total(Ledger(), Currency.USD)
        self.assertEqual(result.value, 0.0)
        self.assertEqual(str(result), 'Total: 0.00 USD')

    def test_sum_of_base_amounts(self):
        ledger = Ledger()
        for v in (10.0, 20.0, -5.0):
            ledger.append(expense(Category.Food, v))
        self.assertAlmostEqual(aggregate.total(ledger, 'USD').value, 25.0)

    def test_total_is_order_independent(self):
        values = [1.25, 3.5, 100.0, 0.0, 7.75, -2.0]
        expected = sum(values)
        for _ in range(3):
            random.shuffle(values)
            ledger = Ledger()
            for v in values:
                ledger.append(expense(Category.Other, v))
            self.assertAlmostEqual(aggregate.total(ledger, Currency.EUR).value, expected)

    def test_label_uses_given_currency(self):
        ledger = Ledger()
        ledger.append(expense(Category.Bills, 100.0))
        self.assertEqual(str(aggregate.total(ledger, Currency.INR)), 'Total: 100.00 INR')

    def test_format_total_rounds_to_two_places(self):
        self.assertEqual(aggregate.format_total(2.999, 'GBP'), 'Total: 3.00 GBP')
        self.assertEqual(aggregate.format_total(1234.5, Currency.JPY), 'Total: 1234.50 JPY')


class ByCategoryTests(unittest.TestCase):
    def test_empty_ledger(self):
        self.assertEqual(aggregate.by_category(Ledger()), [])

    def test_sums_per_category_in_enum_order(self):
        ledger = Ledger()
        ledger.append(expense(Category.Shopping, 5.0))
        ledger.append(expense(Category.Food, 10.0))
        ledger.append(expense(Category.Food, 20.0))
        self.assertEqual(
            aggregate.by_category(ledger),
            [(Category.Food, 30.0), (Category.Shopping, 5.0)],
        )

    def test_non_positive_sums_are_excluded(self):
        ledger = Ledger()
        ledger.append(expense(Category.Food, 0.0))
        ledger.append(expense(Category.Travel, -10.0))
        ledger.append(expense(Category.Bills, 10.0))
        ledger.append(expense(Category.Bills, -10.0))
        ledger.append(expense(Category.Other, 1.0))

        self.assertEqual(aggregate.by_category(ledger), [(Category.Other, 1.0)])
        # excluded categories still count towards the total
        self.assertAlmostEqual(aggregate.total(ledger, 'USD').value, -9.0)

    def test_subset_of_categories(self):
        ledger = Ledger()
        ledger.append(expense(Category.Food, 1.0))
        ledger.append(expense(Category.Travel, 2.0))
        self.assertEqual(aggregate.by_category(ledger, [Category.Travel]), [(Category.Travel, 2.0)])


if __name__ == '__main__':
    unittest.main()
