"""Tests for the pure metric calculations."""

from datetime import UTC, datetime, timedelta

import pytest

from app.stats.metrics import (
    balance,
    category_distribution,
    payment_methods,
    percentage_change,
    round_half_up,
    savings_rate,
    top_categories,
)
from app.stats.periods import Period

NOW = datetime(2024, 5, 15, tzinfo=UTC)


class TestSavingsRate:
    @pytest.mark.parametrize(
        ("income", "expenses", "expected"),
        [
            (300, 100, 67),
            (1000, 250, 75),
            (100, 150, -50),
            (200, 200, 0),
            (80, 70, 13),
        ],
    )
    def test_rounded_share_of_income(self, income, expenses, expected):
        assert savings_rate(income, expenses) == expected

    def test_zero_income_is_zero_regardless_of_expenses(self):
        assert savings_rate(0, 0) == 0
        assert savings_rate(0, 500) == 0


class TestPercentageChange:
    def test_no_activity_in_either_period(self):
        assert percentage_change(0, 0) == 0

    def test_new_activity_counts_as_full_increase(self):
        assert percentage_change(0, 50) == 100

    def test_increase(self):
        assert percentage_change(100, 150) == 50.0

    def test_decrease(self):
        assert percentage_change(200, 100) == -50.0

    def test_one_decimal_place(self):
        assert percentage_change(3, 4) == 33.3
        assert percentage_change(3, 2) == -33.3


class TestRoundHalfUp:
    def test_halves_go_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1

    def test_negative_halves_go_towards_positive_infinity(self):
        assert round_half_up(-2.5) == -2

    def test_decimal_places(self):
        assert round_half_up(12.35, 1) == 12.4
        assert round_half_up(-0.06, 1) == -0.1


def test_balance():
    assert balance(300, 100) == 200
    assert balance(0.3, 0.1) == 0.2


def test_category_distribution_omits_empty_categories():
    rows = [
        {"category": "FOOD", "amount": 120.0},
        {"category": "BILLS", "amount": 0.0},
    ]

    result = category_distribution(rows)

    assert [(item.category, item.amount) for item in result] == [("FOOD", 120.0)]


class TestTopCategories:
    def test_percentages_are_relative_to_top_slice(self):
        rows = [
            {"category": "FOOD", "amount": 50.0},
            {"category": "BILLS", "amount": 30.0},
            {"category": "SHOPPING", "amount": 20.0},
            {"category": "OTHER", "amount": 100.0},
        ]

        result = top_categories(rows[:3])

        assert [item.percentage for item in result] == [50, 30, 20]

    def test_only_three_entries_are_kept(self):
        rows = [
            {"category": "FOOD", "amount": 50.0},
            {"category": "BILLS", "amount": 30.0},
            {"category": "SHOPPING", "amount": 20.0},
            {"category": "OTHER", "amount": 10.0},
        ]

        result = top_categories(rows)

        assert [item.category for item in result] == ["FOOD", "BILLS", "SHOPPING"]
        assert sum(item.percentage for item in result) == 100

    def test_percentages_sum_to_about_one_hundred(self):
        rows = [
            {"category": "FOOD", "amount": 10.0},
            {"category": "BILLS", "amount": 10.0},
            {"category": "SHOPPING", "amount": 10.0},
        ]

        total = sum(item.percentage for item in top_categories(rows))

        assert 99 <= total <= 101

    def test_no_spending(self):
        assert top_categories([]) == []


class TestPaymentMethods:
    def test_split_and_daily_averages(self):
        period = Period(start=NOW - timedelta(days=30), end=NOW)

        result = payment_methods(100.0, 0.0, 300.0, 100.0, period)

        assert result.cash_amount == 100.0
        assert result.card_amount == 0.0
        assert result.cash_percentage == 100
        assert result.card_percentage == 0
        assert result.daily_income == 10
        assert result.daily_spending == 3

    def test_no_spending_gives_zero_percentages(self):
        period = Period(start=NOW - timedelta(days=7), end=NOW)

        result = payment_methods(0.0, 0.0, 0.0, 0.0, period)

        assert result.cash_percentage == 0
        assert result.card_percentage == 0
        assert result.daily_income == 0
        assert result.daily_spending == 0

    def test_short_period_counts_as_one_day(self):
        period = Period(start=NOW - timedelta(hours=2), end=NOW)

        result = payment_methods(30.0, 10.0, 50.0, 40.0, period)

        assert result.cash_percentage == 75
        assert result.card_percentage == 25
        assert result.daily_income == 50
        assert result.daily_spending == 40
