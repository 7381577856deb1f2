"""
Tests for the summary accumulator.

Covers:
- Empty input
- Margin zero-guard
- Permutation invariance
- Non-finite and negative amounts never raising
"""

import random
import uuid
from datetime import date
from decimal import Decimal

import pytest

from sales_ledger.aggregation.summary import summarize, margin_of
from sales_ledger.aggregation.types import LedgerEntry
from sales_ledger.models.enums import EntryKind


def make_entry(kind, amount, occurred_on="2024-01-10", customer="A"):
    return LedgerEntry(
        id=uuid.uuid4(),
        occurred_on=date.fromisoformat(occurred_on),
        kind=kind,
        amount=Decimal(amount),
        customer_name=customer,
    )


class TestSummarize:

    def test_empty_is_all_zero(self):
        summary = summarize([])
        assert summary.sales == 0
        assert summary.cost == 0
        assert summary.profit == 0
        assert summary.margin == 0

    def test_empty_totals_are_decimals(self):
        summary = summarize([])
        assert all(
            isinstance(value, Decimal)
            for value in (summary.sales, summary.cost, summary.profit, summary.margin)
        )

    def test_sales_and_cost_totals(self):
        summary = summarize([
            make_entry(EntryKind.SALES, "100000"),
            make_entry(EntryKind.COST, "40000"),
            make_entry(EntryKind.SALES, "50000"),
        ])
        assert summary.sales == Decimal("150000")
        assert summary.cost == Decimal("40000")
        assert summary.profit == Decimal("110000")
        assert float(summary.margin) == pytest.approx(0.7333, abs=1e-4)

    def test_only_sales_has_full_margin(self):
        summary = summarize([make_entry(EntryKind.SALES, "50000")])
        assert summary.margin == 1

    def test_cost_without_sales_has_zero_margin(self):
        summary = summarize([make_entry(EntryKind.COST, "40000")])
        assert summary.profit == Decimal("-40000")
        assert summary.margin == 0

    def test_zero_amount_sales_has_zero_margin(self):
        summary = summarize([
            make_entry(EntryKind.SALES, "0"),
            make_entry(EntryKind.COST, "10"),
        ])
        assert summary.margin == 0

    def test_loss_gives_negative_margin(self):
        summary = summarize([
            make_entry(EntryKind.SALES, "100"),
            make_entry(EntryKind.COST, "150"),
        ])
        assert summary.margin == Decimal("-0.5")

    def test_accepts_a_generator(self):
        entries = (make_entry(EntryKind.SALES, "10") for _ in range(3))
        assert summarize(entries).sales == Decimal("30")


class TestSummaryProperties:

    def _random_entries(self, seed, count=40):
        rng = random.Random(seed)
        return [
            make_entry(
                rng.choice([EntryKind.SALES, EntryKind.COST]),
                str(rng.randint(0, 900000)),
            )
            for _ in range(count)
        ]

    @pytest.mark.parametrize("seed", [1, 2, 3])
    def test_permutation_invariance(self, seed):
        entries = self._random_entries(seed)
        shuffled = list(entries)
        random.Random(seed + 100).shuffle(shuffled)
        assert summarize(entries) == summarize(shuffled)

    @pytest.mark.parametrize("seed", [4, 5])
    def test_profit_is_sales_minus_cost(self, seed):
        summary = summarize(self._random_entries(seed))
        assert summary.sales >= 0
        assert summary.cost >= 0
        assert summary.profit == summary.sales - summary.cost


class TestMalformedAmounts:

    def test_negative_amount_is_summed_as_is(self):
        summary = summarize([
            make_entry(EntryKind.SALES, "100"),
            make_entry(EntryKind.SALES, "-30"),
        ])
        assert summary.sales == Decimal("70")

    def test_nan_sales_does_not_raise(self):
        summary = summarize([make_entry(EntryKind.SALES, "NaN")])
        assert summary.margin == 0

    def test_infinite_sales_does_not_raise(self):
        summary = summarize([
            make_entry(EntryKind.SALES, "Infinity"),
            make_entry(EntryKind.COST, "Infinity"),
        ])
        assert summary.margin == 0


class TestMarginOf:

    def test_plain_numbers(self):
        assert margin_of(50, 100) == 0.5

    def test_zero_sales(self):
        assert margin_of(-10, 0) == 0

    def test_zero_sales_margin_is_decimal(self):
        assert isinstance(margin_of(Decimal("-10"), Decimal("0")), Decimal)

    def test_overflowing_ratio_is_zero(self):
        assert margin_of(Decimal("1E+999999"), Decimal("1E-999999")) == 0
