"""
Tests for amount and margin display strings.
"""

from decimal import Decimal

import pytest

from sales_ledger.aggregation.formatting import format_currency, format_percent


@pytest.mark.parametrize("amount, expected", [
    (Decimal("150000"), "￥150,000"),
    (Decimal("150000.0000"), "￥150,000"),
    (0, "￥0"),
    (Decimal("-40000"), "-￥40,000"),
    (Decimal("999.5"), "￥1,000"),
    (1234567, "￥1,234,567"),
])
def test_format_currency(amount, expected):
    assert format_currency(amount) == expected


@pytest.mark.parametrize("ratio, expected", [
    (Decimal("110000") / Decimal("150000"), "73.3%"),
    (1, "100.0%"),
    (0, "0.0%"),
    (Decimal("-0.5"), "-50.0%"),
    (0.12345, "12.3%"),
    (Decimal("0.0005"), "0.1%"),
])
def test_format_percent(ratio, expected):
    assert format_percent(ratio) == expected
