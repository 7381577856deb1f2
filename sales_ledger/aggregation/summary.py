"""
Summary accumulator.

Reduces entries to total sales, total cost, profit and margin.
Plain sums, so the result does not depend on entry order.
"""

import logging
import math
from decimal import Decimal
from typing import Iterable

from sales_ledger.aggregation.types import LedgerEntry, Summary, quiet_arithmetic
from sales_ledger.models.enums import EntryKind

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


def margin_of(profit, sales):
    """profit / sales, or 0 when there are no sales or the ratio is not finite."""
    with quiet_arithmetic():
        if sales > 0:
            margin = profit / sales
            if math.isfinite(margin):
                return margin
    logger.debug("Margin set to 0 for sales=%s profit=%s", sales, profit)
    return ZERO


def summarize(entries: Iterable[LedgerEntry]) -> Summary:
    """Total sales and cost of entries in a single pass."""
    with quiet_arithmetic():
        sales = ZERO
        cost = ZERO
        for entry in entries:
            if entry.kind == EntryKind.SALES:
                sales += entry.amount
            else:
                cost += entry.amount

        profit = sales - cost
        return Summary(
            sales=sales,
            cost=cost,
            profit=profit,
            margin=margin_of(profit, sales),
        )
