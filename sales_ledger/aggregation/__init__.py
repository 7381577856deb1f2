"""Aggregation engine: pure functions over immutable ledger entries."""

from sales_ledger.aggregation.filters import filter_entries
from sales_ledger.aggregation.grouping import group_by
from sales_ledger.aggregation.labels import (
    amount_bracket_label,
    customer_label,
    period_label,
)
from sales_ledger.aggregation.report import (
    build_report,
    customer_options,
    listing_order,
)
from sales_ledger.aggregation.summary import summarize
from sales_ledger.aggregation.types import (
    ALL,
    AMOUNT_BRACKETS,
    AmountBracket,
    FilterConfig,
    GroupedRow,
    LedgerEntry,
    Report,
    Summary,
)

__all__ = [
    "ALL",
    "AMOUNT_BRACKETS",
    "AmountBracket",
    "FilterConfig",
    "GroupedRow",
    "LedgerEntry",
    "Report",
    "Summary",
    "filter_entries",
    "summarize",
    "group_by",
    "customer_label",
    "period_label",
    "amount_bracket_label",
    "build_report",
    "customer_options",
    "listing_order",
]
