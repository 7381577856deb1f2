"""
Report assembly.

Runs the filter once and feeds the filtered entries to the
summary accumulator and to the grouped view the caller picked.
Also holds the two list helpers the entry screen needs: the
customer filter options and the listing order.
"""

from datetime import datetime
from typing import Iterable

from sales_ledger.aggregation.collation import Collation, get_collation, sort_labels
from sales_ledger.aggregation.filters import filter_entries
from sales_ledger.aggregation.grouping import group_by
from sales_ledger.aggregation.labels import (
    amount_bracket_label,
    customer_label,
    period_label,
)
from sales_ledger.aggregation.summary import summarize
from sales_ledger.aggregation.types import FilterConfig, LedgerEntry, Report
from sales_ledger.models.enums import AggregationView, PeriodGrouping

VIEW_TITLES = {
    AggregationView.CUSTOMER: "取引先ごと",
    AggregationView.PERIOD: "期間ごと",
    AggregationView.AMOUNT_RANGE: "金額レンジごと",
}

PERIOD_LABEL_TITLES = {
    PeriodGrouping.MONTH: "月",
    PeriodGrouping.WEEK: "週",
    PeriodGrouping.DAY: "日付",
}


def build_report(
    entries: Iterable[LedgerEntry],
    config: FilterConfig,
    view: AggregationView | str = AggregationView.CUSTOMER,
    period_grouping: PeriodGrouping | str = PeriodGrouping.MONTH,
    collation: Collation | None = None,
) -> Report:
    """Summary plus one grouped table over the filtered entries."""
    view = AggregationView(view)
    period_grouping = PeriodGrouping(period_grouping)
    collation = collation or get_collation()

    filtered = filter_entries(entries, config)

    if view == AggregationView.PERIOD:
        label_of = period_label(period_grouping)
        label_title = PERIOD_LABEL_TITLES[period_grouping]
    elif view == AggregationView.AMOUNT_RANGE:
        label_of = amount_bracket_label
        label_title = "金額レンジ"
    else:
        label_of = customer_label
        label_title = "取引先名"

    return Report(
        summary=summarize(filtered),
        view=view,
        title=VIEW_TITLES[view],
        label_title=label_title,
        rows=group_by(filtered, label_of, collation),
    )


def customer_options(
    entries: Iterable[LedgerEntry], collation: Collation | None = None
) -> list[str]:
    """Distinct non-blank customer names, trimmed and collated."""
    names = {
        (entry.customer_name or "").strip() for entry in entries
    }
    names.discard("")
    return sort_labels(names, collation)


def listing_order(entries: Iterable[LedgerEntry]) -> list[LedgerEntry]:
    """Newest transaction date first, then newest created first."""
    return sorted(
        entries,
        key=lambda e: (e.occurred_on, e.created_at or datetime.min),
        reverse=True,
    )
