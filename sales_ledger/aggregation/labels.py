"""
Label strategies for the group aggregator.

Each strategy maps one entry to the label of the group it
belongs to. period_label is a factory because the bucket size
is chosen by the caller.
"""

from datetime import date, timedelta
from typing import Callable

from sales_ledger.aggregation.types import (
    AMOUNT_BRACKETS,
    ALL,
    UNASSIGNED_CUSTOMER,
    UNCLASSIFIED,
    WEEK_SUFFIX,
    LedgerEntry,
)
from sales_ledger.models.enums import PeriodGrouping

LabelFn = Callable[[LedgerEntry], str]


def customer_label(entry: LedgerEntry) -> str:
    name = (entry.customer_name or "").strip()
    return name or UNASSIGNED_CUSTOMER


def week_start(day: date) -> date:
    """
    Monday of the week containing day.

    Weeks run Monday to Sunday, so a Sunday belongs to the week
    that started six days earlier.
    """
    return day - timedelta(days=day.weekday())


def period_label(grouping: PeriodGrouping | str) -> LabelFn:
    """Return a label function bucketing entries by day, week or month."""
    grouping = PeriodGrouping(grouping)

    if grouping == PeriodGrouping.DAY:
        def label(entry: LedgerEntry) -> str:
            return entry.occurred_on.isoformat()
    elif grouping == PeriodGrouping.WEEK:
        def label(entry: LedgerEntry) -> str:
            return week_start(entry.occurred_on).isoformat() + WEEK_SUFFIX
    else:
        def label(entry: LedgerEntry) -> str:
            return entry.occurred_on.isoformat()[:7]

    return label


def bracket_label_for(amount) -> str:
    for bracket in AMOUNT_BRACKETS:
        if bracket.id != ALL and bracket.contains(amount):
            return bracket.label
    return UNCLASSIFIED


def amount_bracket_label(entry: LedgerEntry) -> str:
    return bracket_label_for(entry.amount)
