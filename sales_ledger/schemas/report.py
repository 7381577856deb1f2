"""
Pydantic schemas for aggregation reports.

Every amount is returned twice: as a number for clients that
compute further, and as a display string (whole yen, margin as
a one-decimal percentage).
"""

from datetime import date
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel

from sales_ledger.aggregation.formatting import format_currency, format_percent
from sales_ledger.aggregation.types import AmountBracket, GroupedRow, Summary
from sales_ledger.models.enums import AggregationView, PeriodGrouping

# Entry kind filter: one of the EntryKind values or "all".
EntryKindFilter = Literal["all", "sales", "cost"]


class SummaryResponse(BaseModel):
    sales: Decimal
    cost: Decimal
    profit: Decimal
    margin: Decimal
    sales_display: str
    cost_display: str
    profit_display: str
    margin_display: str

    @classmethod
    def from_summary(cls, summary: Summary) -> "SummaryResponse":
        return cls(
            sales=summary.sales,
            cost=summary.cost,
            profit=summary.profit,
            margin=summary.margin,
            sales_display=format_currency(summary.sales),
            cost_display=format_currency(summary.cost),
            profit_display=format_currency(summary.profit),
            margin_display=format_percent(summary.margin),
        )


class GroupedRowResponse(BaseModel):
    label: str
    count: int
    sales: Decimal
    cost: Decimal
    profit: Decimal
    sales_display: str
    cost_display: str
    profit_display: str

    @classmethod
    def from_row(cls, row: GroupedRow) -> "GroupedRowResponse":
        return cls(
            label=row.label,
            count=row.count,
            sales=row.sales,
            cost=row.cost,
            profit=row.profit,
            sales_display=format_currency(row.sales),
            cost_display=format_currency(row.cost),
            profit_display=format_currency(row.profit),
        )


class ReportFilters(BaseModel):
    """The filter the report was computed with, echoed back."""
    start: date | None = None
    end: date | None = None
    customer: str = "all"
    entry_kind: EntryKindFilter = "all"
    amount_range: str = "all"
    view: AggregationView = AggregationView.CUSTOMER
    period_grouping: PeriodGrouping = PeriodGrouping.MONTH


class ReportResponse(BaseModel):
    filters: ReportFilters
    entry_count: int
    summary: SummaryResponse
    view: AggregationView
    title: str
    label_title: str
    rows: list[GroupedRowResponse]


class AmountBracketResponse(BaseModel):
    """A selectable amount range. max is None when unbounded."""
    id: str
    label: str
    min: Decimal
    max: Decimal | None

    @classmethod
    def from_bracket(cls, bracket: AmountBracket) -> "AmountBracketResponse":
        unbounded = bracket.max == float("inf")
        return cls(
            id=bracket.id,
            label=bracket.label,
            min=bracket.min,
            max=None if unbounded else bracket.max,
        )
