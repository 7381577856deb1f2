"""
Report API endpoints.

GET /reports filters the stored entries and returns the summary
together with one grouped table (by customer, period or amount
range). Nothing is stored; every call recomputes from scratch.
"""

from datetime import date

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from sales_ledger.aggregation.types import ALL, AMOUNT_BRACKETS, FilterConfig
from sales_ledger.models.base import get_db
from sales_ledger.models.enums import AggregationView, PeriodGrouping
from sales_ledger.services.report_service import ReportService
from sales_ledger.schemas.report import (
    AmountBracketResponse,
    EntryKindFilter,
    GroupedRowResponse,
    ReportFilters,
    ReportResponse,
    SummaryResponse,
)

router = APIRouter(prefix="/reports", tags=["Reports"])


@router.get("", response_model=ReportResponse)
def get_report(
    start: date | None = None,
    end: date | None = None,
    customer: str = ALL,
    entry_kind: EntryKindFilter = ALL,
    amount_range: str = ALL,
    view: AggregationView = AggregationView.CUSTOMER,
    period_grouping: PeriodGrouping = PeriodGrouping.MONTH,
    db: Session = Depends(get_db),
):
    """
    Summary and grouped breakdown for the given filter.

    Returns 400 when end precedes start.
    """
    config = FilterConfig(
        start=start,
        end=end,
        customer=customer,
        entry_kind=entry_kind,
        amount_range=amount_range,
    )
    service = ReportService(db)
    try:
        report = service.build(config, view, period_grouping)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return ReportResponse(
        filters=ReportFilters(
            start=start,
            end=end,
            customer=customer,
            entry_kind=entry_kind,
            amount_range=amount_range,
            view=view,
            period_grouping=period_grouping,
        ),
        entry_count=sum(row.count for row in report.rows),
        summary=SummaryResponse.from_summary(report.summary),
        view=report.view,
        title=report.title,
        label_title=report.label_title,
        rows=[GroupedRowResponse.from_row(row) for row in report.rows],
    )


@router.get("/amount-ranges", response_model=list[AmountBracketResponse])
def list_amount_ranges():
    """The amount brackets accepted by the amount_range filter."""
    return [AmountBracketResponse.from_bracket(b) for b in AMOUNT_BRACKETS]
