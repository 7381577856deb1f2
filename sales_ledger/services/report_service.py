"""
Report service — runs the aggregation engine over stored entries.

The engine itself accepts any filter, including a start date
after the end date. Rejecting that range is a boundary rule and
happens here, before the engine is called.
"""

import logging
from datetime import date

from sqlalchemy.orm import Session

from sales_ledger.aggregation.collation import get_collation
from sales_ledger.aggregation.report import build_report, customer_options
from sales_ledger.aggregation.types import FilterConfig, Report
from sales_ledger.models.enums import AggregationView, PeriodGrouping
from sales_ledger.services.entry_service import EntryService

logger = logging.getLogger(__name__)

INVALID_DATE_RANGE_MESSAGE = "終了日は開始日以降を指定してください。"


class InvalidDateRange(ValueError):
    """The end date of a report filter precedes its start date."""


def validate_date_range(start: date | None, end: date | None) -> None:
    if start is not None and end is not None and start > end:
        logger.warning("Rejected report range start=%s end=%s", start, end)
        raise InvalidDateRange(INVALID_DATE_RANGE_MESSAGE)


class ReportService:

    def __init__(self, db: Session):
        self.db = db
        self.entry_service = EntryService(db)
        self.collation = get_collation()

    def build(
        self,
        config: FilterConfig,
        view: AggregationView = AggregationView.CUSTOMER,
        period_grouping: PeriodGrouping = PeriodGrouping.MONTH,
    ) -> Report:
        """
        Summary and grouped table for the stored entries.

        Raises InvalidDateRange if config.end precedes config.start.
        """
        validate_date_range(config.start, config.end)
        entries = self.entry_service.ledger_entries()
        return build_report(
            entries, config, view, period_grouping, self.collation
        )

    def customer_options(self) -> list[str]:
        return customer_options(
            self.entry_service.ledger_entries(), self.collation
        )
