"""Business logic services."""

from sales_ledger.services.entry_service import EntryService, EntryNotFound
from sales_ledger.services.report_service import ReportService, InvalidDateRange

__all__ = ["EntryService", "EntryNotFound", "ReportService", "InvalidDateRange"]
