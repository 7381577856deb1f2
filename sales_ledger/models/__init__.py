"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from sales_ledger.models.base import Base
from sales_ledger.models.enums import (
    EntryKind,
    SettlementStatus,
    PeriodGrouping,
    AggregationView,
)
from sales_ledger.models.entry import Entry

__all__ = [
    "Base",
    "EntryKind",
    "SettlementStatus",
    "PeriodGrouping",
    "AggregationView",
    "Entry",
]
