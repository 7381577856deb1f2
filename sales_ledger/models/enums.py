"""
Shared enumerations.

The same enums are used by the database models, the API
schemas and the aggregation engine, so an invalid entry kind
is rejected at the boundary and never reaches the engine.
"""

import enum


class EntryKind(str, enum.Enum):
    """Whether an entry adds to sales or to cost."""
    SALES = "sales"
    COST = "cost"


class SettlementStatus(str, enum.Enum):
    """Deposit (sales) or payment (cost) settlement state."""
    PENDING = "pending"
    COMPLETED = "completed"


class PeriodGrouping(str, enum.Enum):
    """Bucket size for the period view."""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"


class AggregationView(str, enum.Enum):
    """Which grouped table a report renders."""
    CUSTOMER = "customer"
    PERIOD = "period"
    AMOUNT_RANGE = "amount-range"
