"""
Group aggregator.

Partitions entries by a label function and accumulates count,
sales and cost per label. Rows come back ordered by label
using the configured collation (Japanese-aware by default).
"""

import logging
from decimal import Decimal
from typing import Iterable

from sales_ledger.aggregation.collation import Collation, get_collation
from sales_ledger.aggregation.labels import LabelFn
from sales_ledger.aggregation.types import GroupedRow, LedgerEntry, quiet_arithmetic
from sales_ledger.models.enums import EntryKind

logger = logging.getLogger(__name__)

ZERO = Decimal(0)


def group_by(
    entries: Iterable[LedgerEntry],
    label_of: LabelFn,
    collation: Collation | None = None,
) -> list[GroupedRow]:
    """
    Build one GroupedRow per distinct label.

    Labels are the group keys, so they are unique and the sort
    never has to break a tie between two rows.
    """
    buckets: dict[str, dict] = {}
    with quiet_arithmetic():
        for entry in entries:
            label = label_of(entry)
            bucket = buckets.get(label)
            if bucket is None:
                bucket = buckets[label] = {"count": 0, "sales": ZERO, "cost": ZERO}

            bucket["count"] += 1
            if entry.kind == EntryKind.SALES:
                bucket["sales"] += entry.amount
            else:
                bucket["cost"] += entry.amount

        rows = [
            GroupedRow(
                label=label,
                count=bucket["count"],
                sales=bucket["sales"],
                cost=bucket["cost"],
                profit=bucket["sales"] - bucket["cost"],
            )
            for label, bucket in buckets.items()
        ]

    key = collation or get_collation()
    rows.sort(key=lambda row: key(row.label))
    logger.debug("Grouped entries into %d rows", len(rows))
    return rows
