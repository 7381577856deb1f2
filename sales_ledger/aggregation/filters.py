"""
Filter evaluator.

Applies a FilterConfig to a collection of entries. Predicates
are AND-ed and the relative order of entries is preserved.
A start date after the end date is not rejected here: the
result is simply whatever satisfies both bounds, usually nothing.
Range validation belongs to the caller (see ReportService).
"""

import logging
from typing import Iterable

from sales_ledger.aggregation.types import (
    ALL,
    FilterConfig,
    LedgerEntry,
    find_bracket,
    quiet_arithmetic,
)

logger = logging.getLogger(__name__)


def _is_set(value) -> bool:
    return value is not None and value != ALL


def matches(entry: LedgerEntry, config: FilterConfig) -> bool:
    """True if the entry passes every predicate in config."""
    if config.start is not None and entry.occurred_on < config.start:
        return False
    if config.end is not None and entry.occurred_on > config.end:
        return False
    if _is_set(config.customer) and entry.customer_name != config.customer:
        return False
    if _is_set(config.entry_kind) and entry.kind != config.entry_kind:
        return False
    if _is_set(config.amount_range):
        bracket = find_bracket(config.amount_range)
        # Unknown bracket ids filter nothing out
        if bracket is not None and not bracket.contains(entry.amount):
            return False
    return True


def filter_entries(
    entries: Iterable[LedgerEntry], config: FilterConfig
) -> list[LedgerEntry]:
    """Return the entries that satisfy config, in their original order."""
    entries = list(entries)
    with quiet_arithmetic():
        result = [entry for entry in entries if matches(entry, config)]
    logger.debug("Filter kept %d of %d entries", len(result), len(entries))
    return result
