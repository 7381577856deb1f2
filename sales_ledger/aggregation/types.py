"""
Value types shared by the aggregation engine.

Everything here is immutable. Entries come in, rows and
summaries come out; nothing is ever written back.
"""

import math
import uuid
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, Overflow, localcontext

from sales_ledger.models.enums import EntryKind, AggregationView

# Sentinel meaning "no filter" for customer, kind and amount range.
ALL = "all"

UNASSIGNED_CUSTOMER = "取引先未設定"
UNCLASSIFIED = "未分類"
WEEK_SUFFIX = " 週"


@contextmanager
def quiet_arithmetic():
    """
    Decimal context in which NaN and infinite amounts never raise.

    Invalid operations (inf - inf, comparisons with NaN) yield NaN
    or False instead of InvalidOperation, and overflow yields an
    infinite result.
    """
    with localcontext() as ctx:
        ctx.traps[InvalidOperation] = False
        ctx.traps[Overflow] = False
        yield ctx


@dataclass(frozen=True)
class LedgerEntry:
    """
    A single sales or cost record as seen by the engine.

    Built from a stored Entry by the service layer. The engine
    only reads these; it never changes one.
    """
    id: uuid.UUID
    occurred_on: date
    kind: EntryKind
    amount: Decimal
    customer_name: str | None = None
    payment_date: date | None = None
    deposit_due_on: date | None = None
    payment_completed: bool = False
    deposit_completed: bool = False
    note: str = ""
    created_at: datetime | None = None

    @property
    def is_settled(self) -> bool:
        """Settlement state of the flag that applies to this kind."""
        if self.kind == EntryKind.SALES:
            return self.deposit_completed
        return self.payment_completed


@dataclass(frozen=True)
class FilterConfig:
    """Predicates applied to entries before any aggregation."""
    start: date | None = None
    end: date | None = None
    customer: str | None = ALL
    entry_kind: EntryKind | str | None = ALL
    amount_range: str | None = ALL


@dataclass(frozen=True)
class AmountBracket:
    """A named amount range with inclusive bounds."""
    id: str
    label: str
    min: Decimal | float
    max: Decimal | float

    def contains(self, amount) -> bool:
        return self.min <= amount <= self.max


AMOUNT_BRACKETS: tuple[AmountBracket, ...] = (
    AmountBracket(ALL, "すべて", 0, math.inf),
    AmountBracket("under-100k", "10万円未満", 0, 99999),
    AmountBracket("100k-300k", "10万円以上 30万円未満", 100000, 299999),
    AmountBracket("300k-500k", "30万円以上 50万円未満", 300000, 499999),
    AmountBracket("500k-plus", "50万円以上", 500000, math.inf),
)


def find_bracket(bracket_id: str | None) -> AmountBracket | None:
    """Look up a bracket by id. Unknown ids return None."""
    for bracket in AMOUNT_BRACKETS:
        if bracket.id == bracket_id:
            return bracket
    return None


@dataclass(frozen=True)
class GroupedRow:
    label: str
    count: int
    sales: Decimal
    cost: Decimal
    profit: Decimal


@dataclass(frozen=True)
class Summary:
    sales: Decimal
    cost: Decimal
    profit: Decimal
    margin: Decimal


@dataclass(frozen=True)
class Report:
    """A summary together with the grouped table the caller asked for."""
    summary: Summary
    view: AggregationView
    title: str
    label_title: str
    rows: list[GroupedRow] = field(default_factory=list)
