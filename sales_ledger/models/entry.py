"""
Ledger entry model.

Each row is one sales or cost transaction. The settlement
flags are the only fields that change independently of an
edit: deposit_completed applies to sales entries,
payment_completed to cost entries.
"""

import uuid
from datetime import date, datetime, timezone
from decimal import Decimal

from sqlalchemy import (
    String, Boolean, Date, DateTime, Numeric,
    Enum as SAEnum, Uuid,
)
from sqlalchemy.orm import Mapped, mapped_column

from sales_ledger.models.base import Base
from sales_ledger.models.enums import EntryKind


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class Entry(Base):
    """A stored sales or cost transaction."""

    __tablename__ = "entries"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid, primary_key=True, default=uuid.uuid4
    )
    customer_name: Mapped[str | None] = mapped_column(
        String(100), nullable=True, index=True
    )
    occurred_on: Mapped[date] = mapped_column(
        Date, nullable=False, index=True
    )
    payment_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    deposit_due_on: Mapped[date | None] = mapped_column(Date, nullable=True)
    payment_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    deposit_completed: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False
    )
    kind: Mapped[EntryKind] = mapped_column(
        SAEnum(EntryKind, name="entry_kind_enum",
               values_callable=lambda e: [m.value for m in e]),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 4), nullable=False
    )
    note: Mapped[str] = mapped_column(
        String(80), nullable=False, default=""
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=_utcnow
    )

    def __repr__(self) -> str:
        return (
            f"<Entry {self.kind.value} {self.amount} "
            f"{self.customer_name!r} {self.occurred_on}>"
        )
