"""
Entry service — storage and lifecycle of ledger entries.

Create, edit, delete and settle entries, and hand them to the
aggregation engine as immutable LedgerEntry values. The caller
controls the commit.
"""

import logging
import uuid

from sqlalchemy import select
from sqlalchemy.orm import Session

from sales_ledger.aggregation.types import LedgerEntry
from sales_ledger.models.entry import Entry
from sales_ledger.models.enums import EntryKind, SettlementStatus
from sales_ledger.schemas.entry import EntryCreate, EntryUpdate

logger = logging.getLogger(__name__)


class EntryNotFound(LookupError):
    """No entry exists with the requested id."""


def to_ledger_entry(entry: Entry) -> LedgerEntry:
    """Snapshot a stored row as an engine value."""
    return LedgerEntry(
        id=entry.id,
        customer_name=entry.customer_name,
        occurred_on=entry.occurred_on,
        payment_date=entry.payment_date,
        deposit_due_on=entry.deposit_due_on,
        payment_completed=entry.payment_completed,
        deposit_completed=entry.deposit_completed,
        kind=entry.kind,
        amount=entry.amount,
        note=entry.note,
        created_at=entry.created_at,
    )


class EntryService:

    def __init__(self, db: Session):
        self.db = db

    def get_entry(self, entry_id: uuid.UUID) -> Entry:
        """Raises EntryNotFound if the id is unknown."""
        entry = self.db.get(Entry, entry_id)
        if not entry:
            raise EntryNotFound(f"Entry {entry_id} not found")
        return entry

    def create_entry(self, request: EntryCreate) -> Entry:
        """Store a new entry. Both settlement flags start unset."""
        entry = Entry(
            customer_name=request.customer_name,
            occurred_on=request.occurred_on,
            payment_date=request.payment_date,
            deposit_due_on=request.deposit_due_on,
            payment_completed=False,
            deposit_completed=False,
            kind=request.kind,
            amount=request.amount,
            note=request.note,
        )
        self.db.add(entry)
        self.db.flush()
        logger.info(
            "Created %s entry %s for %s", entry.kind.value, entry.id,
            entry.customer_name,
        )
        return entry

    def update_entry(self, entry_id: uuid.UUID, request: EntryUpdate) -> Entry:
        """
        Replace the editable fields of an entry.

        The settlement flag survives an edit only while the kind
        stays the same; switching between sales and cost resets
        both flags.
        """
        entry = self.get_entry(entry_id)
        kind_changed = entry.kind != request.kind

        entry.customer_name = request.customer_name
        entry.occurred_on = request.occurred_on
        entry.payment_date = request.payment_date
        entry.deposit_due_on = request.deposit_due_on
        entry.kind = request.kind
        entry.amount = request.amount
        entry.note = request.note

        if kind_changed:
            entry.payment_completed = False
            entry.deposit_completed = False
        elif request.kind == EntryKind.SALES:
            entry.payment_completed = False
        else:
            entry.deposit_completed = False

        self.db.flush()
        logger.info("Updated entry %s", entry.id)
        return entry

    def delete_entry(self, entry_id: uuid.UUID) -> None:
        entry = self.get_entry(entry_id)
        self.db.delete(entry)
        self.db.flush()
        logger.info("Deleted entry %s", entry_id)

    def set_settlement(
        self, entry_id: uuid.UUID, status: SettlementStatus
    ) -> Entry:
        """
        Set the settlement flag that applies to the entry's kind.

        Sales track whether the deposit arrived, costs whether
        the payment went out.
        """
        entry = self.get_entry(entry_id)
        completed = status == SettlementStatus.COMPLETED
        if entry.kind == EntryKind.SALES:
            entry.deposit_completed = completed
        else:
            entry.payment_completed = completed
        self.db.flush()
        logger.info("Entry %s settlement set to %s", entry.id, status.value)
        return entry

    def list_entries(self) -> list[Entry]:
        """Return all entries, newest transaction date first."""
        entries = self.db.execute(
            select(Entry)
            .order_by(Entry.occurred_on.desc(), Entry.created_at.desc())
        ).scalars().all()
        return list(entries)

    def ledger_entries(self) -> list[LedgerEntry]:
        """All entries as immutable engine values, in listing order."""
        return [to_ledger_entry(e) for e in self.list_entries()]
