"""
Pydantic schemas for ledger entries.

These are the boundary where raw input becomes a trusted entry:
the aggregation engine never re-checks anything validated here.
"""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from sales_ledger.models.enums import EntryKind, SettlementStatus

REQUIRED_FIELDS_MESSAGE = "取引先名・日付・区分・金額を正しく入力してください。"
DEPOSIT_DUE_REQUIRED_MESSAGE = "売上では入金予定日が必須です。"
PAYMENT_DATE_REQUIRED_MESSAGE = "原価では支払日付が必須です。"

NOTE_MAX_LENGTH = 80


# --- Request Schemas ---

class EntryCreate(BaseModel):
    """A new sales or cost entry."""
    customer_name: str = Field(max_length=100)
    occurred_on: date
    kind: EntryKind
    amount: Decimal
    payment_date: date | None = None
    deposit_due_on: date | None = None
    note: str = Field(default="", max_length=NOTE_MAX_LENGTH)

    @field_validator("customer_name", "note", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("customer_name")
    @classmethod
    def customer_name_required(cls, v: str) -> str:
        if not v:
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return v

    @field_validator("amount")
    @classmethod
    def amount_must_not_be_negative(cls, v: Decimal) -> Decimal:
        if not v.is_finite() or v < 0:
            raise ValueError(REQUIRED_FIELDS_MESSAGE)
        return v

    @model_validator(mode="after")
    def settlement_date_for_kind(self):
        """
        Sales need a deposit due date, costs a payment date.

        The date that does not apply to the kind is dropped.
        """
        if self.kind == EntryKind.SALES:
            if self.deposit_due_on is None:
                raise ValueError(DEPOSIT_DUE_REQUIRED_MESSAGE)
            self.payment_date = None
        else:
            if self.payment_date is None:
                raise ValueError(PAYMENT_DATE_REQUIRED_MESSAGE)
            self.deposit_due_on = None
        return self


class EntryUpdate(EntryCreate):
    """Replacement values for every editable field of an entry."""


class SettlementUpdate(BaseModel):
    """Mark an entry's deposit or payment as completed or pending."""
    status: SettlementStatus


# --- Response Schemas ---

class EntryResponse(BaseModel):
    id: uuid.UUID
    customer_name: str | None
    occurred_on: date
    payment_date: date | None
    deposit_due_on: date | None
    payment_completed: bool
    deposit_completed: bool
    kind: EntryKind
    amount: Decimal
    note: str
    created_at: datetime

    model_config = {"from_attributes": True}
