"""
Entry API endpoints.

The API layer is thin: it maps service errors to status codes
and delegates everything else to EntryService.
"""

import uuid

from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from sales_ledger.models.base import get_db
from sales_ledger.services.entry_service import EntryService, EntryNotFound
from sales_ledger.services.report_service import ReportService
from sales_ledger.schemas.entry import (
    EntryCreate,
    EntryUpdate,
    EntryResponse,
    SettlementUpdate,
)

router = APIRouter(prefix="/entries", tags=["Entries"])


@router.post("", response_model=EntryResponse, status_code=201)
def create_entry(
    request: EntryCreate,
    db: Session = Depends(get_db),
):
    """Record a new sales or cost entry."""
    service = EntryService(db)
    try:
        entry = service.create_entry(request)
        db.commit()
        return entry
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.get("", response_model=list[EntryResponse])
def list_entries(db: Session = Depends(get_db)):
    """All entries, newest transaction date first."""
    return EntryService(db).list_entries()


@router.get("/customers", response_model=list[str])
def list_customers(db: Session = Depends(get_db)):
    """Customer names available to the report's customer filter."""
    return ReportService(db).customer_options()


@router.get("/{entry_id}", response_model=EntryResponse)
def get_entry(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    try:
        return EntryService(db).get_entry(entry_id)
    except EntryNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{entry_id}", response_model=EntryResponse)
def update_entry(
    entry_id: uuid.UUID,
    request: EntryUpdate,
    db: Session = Depends(get_db),
):
    """Replace an entry's editable fields."""
    service = EntryService(db)
    try:
        entry = service.update_entry(entry_id, request)
        db.commit()
        return entry
    except EntryNotFound as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        db.rollback()
        raise HTTPException(status_code=400, detail=str(e))


@router.patch("/{entry_id}/settlement", response_model=EntryResponse)
def update_settlement(
    entry_id: uuid.UUID,
    request: SettlementUpdate,
    db: Session = Depends(get_db),
):
    """
    Mark a deposit (sales) or payment (cost) as completed or pending.
    """
    service = EntryService(db)
    try:
        entry = service.set_settlement(entry_id, request.status)
        db.commit()
        return entry
    except EntryNotFound as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{entry_id}", status_code=204)
def delete_entry(
    entry_id: uuid.UUID,
    db: Session = Depends(get_db),
):
    service = EntryService(db)
    try:
        service.delete_entry(entry_id)
        db.commit()
    except EntryNotFound as e:
        db.rollback()
        raise HTTPException(status_code=404, detail=str(e))
    return Response(status_code=204)
