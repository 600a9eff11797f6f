import logging
from datetime import date, datetime, time
from typing import Literal, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import String, cast
from sqlalchemy.orm import Query as OrmQuery, Session

from app.core.deps import get_db
from app.models.merchant_store import ApprovalStatus, MerchantStore
from app.models.store_document import StoreDocument
from app.models.store_operating_hours import WEEK_DAYS, StoreOperatingHours
from app.schemas.store import (
    OperatingHoursResponse,
    StoreCounts,
    StoreDocumentResponse,
    StoreResponse,
    StoreUpdate,
)
from app.services.audit import log_audit

logger = logging.getLogger(__name__)

router = APIRouter()

REVIEWED_STATUSES = (ApprovalStatus.APPROVED.value, ApprovalStatus.REJECTED.value)


def _created_between(q: OrmQuery, from_date: Optional[date], to_date: Optional[date]) -> OrmQuery:
    """Whole-day window on created_at (from 00:00:00 to 23:59:59)."""
    if from_date:
        q = q.filter(MerchantStore.created_at >= datetime.combine(from_date, time(0, 0, 0)))
    if to_date:
        q = q.filter(MerchantStore.created_at <= datetime.combine(to_date, time(23, 59, 59)))
    return q


def get_store_or_404(db: Session, store_id: str) -> MerchantStore:
    store = db.query(MerchantStore).filter(MerchantStore.store_id == store_id).first()
    if not store:
        raise HTTPException(status_code=404, detail="Store not found")
    return store


@router.get("", response_model=list[StoreResponse])
def list_stores(
    parent_id: Optional[str] = Query(None, description="Only stores of this parent merchant"),
    db: Session = Depends(get_db),
):
    """All stores, newest first. With parent_id, the child stores of one parent."""
    q = db.query(MerchantStore)
    if parent_id:
        q = q.filter(MerchantStore.parent_id == parent_id)
    return q.order_by(MerchantStore.created_at.desc()).all()


@router.get("/search", response_model=list[StoreResponse])
def search_stores(
    q: str = Query(..., min_length=1),
    type: Literal["mx_id", "mobile"] = Query("mx_id"),
    db: Session = Depends(get_db),
):
    """
    Search by MX id (case-insensitive substring of store_id) or by mobile
    (exact entry in store_phones).
    """
    term = q.strip()
    if type == "mx_id":
        return db.query(MerchantStore).filter(MerchantStore.store_id.ilike(f"%{term}%")).all()
    # JSON containment differs per database; narrow in SQL, then match exactly
    candidates = db.query(MerchantStore).filter(cast(MerchantStore.store_phones, String).ilike(f"%{term}%")).all()
    return [s for s in candidates if term in (s.store_phones or [])]


@router.get("/managed", response_model=list[StoreResponse])
def list_managed_stores(
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    """Stores that have been reviewed (approved or rejected), newest first."""
    q = db.query(MerchantStore).filter(MerchantStore.approval_status.in_(REVIEWED_STATUSES))
    q = _created_between(q, from_date, to_date)
    return q.order_by(MerchantStore.created_at.desc()).all()


@router.get("/counts", response_model=StoreCounts)
def store_counts(
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    """Dashboard tiles. Anything not approved or rejected counts as pending."""
    q = _created_between(db.query(MerchantStore.approval_status), from_date, to_date)
    total = pending = verified = rejected = 0
    for (status,) in q.all():
        total += 1
        if status == ApprovalStatus.APPROVED.value:
            verified += 1
        elif status == ApprovalStatus.REJECTED.value:
            rejected += 1
        else:
            pending += 1
    return StoreCounts(total=total, pending=pending, verified=verified, rejected=rejected)


@router.get("/by-manager", response_model=list[StoreResponse])
def stores_by_manager(
    am_mobile: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    return db.query(MerchantStore).filter(MerchantStore.am_mobile == am_mobile.strip()).all()


@router.get("/{store_id}", response_model=StoreResponse)
def get_store(store_id: str, db: Session = Depends(get_db)):
    return get_store_or_404(db, store_id)


@router.patch("/{store_id}", response_model=StoreResponse)
def update_store(store_id: str, body: StoreUpdate, db: Session = Depends(get_db)):
    """Profile and store-settings edits; only fields present in the body are written."""
    store = get_store_or_404(db, store_id)
    updates = body.model_dump(exclude_unset=True)
    old = {k: getattr(store, k) for k in updates}
    for field, value in updates.items():
        setattr(store, field, value)
    log_audit(db, entity_type="merchant_store", entity_id=store.store_id, action="update", old_data=old, new_data=updates)
    db.commit()
    db.refresh(store)
    logger.info("Updated store %s fields=%s", store_id, sorted(updates))
    return store


@router.get("/{store_id}/documents", response_model=list[StoreDocumentResponse])
def list_store_documents(store_id: str, db: Session = Depends(get_db)):
    store = get_store_or_404(db, store_id)
    return (
        db.query(StoreDocument)
        .filter(StoreDocument.store_id == store.id)
        .order_by(StoreDocument.created_at.desc())
        .all()
    )


@router.get("/{store_id}/operating-hours", response_model=list[OperatingHoursResponse])
def list_store_operating_hours(store_id: str, db: Session = Depends(get_db)):
    store = get_store_or_404(db, store_id)
    rows = db.query(StoreOperatingHours).filter(StoreOperatingHours.store_id == store.id).all()
    order = {d.value: i for i, d in enumerate(WEEK_DAYS)}
    return sorted(rows, key=lambda r: order.get(r.day_of_week, len(order)))
