from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.models.merchant_store import MerchantStore
from app.schemas.store import NextRestaurantIdResponse, StoreStatusResponse
from app.services.identifiers import numeric_suffix

router = APIRouter()

# Store ids share this prefix (GMMC...); next-restaurant-id reads the number after it
RESTAURANT_ID_PREFIX = "GMM"


@router.get("/store-status", response_model=StoreStatusResponse)
def get_store_status(
    store_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    """Approval state of one store. Clients poll this every 30 seconds, so it reads one row."""
    if not store_id:
        raise HTTPException(status_code=400, detail="Missing store_id")
    row = (
        db.query(
            MerchantStore.approval_status,
            MerchantStore.approval_reason,
            MerchantStore.is_active,
            MerchantStore.store_name,
        )
        .filter(MerchantStore.store_id == store_id)
        .first()
    )
    if not row:
        raise HTTPException(status_code=404, detail="Store not found")
    return StoreStatusResponse(
        approval_status=row.approval_status,
        approval_reason=row.approval_reason,
        is_active=row.is_active,
        store_name=row.store_name,
    )


@router.get("/next-restaurant-id", response_model=NextRestaurantIdResponse)
def next_restaurant_id(db: Session = Depends(get_db)):
    ids = db.query(MerchantStore.store_id).filter(MerchantStore.store_id.like(f"{RESTAURANT_ID_PREFIX}%")).all()
    max_id = max((numeric_suffix(sid, RESTAURANT_ID_PREFIX) for (sid,) in ids), default=0)
    return NextRestaurantIdResponse(maxId=max_id)
