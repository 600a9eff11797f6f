import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.models.outlet_timings import TIMING_DAYS, OutletTimings
from app.schemas.outlet_timings import OutletTimingsResponse, OutletTimingsSave

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("")
def save_outlet_timings(body: OutletTimingsSave, db: Session = Depends(get_db)):
    """Upsert the store-settings timings for one store (keyed on store_id)."""
    if not body.store_id:
        raise HTTPException(status_code=400, detail="store_id is required")

    values = {}
    for day in TIMING_DAYS:
        values[f"{day}_open"] = getattr(body, f"{day}_open")
        values[f"{day}_close"] = getattr(body, f"{day}_close")
    values["same_for_all"] = bool(body.same_for_all)
    values["force_24_hours"] = bool(body.force_24_hours)
    values["closed_day"] = body.closed_day or None

    row = db.query(OutletTimings).filter(OutletTimings.store_id == body.store_id).first()
    if row:
        for field, value in values.items():
            setattr(row, field, value)
    else:
        db.add(OutletTimings(id=str(uuid.uuid4()), store_id=body.store_id, **values))
    db.commit()
    logger.info("Saved outlet timings for store %s", body.store_id)
    return {"success": True}


@router.get("", response_model=OutletTimingsResponse)
def get_outlet_timings(
    store_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not store_id:
        raise HTTPException(status_code=400, detail="store_id is required")
    row = db.query(OutletTimings).filter(OutletTimings.store_id == store_id).first()
    if not row:
        raise HTTPException(status_code=404, detail="Outlet timings not found")
    return row
