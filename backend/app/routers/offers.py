import logging
import uuid
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.core.errors import first_validation_message
from app.models.offer import Offer
from app.schemas.offer import OfferCreate, OfferResponse, OfferUpdate

logger = logging.getLogger(__name__)

router = APIRouter()

MONEY_FIELDS = ("discount_value", "min_order_amount")


def _clean(values: dict) -> dict:
    """Drop empty values (None, blank strings) and convert money fields to Decimal."""
    out = {}
    for k, v in values.items():
        if v is None or (isinstance(v, str) and not v.strip()):
            continue
        out[k] = Decimal(str(v)) if k in MONEY_FIELDS else v
    return out


def _get_offer_or_404(db: Session, offer_id: str) -> Offer:
    offer = db.query(Offer).filter(Offer.id == offer_id).first()
    if not offer:
        raise HTTPException(status_code=404, detail="Offer not found")
    return offer


@router.get("/stores/{store_id}/offers", response_model=list[OfferResponse])
def list_offers(store_id: str, db: Session = Depends(get_db)):
    return db.query(Offer).filter(Offer.store_id == store_id).order_by(Offer.created_at.desc()).all()


@router.post("/stores/{store_id}/offers", response_model=OfferResponse)
def create_offer(store_id: str, body: OfferCreate, db: Session = Depends(get_db)):
    """New offers always start unused."""
    values = _clean(body.model_dump())
    offer = Offer(id=str(uuid.uuid4()), store_id=store_id, usage_count=0, **values)
    db.add(offer)
    db.commit()
    db.refresh(offer)
    logger.info("Created %s offer %s for store %s", offer.offer_type.value, offer.id, store_id)
    return offer


@router.patch("/offers/{offer_id}", response_model=OfferResponse)
def update_offer(offer_id: str, body: OfferUpdate, db: Session = Depends(get_db)):
    """Partial update; the merged offer must still pass every rule a new offer does."""
    offer = _get_offer_or_404(db, offer_id)
    merged = {field: getattr(offer, field) for field in OfferCreate.model_fields}
    merged.update(_clean(body.model_dump(exclude_unset=True)))
    try:
        OfferCreate.model_validate(merged)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=first_validation_message(e))
    for field, value in merged.items():
        setattr(offer, field, value)
    db.commit()
    db.refresh(offer)
    return offer


@router.delete("/offers/{offer_id}")
def delete_offer(offer_id: str, db: Session = Depends(get_db)):
    offer = _get_offer_or_404(db, offer_id)
    db.delete(offer)
    db.commit()
    return {"success": True}
