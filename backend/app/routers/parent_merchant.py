import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.deps import get_db
from app.models.parent_merchant import ParentMerchant
from app.schemas.parent_merchant import (
    ParentMerchantCreate,
    ParentMerchantCreated,
    ParentMerchantResponse,
)
from app.services.audit import log_audit
from app.services.identifiers import next_sequential_id

logger = logging.getLogger(__name__)

router = APIRouter()

DUPLICATE_MESSAGE = "Merchant already registered"


def _audit_duplicate(db: Session, body: ParentMerchantCreate) -> None:
    log_audit(
        db,
        entity_type="merchant_parent",
        action="create_failed_duplicate_phone",
        new_data=body.model_dump(),
    )
    db.commit()


@router.post("", response_model=ParentMerchantCreated)
def create_parent_merchant(body: ParentMerchantCreate, db: Session = Depends(get_db)):
    """
    Register a parent merchant (brand/owner). Registered phone is unique; a repeat returns 409.
    """
    exists = db.query(ParentMerchant.id).filter(ParentMerchant.registered_phone == body.registered_phone).first()
    if exists:
        logger.info("Parent merchant registration rejected: phone already registered")
        _audit_duplicate(db, body)
        raise HTTPException(status_code=409, detail=DUPLICATE_MESSAGE)

    parent = ParentMerchant(
        id=str(uuid.uuid4()),
        parent_merchant_id=next_sequential_id(
            db, ParentMerchant.parent_merchant_id, settings.PARENT_MERCHANT_ID_PREFIX
        ),
        parent_store_name=body.parent_store_name,
        registered_phone=body.registered_phone,
        merchant_type=body.merchant_type,
        owner_name=body.owner_name or None,
        owner_email=body.owner_email or None,
    )
    try:
        db.add(parent)
        db.flush()
        log_audit(
            db,
            entity_type="merchant_parent",
            entity_id=parent.parent_merchant_id,
            action="create",
            new_data=body.model_dump(),
        )
        db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration of the same phone
        db.rollback()
        _audit_duplicate(db, body)
        raise HTTPException(status_code=409, detail=DUPLICATE_MESSAGE)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to insert parent merchant")
        raise HTTPException(status_code=500, detail="Failed to register merchant")

    logger.info("Registered parent merchant %s", parent.parent_merchant_id)
    return ParentMerchantCreated(id=parent.id, parent_merchant_id=parent.parent_merchant_id)


@router.get("", response_model=ParentMerchantResponse)
def find_parent_merchant(
    phone: str = Query(..., min_length=1, description="Registered phone number"),
    db: Session = Depends(get_db),
):
    """Look up a parent by registered phone so the registration page can resume."""
    parent = db.query(ParentMerchant).filter(ParentMerchant.registered_phone == phone.strip()).first()
    if not parent:
        raise HTTPException(status_code=404, detail="Parent merchant not found")
    return parent


@router.get("/{parent_id}", response_model=ParentMerchantResponse)
def get_parent_merchant(parent_id: str, db: Session = Depends(get_db)):
    """Get a parent by internal id or by parent_merchant_id (GMMP...)."""
    parent = (
        db.query(ParentMerchant)
        .filter(or_(ParentMerchant.id == parent_id, ParentMerchant.parent_merchant_id == parent_id))
        .first()
    )
    if not parent:
        raise HTTPException(status_code=404, detail="Parent merchant not found")
    return parent
