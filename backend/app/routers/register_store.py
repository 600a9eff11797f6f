import logging
import uuid
from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.deps import get_db
from app.models.merchant_store import ApprovalStatus, MerchantStore, StoreStatus
from app.models.parent_merchant import ParentMerchant
from app.models.store_document import StoreDocument
from app.models.store_registration_progress import StoreRegistrationProgress
from app.schemas.store import RegisterStoreResponse, RegisterStoreSubmit
from app.services.audit import log_audit
from app.services.identifiers import next_sequential_id
from app.services.registration import TOTAL_STEPS, build_operating_hours, document_rows

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=RegisterStoreResponse)
def register_store(body: RegisterStoreSubmit, db: Session = Depends(get_db)):
    """
    Final step of the store wizard: insert the store, its weekly hours and uploaded documents,
    then drop the parent's saved progress. Always inserts a new store.
    """
    parent_pk = body.parentInfo.id if body.parentInfo else None
    parent_merchant_id = (body.parentInfo.parent_merchant_id if body.parentInfo else None) or body.step1.parent_merchant_id
    if not parent_pk or not parent_merchant_id:
        raise HTTPException(status_code=400, detail="Parent info missing")

    parent = db.query(ParentMerchant).filter(ParentMerchant.id == parent_pk).first()
    if not parent:
        raise HTTPException(status_code=404, detail="Parent merchant not found")

    step1, step2, setup = body.step1, body.step2, body.storeSetup
    try:
        store_id = next_sequential_id(db, MerchantStore.store_id, settings.STORE_ID_PREFIX)
        store = MerchantStore(
            id=str(uuid.uuid4()),
            store_id=store_id,
            parent_id=parent.id,
            store_name=step1.store_name,
            store_display_name=step1.store_display_name,
            store_description=step1.store_description,
            store_email=step1.store_email,
            store_phones=[p for p in step1.store_phones if p.strip()],
            full_address=step2.full_address,
            landmark=step2.landmark,
            city=step2.city,
            state=step2.state,
            postal_code=step2.postal_code,
            country=step2.country,
            latitude=step2.latitude,
            longitude=step2.longitude,
            logo_url=body.logoUrl,
            banner_url=body.bannerUrl,
            gallery_images=body.galleryUrls,
            cuisine_types=[c for c in setup.cuisine_types if c.strip()],
            food_categories=setup.food_categories,
            avg_preparation_time_minutes=setup.avg_preparation_time_minutes,
            min_order_amount=Decimal(str(setup.min_order_amount)) if setup.min_order_amount is not None else None,
            delivery_radius_km=setup.delivery_radius_km,
            is_pure_veg=setup.is_pure_veg,
            accepts_online_payment=setup.accepts_online_payment,
            accepts_cash=setup.accepts_cash,
            **body.legal.model_dump(),
            **body.bank.model_dump(),
            status=StoreStatus.PENDING.value,
            approval_status=ApprovalStatus.SUBMITTED.value,
            is_active=True,
            current_step=TOTAL_STEPS,
        )
        db.add(store)
        db.flush()

        db.add_all(build_operating_hours(store.id, setup.store_hours))
        for row in document_rows(body.documentUrls):
            db.add(StoreDocument(id=str(uuid.uuid4()), store_id=store.id, **row))

        db.query(StoreRegistrationProgress).filter(StoreRegistrationProgress.parent_id == parent.id).delete()
        log_audit(
            db,
            entity_type="merchant_store",
            entity_id=store_id,
            action="create",
            new_data={"parent_merchant_id": parent_merchant_id, "store_name": step1.store_name},
        )
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.exception("Store registration failed for parent %s", parent_merchant_id)
        raise HTTPException(status_code=500, detail=str(e.orig) if getattr(e, "orig", None) else "Registration failed")

    logger.info("Registered store %s for parent %s", store_id, parent_merchant_id)
    return RegisterStoreResponse(storeId=store_id)
