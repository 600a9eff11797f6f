import logging
import uuid
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from app.core.database import utcnow
from app.core.deps import get_db
from app.models.parent_merchant import ParentMerchant
from app.models.store_registration_progress import StoreRegistrationProgress
from app.schemas.progress import (
    ProgressDeleteResponse,
    ProgressFetchResponse,
    ProgressRecord,
    ProgressSave,
    ProgressSaveResponse,
    StepValidateResponse,
    StepValidateSubmit,
)
from app.services.registration import validate_step

logger = logging.getLogger(__name__)

router = APIRouter()


def _require_parent_id(parent_id: Optional[str]) -> str:
    if not parent_id:
        raise HTTPException(status_code=400, detail="Missing parent_id parameter")
    return parent_id


@router.post("", response_model=ProgressSaveResponse)
def save_progress(body: ProgressSave, db: Session = Depends(get_db)):
    """
    Save wizard progress for a parent. form_data is merged over what was saved before,
    so each step only needs to send its own fields.
    """
    if not body.parent_id or not body.step:
        raise HTTPException(status_code=400, detail="Missing required fields")
    if not db.query(ParentMerchant.id).filter(ParentMerchant.id == body.parent_id).first():
        raise HTTPException(status_code=404, detail="Parent merchant not found")

    record = (
        db.query(StoreRegistrationProgress)
        .filter(StoreRegistrationProgress.parent_id == body.parent_id)
        .first()
    )
    if record:
        merged = dict(record.form_data or {})
        merged.update(body.form_data)
        record.step = body.step
        record.completed_steps = body.completed_steps or 0
        # Reassign so the JSON column is flagged dirty
        record.form_data = merged
        record.updated_at = utcnow()
    else:
        record = StoreRegistrationProgress(
            id=str(uuid.uuid4()),
            parent_id=body.parent_id,
            step=body.step,
            completed_steps=body.completed_steps or 0,
            form_data=dict(body.form_data),
        )
        db.add(record)
    db.commit()
    db.refresh(record)
    logger.info("Saved registration progress for parent %s at step %s", body.parent_id, body.step)
    return ProgressSaveResponse(data=ProgressRecord.model_validate(record))


@router.get("", response_model=ProgressFetchResponse)
def get_progress(
    parent_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    parent_id = _require_parent_id(parent_id)
    record = (
        db.query(StoreRegistrationProgress)
        .filter(StoreRegistrationProgress.parent_id == parent_id)
        .first()
    )
    if not record:
        return ProgressFetchResponse(found=False, completed_steps=0)
    return ProgressFetchResponse(
        found=True,
        completed_steps=record.completed_steps or 0,
        form_data=record.form_data or {},
        store_id=record.store_id,
    )


@router.delete("", response_model=ProgressDeleteResponse)
def delete_progress(
    parent_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    parent_id = _require_parent_id(parent_id)
    db.query(StoreRegistrationProgress).filter(StoreRegistrationProgress.parent_id == parent_id).delete()
    db.commit()
    return ProgressDeleteResponse()


@router.post("/validate", response_model=StepValidateResponse)
def validate_progress_step(body: StepValidateSubmit):
    """Check whether the wizard may leave the given step with this form data."""
    error = validate_step(body.step, body.form_data)
    return StepValidateResponse(valid=error is None, error=error)
