import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.core.deps import get_db
from app.models.area_manager import AreaManager
from app.schemas.area_manager import AreaManagerCreate, AreaManagerResponse, AreaManagerUpdate

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_manager_or_404(db: Session, manager_id: str) -> AreaManager:
    manager = db.query(AreaManager).filter(AreaManager.id == manager_id).first()
    if not manager:
        raise HTTPException(status_code=404, detail="Area manager not found")
    return manager


@router.get("", response_model=list[AreaManagerResponse])
def list_area_managers(db: Session = Depends(get_db)):
    return db.query(AreaManager).order_by(AreaManager.created_at.desc()).all()


@router.post("", response_model=AreaManagerResponse)
def create_area_manager(body: AreaManagerCreate, db: Session = Depends(get_db)):
    name = body.name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="Name is required")
    manager = AreaManager(
        id=str(uuid.uuid4()),
        name=name,
        email=body.email,
        phone=body.phone or body.mobile,
        region=body.region,
        status=body.status,
    )
    db.add(manager)
    db.commit()
    db.refresh(manager)
    logger.info("Created area manager %s", manager.id)
    return manager


@router.patch("/{manager_id}", response_model=AreaManagerResponse)
def update_area_manager(manager_id: str, body: AreaManagerUpdate, db: Session = Depends(get_db)):
    manager = _get_manager_or_404(db, manager_id)
    for field, value in body.model_dump(exclude_unset=True).items():
        setattr(manager, field, value)
    db.commit()
    db.refresh(manager)
    return manager


@router.delete("/{manager_id}")
def delete_area_manager(manager_id: str, db: Session = Depends(get_db)):
    manager = _get_manager_or_404(db, manager_id)
    db.delete(manager)
    db.commit()
    return {"success": True}
