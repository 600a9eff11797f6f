import logging
import uuid
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, selectinload

from app.core.config import settings
from app.core.deps import get_db
from app.models.menu_item import ItemCustomization, MenuItem
from app.models.merchant_store import MerchantStore
from app.schemas.menu import ImageUploadStatus, MenuItemResponse, MenuItemSubmit, StockUpdate
from app.services.identifiers import next_sequential_id
from app.services.menu import build_customizations, customization_flags, image_upload_status

logger = logging.getLogger(__name__)

router = APIRouter()


def _money(value: Optional[float]) -> Optional[Decimal]:
    return Decimal(str(value)) if value is not None else None


def _apply_submit(item: MenuItem, body: MenuItemSubmit) -> None:
    item.item_name = body.item_name.strip()
    item.description = body.description or ""
    item.category_type = body.category_type
    item.food_category_item = body.food_category_item
    item.image_url = body.image_url or None
    item.actual_price = _money(body.actual_price)
    item.offer_price = _money(body.offer_price)
    item.offer_percent = _money(body.offer_percent or 0)
    item.in_stock = body.in_stock
    item.has_customization, item.has_addons = customization_flags(body.customizations)
    build_customizations(item, body.customizations)


def _store_pk(db: Session, store_id: str) -> Optional[str]:
    row = db.query(MerchantStore.id).filter(MerchantStore.store_id == store_id).first()
    return row.id if row else None


def _get_item_or_404(db: Session, item_id: str) -> MenuItem:
    item = db.query(MenuItem).filter(MenuItem.item_id == item_id.strip()).first()
    if not item:
        raise HTTPException(status_code=404, detail="Item not found")
    return item


@router.get("/stores/{store_id}/menu-items", response_model=list[MenuItemResponse])
def list_menu_items(store_id: str, db: Session = Depends(get_db)):
    """Active items of a store with their customizations and addons, newest first."""
    store_pk = _store_pk(db, store_id)
    if not store_pk:
        return []
    return (
        db.query(MenuItem)
        .options(selectinload(MenuItem.customizations).selectinload(ItemCustomization.addons))
        .filter(MenuItem.store_id == store_pk, MenuItem.is_active.is_(True))
        .order_by(MenuItem.created_at.desc())
        .limit(settings.MENU_LIST_LIMIT)
        .all()
    )


@router.post("/stores/{store_id}/menu-items", response_model=MenuItemResponse)
def create_menu_item(store_id: str, body: MenuItemSubmit, db: Session = Depends(get_db)):
    store_pk = _store_pk(db, store_id)
    if not store_pk:
        raise HTTPException(status_code=404, detail="Store not found")
    item = MenuItem(
        id=str(uuid.uuid4()),
        item_id=next_sequential_id(db, MenuItem.item_id, settings.MENU_ITEM_ID_PREFIX),
        store_id=store_pk,
        is_active=True,
    )
    _apply_submit(item, body)
    db.add(item)
    db.commit()
    db.refresh(item)
    logger.info("Created menu item %s for store %s", item.item_id, store_id)
    return item


@router.put("/menu-items/{item_id}", response_model=MenuItemResponse)
def replace_menu_item(item_id: str, body: MenuItemSubmit, db: Session = Depends(get_db)):
    """Replace the item's fields and its whole customization tree."""
    item = _get_item_or_404(db, item_id)
    _apply_submit(item, body)
    db.commit()
    db.refresh(item)
    return item


@router.patch("/menu-items/{item_id}/stock", response_model=MenuItemResponse)
def update_stock(item_id: str, body: StockUpdate, db: Session = Depends(get_db)):
    item = _get_item_or_404(db, item_id)
    item.in_stock = body.in_stock
    db.commit()
    db.refresh(item)
    return item


@router.delete("/menu-items/{item_id}")
def delete_menu_item(item_id: str, db: Session = Depends(get_db)):
    item = _get_item_or_404(db, item_id)
    db.delete(item)
    db.commit()
    logger.info("Deleted menu item %s", item.item_id)
    return {"success": True}


@router.get("/stores/{store_id}/image-upload-status", response_model=ImageUploadStatus)
def get_image_upload_status(store_id: str, db: Session = Depends(get_db)):
    """Free image quota for menu photos: items with an image count against it."""
    store_pk = _store_pk(db, store_id)
    count = 0
    if store_pk:
        count = (
            db.query(MenuItem)
            .filter(MenuItem.store_id == store_pk, MenuItem.image_url.isnot(None), MenuItem.image_url != "")
            .count()
        )
    return image_upload_status(count)
