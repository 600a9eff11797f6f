import logging
import uuid
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import utcnow
from app.core.deps import get_db
from app.models.food_order import OPEN_STATUSES, FoodOrder, OrderStatus
from app.schemas.order import (
    OrderCreate,
    OrderMutationResponse,
    OrderResponse,
    OrderStats,
    OrderStatusUpdate,
)
from app.services.orders import order_stats

logger = logging.getLogger(__name__)

router = APIRouter()


def _get_order_or_404(db: Session, order_id: str) -> FoodOrder:
    order = db.query(FoodOrder).filter(FoodOrder.id == order_id).first()
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")
    return order


@router.get("/stores/{store_id}/orders", response_model=list[OrderResponse])
def list_orders(
    store_id: str,
    status: Optional[OrderStatus] = Query(None),
    limit: int = Query(settings.ORDER_LIST_LIMIT, ge=1, le=500),
    from_date: Optional[date] = Query(None),
    to_date: Optional[date] = Query(None),
    db: Session = Depends(get_db),
):
    """Orders of a store, newest first."""
    q = db.query(FoodOrder).filter(FoodOrder.restaurant_id == store_id)
    if status:
        q = q.filter(FoodOrder.status == status)
    if from_date:
        q = q.filter(FoodOrder.created_at >= datetime.combine(from_date, time(0, 0, 0)))
    if to_date:
        q = q.filter(FoodOrder.created_at <= datetime.combine(to_date, time(23, 59, 59)))
    return q.order_by(FoodOrder.created_at.desc()).limit(limit).all()


@router.get("/stores/{store_id}/orders/pending", response_model=list[OrderResponse])
def list_pending_orders(store_id: str, db: Session = Depends(get_db)):
    """Orders the kitchen still has to act on, oldest first."""
    return (
        db.query(FoodOrder)
        .filter(FoodOrder.restaurant_id == store_id, FoodOrder.status.in_(OPEN_STATUSES))
        .order_by(FoodOrder.created_at.asc())
        .all()
    )


@router.get("/stores/{store_id}/orders/search", response_model=list[OrderResponse])
def search_orders(
    store_id: str,
    q: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    pattern = f"%{q.strip()}%"
    return (
        db.query(FoodOrder)
        .filter(
            FoodOrder.restaurant_id == store_id,
            or_(
                FoodOrder.order_number.ilike(pattern),
                FoodOrder.user_name.ilike(pattern),
                FoodOrder.user_phone.ilike(pattern),
            ),
        )
        .order_by(FoodOrder.created_at.desc())
        .all()
    )


@router.get("/stores/{store_id}/orders/stats", response_model=OrderStats)
def get_order_stats(store_id: str, db: Session = Depends(get_db)):
    return order_stats(db.query(FoodOrder).filter(FoodOrder.restaurant_id == store_id).all())


@router.post("/orders", response_model=OrderResponse)
def create_order(body: OrderCreate, db: Session = Depends(get_db)):
    values = body.model_dump()
    values["total_amount"] = Decimal(str(body.total_amount))
    order = FoodOrder(id=str(uuid.uuid4()), status=OrderStatus.pending, **values)
    db.add(order)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Order number already exists")
    db.refresh(order)
    logger.info("Created order %s for store %s", order.order_number, order.restaurant_id)
    return order


@router.get("/orders/{order_id}", response_model=OrderResponse)
def get_order(order_id: str, db: Session = Depends(get_db)):
    return _get_order_or_404(db, order_id)


@router.patch("/orders/{order_id}/status", response_model=OrderMutationResponse)
def update_order_status(order_id: str, body: OrderStatusUpdate, db: Session = Depends(get_db)):
    """Move an order along; confirming or delivering stamps the matching timestamp."""
    order = _get_order_or_404(db, order_id)
    order.status = body.status
    if body.status == OrderStatus.confirmed:
        order.confirmed_at = utcnow()
    elif body.status == OrderStatus.delivered:
        order.delivered_at = utcnow()
    db.commit()
    logger.info("Order %s -> %s", order.order_number, body.status.value)
    return OrderMutationResponse()


@router.post("/orders/{order_id}/cancel", response_model=OrderMutationResponse)
def cancel_order(order_id: str, db: Session = Depends(get_db)):
    order = _get_order_or_404(db, order_id)
    order.status = OrderStatus.cancelled
    db.commit()
    logger.info("Order %s cancelled", order.order_number)
    return OrderMutationResponse()
