import enum

from sqlalchemy import Column, DateTime, Enum, Float, JSON, Numeric, String, Text
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class OrderStatus(str, enum.Enum):
    pending = "pending"
    confirmed = "confirmed"
    preparing = "preparing"
    ready = "ready"
    out_for_delivery = "out_for_delivery"
    delivered = "delivered"
    cancelled = "cancelled"


# Orders the kitchen still has to act on
OPEN_STATUSES = (OrderStatus.pending, OrderStatus.confirmed, OrderStatus.preparing)


class FoodOrder(Base):
    __tablename__ = "food_orders"

    id = Column(String(36), primary_key=True, index=True)
    order_number = Column(String(64), unique=True, index=True, nullable=False)
    restaurant_id = Column(String(64), nullable=False, index=True)  # merchant_store.store_id
    restaurant_name = Column(String(255), nullable=True)
    user_name = Column(String(255), nullable=True)
    user_phone = Column(String(32), nullable=True)
    delivery_address = Column(Text, nullable=True)
    items = Column(JSON, nullable=True)
    total_amount = Column(Numeric(10, 2), default=0, nullable=False)
    payment_method = Column(String(32), nullable=True)
    status = Column(Enum(OrderStatus), default=OrderStatus.pending, nullable=False, index=True)
    rating = Column(Float, nullable=True)
    special_instructions = Column(Text, nullable=True)
    confirmed_at = Column(DateTime(timezone=True), nullable=True)
    delivered_at = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
