import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Integer, Numeric, String
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class OfferType(str, enum.Enum):
    ALL_ORDERS = "ALL_ORDERS"
    ITEM_LEVEL = "ITEM_LEVEL"


class DiscountType(str, enum.Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED_AMOUNT = "FIXED_AMOUNT"


class Offer(Base):
    __tablename__ = "offers"

    id = Column(String(36), primary_key=True, index=True)
    store_id = Column(String(64), nullable=False, index=True)  # merchant_store.store_id
    offer_type = Column(Enum(OfferType), nullable=False)
    discount_type = Column(Enum(DiscountType), nullable=False)
    discount_value = Column(Numeric(10, 2), nullable=False)
    item_name = Column(String(255), nullable=True)
    min_order_amount = Column(Numeric(10, 2), nullable=True)
    valid_from = Column(DateTime(timezone=True), nullable=False)
    valid_till = Column(DateTime(timezone=True), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    usage_count = Column(Integer, default=0, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
