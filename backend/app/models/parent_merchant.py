import enum

from sqlalchemy import Column, String, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class MerchantType(str, enum.Enum):
    LOCAL = "LOCAL"
    BRAND = "BRAND"


class ParentMerchant(Base):
    __tablename__ = "merchant_parent"

    id = Column(String(36), primary_key=True, index=True)
    parent_merchant_id = Column(String(32), unique=True, index=True, nullable=False)  # GMMP1001, GMMP1002, ...
    parent_store_name = Column(String(255), nullable=False)
    registered_phone = Column(String(32), unique=True, index=True, nullable=False)
    merchant_type = Column(Enum(MerchantType), nullable=False)
    owner_name = Column(String(255), nullable=True)
    owner_email = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationships
    stores = relationship("MerchantStore", back_populates="parent")
