import enum

from sqlalchemy import Boolean, Column, DateTime, Float, ForeignKey, Integer, JSON, Numeric, String, Text
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class ApprovalStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    SUBMITTED = "SUBMITTED"
    UNDER_VERIFICATION = "UNDER_VERIFICATION"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"


class StoreStatus(str, enum.Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"


class MerchantStore(Base):
    __tablename__ = "merchant_store"

    id = Column(String(36), primary_key=True, index=True)
    store_id = Column(String(64), unique=True, index=True, nullable=False)  # GMMC1001, GMMC1002, ...
    parent_id = Column(String(36), ForeignKey("merchant_parent.id"), nullable=False, index=True)
    # Step 1 basic info
    store_name = Column(String(255), nullable=False)
    store_display_name = Column(String(255), nullable=True)
    store_description = Column(Text, nullable=True)
    store_email = Column(String(255), nullable=True)
    store_phones = Column(JSON, nullable=True)  # list of phone strings
    cuisine_types = Column(JSON, nullable=True)
    food_categories = Column(JSON, nullable=True)
    full_address = Column(String(1024), nullable=True)
    landmark = Column(String(255), nullable=True)
    city = Column(String(128), nullable=True)
    state = Column(String(128), nullable=True)
    postal_code = Column(String(16), nullable=True)
    country = Column(String(64), nullable=True)
    latitude = Column(Float, nullable=True)
    longitude = Column(Float, nullable=True)
    logo_url = Column(String(2048), nullable=True)
    banner_url = Column(String(2048), nullable=True)
    gallery_images = Column(JSON, nullable=True)
    # Step 2 legal & compliance
    pan_number = Column(String(16), nullable=True)
    aadhar_number = Column(String(16), nullable=True)
    gst_number = Column(String(32), nullable=True)
    fssai_number = Column(String(32), nullable=True)
    # Step 3 bank details
    bank_account_holder = Column(String(255), nullable=True)
    bank_account_number = Column(String(32), nullable=True)
    bank_ifsc = Column(String(16), nullable=True)
    bank_name = Column(String(255), nullable=True)
    # Step 4 operations
    avg_preparation_time_minutes = Column(Integer, nullable=True)
    min_order_amount = Column(Numeric(10, 2), nullable=True)
    delivery_radius_km = Column(Float, nullable=True)
    is_pure_veg = Column(Boolean, default=False, nullable=False)
    accepts_online_payment = Column(Boolean, default=True, nullable=False)
    accepts_cash = Column(Boolean, default=False, nullable=False)
    # Area manager assigned to the store
    am_name = Column(String(255), nullable=True)
    am_mobile = Column(String(32), nullable=True, index=True)
    am_email = Column(String(255), nullable=True)
    # Review
    status = Column(String(16), default=StoreStatus.PENDING.value, nullable=False)
    approval_status = Column(String(32), default=ApprovalStatus.SUBMITTED.value, nullable=False, index=True)
    approval_reason = Column(Text, nullable=True)
    approved_by = Column(String(255), nullable=True)
    approved_by_email = Column(String(255), nullable=True)
    approved_at = Column(DateTime(timezone=True), nullable=True)
    is_active = Column(Boolean, default=True, nullable=False)
    current_step = Column(Integer, default=1, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # relationships
    parent = relationship("ParentMerchant", back_populates="stores")
    operating_hours = relationship("StoreOperatingHours", back_populates="store", cascade="all, delete-orphan")
    documents = relationship("StoreDocument", back_populates="store", cascade="all, delete-orphan")
    menu_items = relationship("MenuItem", back_populates="store", cascade="all, delete-orphan")
