import enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base


class DayOfWeek(str, enum.Enum):
    MONDAY = "MONDAY"
    TUESDAY = "TUESDAY"
    WEDNESDAY = "WEDNESDAY"
    THURSDAY = "THURSDAY"
    FRIDAY = "FRIDAY"
    SATURDAY = "SATURDAY"
    SUNDAY = "SUNDAY"


# Week order; the day column sorts alphabetically otherwise
WEEK_DAYS = list(DayOfWeek)


class StoreOperatingHours(Base):
    __tablename__ = "merchant_store_operating_hours"

    id = Column(String(36), primary_key=True, index=True)
    store_id = Column(String(36), ForeignKey("merchant_store.id", ondelete="CASCADE"), nullable=False, index=True)
    day_of_week = Column(String(16), nullable=False)
    is_open = Column(Boolean, default=False, nullable=False)
    slot1_start = Column(String(8), nullable=True)  # HH:MM
    slot1_end = Column(String(8), nullable=True)
    slot2_start = Column(String(8), nullable=True)
    slot2_end = Column(String(8), nullable=True)
    total_duration_minutes = Column(Integer, nullable=True)
    is_24_hours = Column(Boolean, default=False, nullable=False)
    same_for_all_days = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    store = relationship("MerchantStore", back_populates="operating_hours")
