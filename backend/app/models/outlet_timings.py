from sqlalchemy import Boolean, Column, DateTime, String
from sqlalchemy.sql import func

from app.core.database import Base

TIMING_DAYS = ("monday", "tuesday", "wednesday", "thursday", "friday", "saturday", "sunday")


class OutletTimings(Base):
    """Store-settings opening hours; one row per store, one open/close pair per day."""

    __tablename__ = "outlet_operating_hours"

    id = Column(String(36), primary_key=True, index=True)
    store_id = Column(String(64), unique=True, index=True, nullable=False)
    monday_open = Column(String(8), nullable=True)
    monday_close = Column(String(8), nullable=True)
    tuesday_open = Column(String(8), nullable=True)
    tuesday_close = Column(String(8), nullable=True)
    wednesday_open = Column(String(8), nullable=True)
    wednesday_close = Column(String(8), nullable=True)
    thursday_open = Column(String(8), nullable=True)
    thursday_close = Column(String(8), nullable=True)
    friday_open = Column(String(8), nullable=True)
    friday_close = Column(String(8), nullable=True)
    saturday_open = Column(String(8), nullable=True)
    saturday_close = Column(String(8), nullable=True)
    sunday_open = Column(String(8), nullable=True)
    sunday_close = Column(String(8), nullable=True)
    same_for_all = Column(Boolean, default=False, nullable=False)
    force_24_hours = Column(Boolean, default=False, nullable=False)
    closed_day = Column(String(16), nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
