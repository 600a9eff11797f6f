from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, String
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class StoreRegistrationProgress(Base):
    """Saved wizard state so a parent merchant can resume store registration later."""

    __tablename__ = "store_registration_progress"

    id = Column(String(36), primary_key=True, index=True)
    parent_id = Column(String(36), ForeignKey("merchant_parent.id"), nullable=False, unique=True, index=True)
    step = Column(Integer, nullable=False)
    completed_steps = Column(Integer, default=0, nullable=False)
    form_data = Column(JSON, nullable=True)
    store_id = Column(String(64), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)
