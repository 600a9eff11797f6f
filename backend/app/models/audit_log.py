from sqlalchemy import Column, String, DateTime, JSON
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class AuditLog(Base):
    __tablename__ = "audit_log"

    id = Column(String(36), primary_key=True, index=True)
    entity_type = Column(String(50), nullable=False, index=True)  # merchant_parent, merchant_store, ...
    entity_id = Column(String(64), nullable=True, index=True)
    action = Column(String(100), nullable=False, index=True)
    old_data = Column(JSON, nullable=True)
    new_data = Column(JSON, nullable=True)
    performed_by = Column(String(255), nullable=True)
    performed_by_email = Column(String(255), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
