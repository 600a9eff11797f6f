from sqlalchemy import Column, DateTime, String
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class AreaManager(Base):
    __tablename__ = "area_managers"

    id = Column(String(36), primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    phone = Column(String(32), nullable=True, index=True)
    region = Column(String(128), nullable=True)
    status = Column(String(16), default="active", nullable=False)  # active, inactive
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
