import enum

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from app.core.database import Base, utcnow


class DocumentType(str, enum.Enum):
    PAN = "PAN"
    GST = "GST"
    AADHAAR = "AADHAAR"
    FSSAI = "FSSAI"
    PHARMACIST_CERTIFICATE = "PHARMACIST_CERTIFICATE"
    PHARMACY_COUNCIL_REGISTRATION = "PHARMACY_COUNCIL_REGISTRATION"
    DRUG_LICENSE = "DRUG_LICENSE"
    SHOP_ESTABLISHMENT = "SHOP_ESTABLISHMENT"
    TRADE_LICENSE = "TRADE_LICENSE"
    UDYAM = "UDYAM"
    OTHER = "OTHER"


class StoreDocument(Base):
    __tablename__ = "merchant_store_documents"

    id = Column(String(36), primary_key=True, index=True)
    store_id = Column(String(36), ForeignKey("merchant_store.id", ondelete="CASCADE"), nullable=False, index=True)
    # Usually a DocumentType value; unmapped upload keys are stored as sent
    document_type = Column(String(64), nullable=False)
    document_url = Column(String(2048), nullable=False)  # signed URL returned by the upload endpoint
    document_name = Column(String(255), nullable=True)
    is_verified = Column(Boolean, default=False, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())

    store = relationship("MerchantStore", back_populates="documents")
