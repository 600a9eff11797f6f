from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from app.models.offer import DiscountType, OfferType


def as_utc(value: datetime) -> datetime:
    """Aware UTC datetime; naive values (SQLite, clients without an offset) are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class OfferCreate(BaseModel):
    offer_type: OfferType
    discount_type: DiscountType
    discount_value: float = Field(..., gt=0)
    item_name: Optional[str] = None
    min_order_amount: Optional[float] = None
    valid_from: datetime
    valid_till: datetime
    is_active: bool = True

    @model_validator(mode="after")
    def check_offer(self):
        if as_utc(self.valid_till) < as_utc(self.valid_from):
            raise ValueError("valid_till must be after valid_from")
        if self.offer_type == OfferType.ITEM_LEVEL and not (self.item_name or "").strip():
            raise ValueError("item_name is required for item level offers")
        if self.discount_type == DiscountType.PERCENTAGE and self.discount_value > 100:
            raise ValueError("Percentage discount cannot exceed 100")
        return self


class OfferUpdate(BaseModel):
    offer_type: Optional[OfferType] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[float] = Field(None, gt=0)
    item_name: Optional[str] = None
    min_order_amount: Optional[float] = None
    valid_from: Optional[datetime] = None
    valid_till: Optional[datetime] = None
    is_active: Optional[bool] = None


class OfferResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    store_id: str
    offer_type: OfferType
    discount_type: DiscountType
    discount_value: float
    item_name: Optional[str] = None
    min_order_amount: Optional[float] = None
    valid_from: datetime
    valid_till: datetime
    is_active: bool
    usage_count: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
