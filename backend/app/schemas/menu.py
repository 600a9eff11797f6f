from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AddonInput(BaseModel):
    addon_name: str
    addon_price: float = 0


class CustomizationInput(BaseModel):
    title: str
    required: bool = False
    max_selection: int = Field(1, ge=1)
    addons: list[AddonInput] = []


class MenuItemSubmit(BaseModel):
    item_name: str = Field(..., min_length=1)
    description: Optional[str] = ""
    category_type: Optional[str] = None
    food_category_item: Optional[str] = None
    image_url: Optional[str] = None
    actual_price: float = Field(..., ge=0)
    offer_price: Optional[float] = None
    offer_percent: Optional[float] = 0
    in_stock: bool = True
    customizations: list[CustomizationInput] = []


class StockUpdate(BaseModel):
    in_stock: bool


class AddonResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    addon_name: str
    addon_price: float


class CustomizationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    required: bool
    max_selection: int
    addons: list[AddonResponse] = []


class MenuItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    item_id: str
    store_id: str
    item_name: str
    description: Optional[str] = None
    category_type: Optional[str] = None
    food_category_item: Optional[str] = None
    image_url: Optional[str] = None
    actual_price: float
    offer_price: Optional[float] = None
    offer_percent: Optional[float] = None
    in_stock: bool
    has_customization: bool
    has_addons: bool
    is_active: bool
    customizations: list[CustomizationResponse] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ImageUploadStatus(BaseModel):
    totalUsed: int
    tier1Used: int
    tier1Remaining: int
    tier1Limit: int
    tier2Used: int
    tier2Remaining: int
    tier2Limit: int
    canAccessTier2: bool
    totalFreeAvailable: int
    totalFreeUsed: int
    isPaid: bool
    paidCount: int
    pricePerImage: float
