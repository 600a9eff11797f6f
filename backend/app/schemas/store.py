from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


# --- Register store (final wizard submit) ---


class StoreStep1(BaseModel):
    parent_merchant_id: Optional[str] = None
    store_name: str
    store_display_name: Optional[str] = None
    store_description: Optional[str] = None
    store_email: Optional[str] = None
    store_phones: list[str] = []


class StoreStep2(BaseModel):
    full_address: Optional[str] = None
    landmark: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None


class DayHours(BaseModel):
    open: Optional[str] = ""
    close: Optional[str] = ""


class StoreSetup(BaseModel):
    cuisine_types: list[str] = []
    food_categories: list[str] = []
    avg_preparation_time_minutes: Optional[int] = None
    min_order_amount: Optional[float] = None
    delivery_radius_km: Optional[float] = None
    is_pure_veg: bool = False
    accepts_online_payment: bool = True
    accepts_cash: bool = False
    store_hours: dict[str, DayHours] = {}  # keyed by lowercase day name


class StoreLegal(BaseModel):
    pan_number: Optional[str] = None
    aadhar_number: Optional[str] = None
    gst_number: Optional[str] = None
    fssai_number: Optional[str] = None


class StoreBank(BaseModel):
    bank_account_holder: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_ifsc: Optional[str] = None
    bank_name: Optional[str] = None


class UploadedDocument(BaseModel):
    type: str
    url: str
    name: Optional[str] = None


class ParentInfo(BaseModel):
    id: Optional[str] = None
    parent_merchant_id: Optional[str] = None


class RegisterStoreSubmit(BaseModel):
    step1: StoreStep1
    step2: StoreStep2 = StoreStep2()
    storeSetup: StoreSetup = StoreSetup()
    documents: Optional[dict[str, Any]] = None
    logoUrl: Optional[str] = None
    bannerUrl: Optional[str] = None
    galleryUrls: list[str] = []
    documentUrls: list[UploadedDocument] = []
    parentInfo: Optional[ParentInfo] = None
    legal: StoreLegal = StoreLegal()
    bank: StoreBank = StoreBank()


class RegisterStoreResponse(BaseModel):
    success: bool = True
    storeId: str


# --- Store reads ---


class StoreStatusResponse(BaseModel):
    approval_status: Optional[str] = None
    approval_reason: Optional[str] = None
    is_active: Optional[bool] = None
    store_name: Optional[str] = None


class StoreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    store_id: str
    parent_id: str
    store_name: str
    store_display_name: Optional[str] = None
    store_description: Optional[str] = None
    store_email: Optional[str] = None
    store_phones: Optional[list[str]] = None
    cuisine_types: Optional[list[str]] = None
    food_categories: Optional[list[str]] = None
    full_address: Optional[str] = None
    landmark: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    logo_url: Optional[str] = None
    banner_url: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    avg_preparation_time_minutes: Optional[int] = None
    min_order_amount: Optional[float] = None
    delivery_radius_km: Optional[float] = None
    is_pure_veg: bool = False
    accepts_online_payment: bool = True
    accepts_cash: bool = False
    pan_number: Optional[str] = None
    aadhar_number: Optional[str] = None
    gst_number: Optional[str] = None
    fssai_number: Optional[str] = None
    bank_account_holder: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_ifsc: Optional[str] = None
    bank_name: Optional[str] = None
    am_name: Optional[str] = None
    am_mobile: Optional[str] = None
    am_email: Optional[str] = None
    status: str
    approval_status: str
    approval_reason: Optional[str] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    is_active: bool
    current_step: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class StoreUpdate(BaseModel):
    """Profile / store-settings edits. Only fields sent are written."""

    store_name: Optional[str] = None
    store_display_name: Optional[str] = None
    store_description: Optional[str] = None
    store_email: Optional[str] = None
    store_phones: Optional[list[str]] = None
    cuisine_types: Optional[list[str]] = None
    food_categories: Optional[list[str]] = None
    full_address: Optional[str] = None
    landmark: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    logo_url: Optional[str] = None
    banner_url: Optional[str] = None
    gallery_images: Optional[list[str]] = None
    avg_preparation_time_minutes: Optional[int] = None
    min_order_amount: Optional[float] = None
    delivery_radius_km: Optional[float] = None
    is_pure_veg: Optional[bool] = None
    accepts_online_payment: Optional[bool] = None
    accepts_cash: Optional[bool] = None
    pan_number: Optional[str] = None
    aadhar_number: Optional[str] = None
    gst_number: Optional[str] = None
    fssai_number: Optional[str] = None
    bank_account_holder: Optional[str] = None
    bank_account_number: Optional[str] = None
    bank_ifsc: Optional[str] = None
    bank_name: Optional[str] = None
    am_name: Optional[str] = None
    am_mobile: Optional[str] = None
    am_email: Optional[str] = None
    is_active: Optional[bool] = None

    @field_validator("store_name", "is_pure_veg", "accepts_online_payment", "accepts_cash", "is_active")
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        # columns are NOT NULL; omit the field to leave it unchanged
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class StoreCounts(BaseModel):
    total: int
    pending: int
    verified: int
    rejected: int


class NextRestaurantIdResponse(BaseModel):
    maxId: int


class StoreDocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    document_type: str
    document_url: str
    document_name: Optional[str] = None
    is_verified: bool
    created_at: Optional[datetime] = None


class OperatingHoursResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day_of_week: str
    is_open: bool
    slot1_start: Optional[str] = None
    slot1_end: Optional[str] = None
    slot2_start: Optional[str] = None
    slot2_end: Optional[str] = None
    is_24_hours: bool = False


class GeocodeResponse(BaseModel):
    latitude: float
    longitude: float
    place_name: Optional[str] = None
