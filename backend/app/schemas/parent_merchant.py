from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, field_validator, validate_email
from pydantic_core import PydanticCustomError

from app.models.parent_merchant import MerchantType


class ParentMerchantCreate(BaseModel):
    parent_store_name: str
    registered_phone: str
    merchant_type: Literal["LOCAL", "BRAND"]
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None

    @field_validator("parent_store_name")
    @classmethod
    def store_name_required(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 2:
            raise ValueError("Store name is required")
        return v

    @field_validator("registered_phone")
    @classmethod
    def phone_required(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 8:
            raise ValueError("Phone number is required")
        return v

    @field_validator("owner_email")
    @classmethod
    def owner_email_valid(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            validate_email(v)
        except PydanticCustomError:
            raise ValueError("Invalid email")
        return v


class ParentMerchantCreated(BaseModel):
    success: bool = True
    id: str
    parent_merchant_id: str


class ParentMerchantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    parent_merchant_id: str
    parent_store_name: str
    registered_phone: str
    merchant_type: MerchantType
    owner_name: Optional[str] = None
    owner_email: Optional[str] = None
    created_at: Optional[datetime] = None
