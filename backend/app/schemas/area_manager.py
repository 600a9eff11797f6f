from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, ValidationInfo, field_validator


class AreaManagerCreate(BaseModel):
    name: str
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    mobile: Optional[str] = None  # older dashboard builds send mobile instead of phone
    region: Optional[str] = None
    status: Literal["active", "inactive"] = "active"


class AreaManagerUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    region: Optional[str] = None
    status: Optional[Literal["active", "inactive"]] = None

    @field_validator("name", "status")
    @classmethod
    def not_null(cls, v, info: ValidationInfo):
        if v is None:
            raise ValueError(f"{info.field_name} cannot be null")
        return v


class AreaManagerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    region: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
