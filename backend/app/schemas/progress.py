from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict


class ProgressSave(BaseModel):
    # Both optional so a missing value gets the dashboard's own 400 message
    parent_id: Optional[str] = None
    step: Optional[int] = None
    completed_steps: Optional[int] = None
    form_data: dict[str, Any] = {}


class ProgressRecord(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    parent_id: str
    step: int
    completed_steps: int
    form_data: Optional[dict[str, Any]] = None
    store_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ProgressSaveResponse(BaseModel):
    success: bool = True
    message: str = "Progress saved successfully"
    data: ProgressRecord


class ProgressFetchResponse(BaseModel):
    found: bool
    completed_steps: int = 0
    form_data: Optional[dict[str, Any]] = None
    store_id: Optional[str] = None


class ProgressDeleteResponse(BaseModel):
    success: bool = True
    message: str = "Progress deleted successfully"


class StepValidateSubmit(BaseModel):
    step: int
    form_data: dict[str, Any] = {}


class StepValidateResponse(BaseModel):
    valid: bool
    error: Optional[str] = None
