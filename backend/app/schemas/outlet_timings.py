from typing import Optional

from pydantic import BaseModel, ConfigDict


class OutletTimingsSave(BaseModel):
    model_config = ConfigDict(extra="ignore")

    store_id: Optional[str] = None
    monday_open: Optional[str] = None
    monday_close: Optional[str] = None
    tuesday_open: Optional[str] = None
    tuesday_close: Optional[str] = None
    wednesday_open: Optional[str] = None
    wednesday_close: Optional[str] = None
    thursday_open: Optional[str] = None
    thursday_close: Optional[str] = None
    friday_open: Optional[str] = None
    friday_close: Optional[str] = None
    saturday_open: Optional[str] = None
    saturday_close: Optional[str] = None
    sunday_open: Optional[str] = None
    sunday_close: Optional[str] = None
    same_for_all: Optional[bool] = None
    force_24_hours: Optional[bool] = None
    closed_day: Optional[str] = None


class OutletTimingsResponse(OutletTimingsSave):
    model_config = ConfigDict(from_attributes=True)

    id: str
    store_id: str
    same_for_all: bool
    force_24_hours: bool
