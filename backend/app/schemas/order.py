from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from app.models.food_order import OrderStatus


class OrderCreate(BaseModel):
    order_number: str = Field(..., min_length=1)
    restaurant_id: str
    restaurant_name: Optional[str] = None
    user_name: Optional[str] = None
    user_phone: Optional[str] = None
    delivery_address: Optional[str] = None
    items: list[dict[str, Any]] = []
    total_amount: float = Field(0, ge=0)
    payment_method: Optional[str] = None
    special_instructions: Optional[str] = None


class OrderStatusUpdate(BaseModel):
    status: OrderStatus


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    order_number: str
    restaurant_id: str
    restaurant_name: Optional[str] = None
    user_name: Optional[str] = None
    user_phone: Optional[str] = None
    delivery_address: Optional[str] = None
    items: Optional[list[dict[str, Any]]] = None
    total_amount: float
    payment_method: Optional[str] = None
    status: OrderStatus
    rating: Optional[float] = None
    special_instructions: Optional[str] = None
    confirmed_at: Optional[datetime] = None
    delivered_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OrderStats(BaseModel):
    total_orders: int
    pending_orders: int
    confirmed_orders: int
    preparing_orders: int
    ready_orders: int
    out_for_delivery_orders: int
    delivered_orders: int
    cancelled_orders: int
    total_revenue: float
    average_order_value: float
    average_rating: float


class OrderMutationResponse(BaseModel):
    success: bool = True
