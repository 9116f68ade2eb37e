"""Application DTOs for Order operations.

Inputs accept snake_case or camelCase keys; ``model_dump(by_alias=True)``
on a response yields the camelCase transport shape.
"""

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel, to_snake

from order_core.domain.value_objects import OrderStatus

_DTO_CONFIG = {"frozen": True, "alias_generator": to_camel, "populate_by_name": True}

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"
CURRENCY_PATTERN = r"^[A-Za-z]{3}$"

SortField = Literal["created_at", "updated_at", "order_number", "status", "customer_name"]


# =============================================================================
# INPUT DTOs
# =============================================================================

class AddressInput(BaseModel):
    """Delivery address input."""

    street: str = Field(..., min_length=1, max_length=255, description="Street line")
    city: str = Field(..., min_length=1, max_length=100, description="City")
    state: str = Field(..., min_length=1, max_length=100, description="State or region")
    postal_code: str = Field(..., min_length=1, max_length=20, description="Postal code")
    country: str = Field(..., min_length=1, max_length=100, description="Country")

    model_config = {**_DTO_CONFIG, "str_strip_whitespace": True}


class OrderItemInput(BaseModel):
    """Single order line input."""

    product_id: str = Field(..., min_length=1, description="Product identifier")
    product_name: str = Field(..., min_length=1, max_length=500, description="Product name")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Decimal = Field(..., gt=0, decimal_places=2, description="Unit price amount")
    currency: str = Field(default="USD", pattern=CURRENCY_PATTERN, description="Currency code")

    model_config = {**_DTO_CONFIG, "str_strip_whitespace": True}


class AddItemInput(OrderItemInput):
    """Input for adding a line to an existing order."""


class CreateOrderInput(BaseModel):
    """Input for creating an order."""

    retailer_id: str = Field(..., description="Retailer UUID")
    customer_id: str = Field(..., min_length=1, description="Customer identifier")
    customer_name: str = Field(..., min_length=1, max_length=255, description="Customer name")
    customer_email: str = Field(..., pattern=EMAIL_PATTERN, description="Customer email address")
    delivery_address: AddressInput = Field(..., description="Delivery address")
    items: List[OrderItemInput] = Field(default_factory=list, description="Initial order lines")
    notes: Optional[str] = Field(None, max_length=1000, description="Free-form notes")

    model_config = {**_DTO_CONFIG, "str_strip_whitespace": True}

    @field_validator("retailer_id")
    @classmethod
    def check_uuid(cls, value: str) -> str:
        try:
            uuid.UUID(value)
        except ValueError as exc:
            raise ValueError("retailer_id must be a valid UUID") from exc
        return value


class UpdateStatusInput(BaseModel):
    """Input for a status change; CREATED is never a valid target."""

    status: Literal["CONFIRMED", "DISPATCHED", "DELIVERED", "CANCELLED"]

    model_config = _DTO_CONFIG

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return value.strip().upper() if isinstance(value, str) else value


class UpdateItemQuantityInput(BaseModel):
    quantity: int = Field(..., gt=0, description="New quantity")

    model_config = _DTO_CONFIG


class OrderFilterInput(BaseModel):
    """Optional list filters."""

    retailer_id: Optional[str] = None
    customer_id: Optional[str] = None
    status: Optional[OrderStatus] = None
    order_number: Optional[str] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None

    model_config = _DTO_CONFIG

    @field_validator("status", mode="before")
    @classmethod
    def normalize_status(cls, value):
        return value.strip().upper() if isinstance(value, str) else value

    @field_validator("start_date", "end_date")
    @classmethod
    def assume_utc(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @model_validator(mode="after")
    def check_range(self) -> "OrderFilterInput":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must be before or equal to end_date")
        return self


class PaginationInput(BaseModel):
    """Page selection and ordering."""

    page: int = Field(default=1, ge=1, description="1-based page number")
    limit: int = Field(default=10, ge=1, le=100, description="Page size")
    sort_by: SortField = Field(default="created_at", description="Sort column")
    sort_order: Literal["asc", "desc"] = Field(default="desc", description="Sort direction")

    model_config = _DTO_CONFIG

    @field_validator("sort_by", mode="before")
    @classmethod
    def normalize_sort_by(cls, value):
        return to_snake(value) if isinstance(value, str) else value

    @field_validator("sort_order", mode="before")
    @classmethod
    def normalize_sort_order(cls, value):
        return value.strip().lower() if isinstance(value, str) else value


# =============================================================================
# RESPONSE DTOs
# =============================================================================

class AddressDTO(BaseModel):
    street: str
    city: str
    state: str
    postal_code: str
    country: str

    model_config = _DTO_CONFIG


class OrderItemResponseDTO(BaseModel):
    """Response DTO for an order line."""

    id: Optional[str] = Field(None, description="Line id")
    order_id: Optional[str] = Field(None, description="Owning order id")
    product_id: str = Field(..., description="Product identifier")
    product_name: str = Field(..., description="Product name")
    quantity: int = Field(..., gt=0, description="Quantity ordered")
    unit_price: Decimal = Field(..., description="Unit price amount")
    currency: str = Field(..., description="Currency code")
    total_price: Decimal = Field(..., description="quantity x unit_price")
    created_at: str = Field(..., description="ISO-8601 creation time")
    updated_at: str = Field(..., description="ISO-8601 last update time")

    model_config = _DTO_CONFIG


class OrderResponseDTO(BaseModel):
    """Response DTO for order details."""

    id: Optional[str] = Field(None, description="Order id")
    order_number: str = Field(..., description="Public order number")
    retailer_id: str = Field(..., description="Retailer id")
    customer_id: str = Field(..., description="Customer id")
    customer_name: str = Field(..., description="Customer name")
    customer_email: str = Field(..., description="Customer email")
    delivery_address: AddressDTO = Field(..., description="Delivery address")
    items: List[OrderItemResponseDTO] = Field(default_factory=list, description="Order lines")
    item_count: int = Field(..., ge=0, description="Number of lines")
    status: str = Field(..., description="Order status")
    total_amount: Decimal = Field(..., ge=0, description="Order total")
    currency: str = Field(..., description="Currency code")
    notes: Optional[str] = Field(None, description="Free-form notes")
    version: int = Field(..., ge=0, description="Optimistic concurrency token")
    created_at: str = Field(..., description="ISO-8601 creation time")
    updated_at: str = Field(..., description="ISO-8601 last update time")
    confirmed_at: Optional[str] = None
    dispatched_at: Optional[str] = None
    delivered_at: Optional[str] = None
    cancelled_at: Optional[str] = None

    model_config = _DTO_CONFIG


class PaginationMetaDTO(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_previous: bool

    model_config = _DTO_CONFIG


class PaginatedOrdersResponseDTO(BaseModel):
    """One page of orders."""

    orders: List[OrderResponseDTO] = Field(default_factory=list, description="Orders on this page")
    pagination: PaginationMetaDTO

    model_config = _DTO_CONFIG


class OrderStatsDTO(BaseModel):
    """Order count per status."""

    counts: Dict[str, int] = Field(..., description="Count keyed by status tag")
    total: int = Field(..., ge=0, description="Sum of all counts")

    model_config = _DTO_CONFIG
