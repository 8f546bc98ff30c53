"""
rent_car.domain.orders

Order request/response models.

Responsibilities:
- Define the caller payloads (`CreateOrder`, `UpdateOrder`) and the list query.
- Define the outward `Order` record and paginated `GetAllOrdersResponse`.
"""

from __future__ import annotations

import enum
import uuid
from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from rent_car.validation import CANONICAL_UUID_PATTERN


class OrderStatus(enum.StrEnum):
    new = "new"
    in_progress = "in_progress"
    completed = "completed"
    cancelled = "cancelled"


class CreateOrder(BaseModel):
    # Customer and car live in other services; only their ids are referenced here.
    customer_id: str = Field(pattern=CANONICAL_UUID_PATTERN)
    car_id: str = Field(pattern=CANONICAL_UUID_PATTERN)
    from_date: datetime
    to_date: datetime
    status: OrderStatus = OrderStatus.new
    amount: float = Field(default=0, ge=0, allow_inf_nan=False)

    @field_validator("customer_id", "car_id")
    @classmethod
    def _lower_reference(cls, v: str) -> str:
        return v.lower()

    @field_validator("from_date", "to_date")
    @classmethod
    def _naive_utc(cls, v: datetime) -> datetime:
        # Storage keeps naive UTC timestamps.
        if v.tzinfo is not None:
            return v.astimezone(UTC).replace(tzinfo=None)
        return v

    @model_validator(mode="after")
    def _check_range(self) -> CreateOrder:
        if self.to_date < self.from_date:
            raise ValueError("to_date must not precede from_date")
        return self


class UpdateOrder(CreateOrder):
    """
    Full replacement of an order's mutable fields.
    `id` always comes from the request path, never from the body.
    """

    id: uuid.UUID


class Order(CreateOrder):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class GetAllOrdersRequest(BaseModel):
    search: str = ""
    page: int = Field(default=1, ge=1)
    # No default: the page size is owned by `Settings.default_page_limit`.
    limit: int = Field(ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class GetAllOrdersResponse(BaseModel):
    orders: list[Order] = Field(default_factory=list)
    # Size of the whole filtered set, not just this page.
    count: int = 0


# --- Module Notes -----------------------------------------------------------
# `Order` validates rows loaded from storage through the same field rules as
# `CreateOrder`, so a record that round-trips always matches its payload shape.
