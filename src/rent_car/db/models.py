"""
rent_car.db.models

Persistence schema for rental orders.

Responsibilities:
- Define the `OrderRecord` ORM model backing the order storage.
"""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import Enum, Index, String, Uuid as SAUuid
from sqlalchemy.orm import Mapped, mapped_column

from rent_car.db.base import Base
from rent_car.domain.orders import OrderStatus


def _utcnow() -> datetime:
    # Naive UTC, matching how `CreateOrder` normalizes incoming dates.
    return datetime.utcnow()


class OrderRecord(Base):
    __tablename__ = "orders"

    id: Mapped[uuid.UUID] = mapped_column(
        SAUuid(as_uuid=True), primary_key=True, default=uuid.uuid4
    )

    # Plain canonical strings so substring search works on every backend.
    customer_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    car_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    from_date: Mapped[datetime] = mapped_column(nullable=False)
    to_date: Mapped[datetime] = mapped_column(nullable=False)

    status: Mapped[OrderStatus] = mapped_column(
        Enum(OrderStatus, native_enum=False, length=32), nullable=False, index=True
    )
    amount: Mapped[float] = mapped_column(nullable=False, default=0)

    created_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow)
    updated_at: Mapped[datetime] = mapped_column(nullable=False, default=_utcnow, onupdate=_utcnow)

    __table_args__ = (Index("ix_orders_created_id", "created_at", "id"),)


# --- Module Notes -----------------------------------------------------------
# Enum members use identical names and values, so the stored text is the status value.
