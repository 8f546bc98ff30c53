"""
rent_car.services.storage

Storage interface consumed by the order service.
"""

from __future__ import annotations

import uuid
from typing import Protocol

from rent_car.domain.orders import (
    CreateOrder,
    GetAllOrdersRequest,
    GetAllOrdersResponse,
    Order,
    UpdateOrder,
)


class OrderStorage(Protocol):
    """
    Implementations raise `NotFoundError` for unknown ids and `StorageError`
    for any other persistence failure.
    """

    async def create(self, order: CreateOrder) -> uuid.UUID: ...

    async def update(self, order: UpdateOrder) -> uuid.UUID: ...

    async def get_all(self, request: GetAllOrdersRequest) -> GetAllOrdersResponse: ...

    async def get_by_id(self, order_id: uuid.UUID) -> Order: ...

    async def delete(self, order_id: uuid.UUID) -> None: ...
