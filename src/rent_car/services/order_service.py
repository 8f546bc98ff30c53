"""
rent_car.services.order_service

Order service: the single boundary between HTTP handlers and order storage.

Responsibilities:
- Delegate create/update/list/get/delete to the injected order storage.
- Run every storage call under a configured deadline.
- Surface storage failures unchanged, and deadline expiry as `DeadlineExceededError`.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from rent_car.domain.orders import (
    CreateOrder,
    GetAllOrdersRequest,
    GetAllOrdersResponse,
    Order,
    UpdateOrder,
)
from rent_car.errors import DeadlineExceededError
from rent_car.observability.logging import get_logger
from rent_car.services.storage import OrderStorage

log = get_logger(__name__)


class OrderService:
    """
    Stateless delegator. Built once at startup and shared by all requests.
    """

    def __init__(self, *, storage: OrderStorage, timeout_seconds: float) -> None:
        self._storage = storage
        self._timeout_seconds = timeout_seconds

    @asynccontextmanager
    async def _deadline(self, operation: str) -> AsyncIterator[None]:
        # The timeout handle is released on every exit path by `asyncio.timeout` itself.
        try:
            async with asyncio.timeout(self._timeout_seconds):
                yield
        except TimeoutError as e:
            log.warning(
                "order_deadline_exceeded", operation=operation, timeout=self._timeout_seconds
            )
            raise DeadlineExceededError(
                f"{operation} did not complete within {self._timeout_seconds}s"
            ) from e

    async def create(self, order: CreateOrder) -> uuid.UUID:
        # No availability or referential checks happen here; storage constraints only.
        async with self._deadline("create order"):
            return await self._storage.create(order)

    async def update(self, order: UpdateOrder) -> uuid.UUID:
        async with self._deadline("update order"):
            return await self._storage.update(order)

    async def get_all(self, request: GetAllOrdersRequest) -> GetAllOrdersResponse:
        async with self._deadline("list orders"):
            return await self._storage.get_all(request)

    async def get_by_id(self, order_id: uuid.UUID) -> Order:
        async with self._deadline("get order"):
            return await self._storage.get_by_id(order_id)

    async def delete(self, order_id: uuid.UUID) -> None:
        async with self._deadline("delete order"):
            await self._storage.delete(order_id)


# --- Module Notes -----------------------------------------------------------
# Identifier validation is done by the API boundary (`api.deps.order_id_path`) before
# any method here is called; this class only receives already-typed UUIDs.
