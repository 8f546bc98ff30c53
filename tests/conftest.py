"""
tests.conftest

Shared fixtures: test settings, an in-process app client and an in-memory order storage.
"""

from __future__ import annotations

import asyncio
import uuid
from collections.abc import AsyncIterator
from datetime import datetime
from typing import Any

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from rent_car.api.app import create_app
from rent_car.domain.orders import (
    CreateOrder,
    GetAllOrdersRequest,
    GetAllOrdersResponse,
    Order,
    UpdateOrder,
)
from rent_car.errors import NotFoundError
from rent_car.settings import Settings


class FakeOrderStorage:
    """
    Dict-backed storage that records every call; `delay` simulates a slow backend.
    """

    def __init__(self, delay: float = 0.0) -> None:
        self.orders: dict[uuid.UUID, Order] = {}
        self.calls: list[str] = []
        self.delay = delay

    async def _enter(self, operation: str) -> None:
        self.calls.append(operation)
        if self.delay:
            await asyncio.sleep(self.delay)

    async def create(self, order: CreateOrder) -> uuid.UUID:
        await self._enter("create")
        now = datetime.utcnow()
        record = Order(id=uuid.uuid4(), created_at=now, updated_at=now, **order.model_dump())
        self.orders[record.id] = record
        return record.id

    async def update(self, order: UpdateOrder) -> uuid.UUID:
        await self._enter("update")
        existing = self.orders.get(order.id)
        if existing is None:
            raise NotFoundError(f"order {order.id} not found")
        self.orders[order.id] = existing.model_copy(
            update={**order.model_dump(exclude={"id"}), "updated_at": datetime.utcnow()}
        )
        return order.id

    async def get_all(self, request: GetAllOrdersRequest) -> GetAllOrdersResponse:
        await self._enter("get_all")
        needle = request.search.lower()
        matching = [
            o
            for o in self.orders.values()
            if not needle or needle in f"{o.status} {o.customer_id} {o.car_id}"
        ]
        window = matching[request.offset : request.offset + request.limit]
        return GetAllOrdersResponse(orders=window, count=len(matching))

    async def get_by_id(self, order_id: uuid.UUID) -> Order:
        await self._enter("get_by_id")
        order = self.orders.get(order_id)
        if order is None:
            raise NotFoundError(f"order {order_id} not found")
        return order

    async def delete(self, order_id: uuid.UUID) -> None:
        await self._enter("delete")
        if self.orders.pop(order_id, None) is None:
            raise NotFoundError(f"order {order_id} not found")


@pytest.fixture
def fake_storage() -> FakeOrderStorage:
    return FakeOrderStorage()


@pytest.fixture
def order_payload() -> dict[str, Any]:
    return {
        "customer_id": "3f2b6c1e-8a4d-4e7b-9c1a-0d5e6f7a8b9c",
        "car_id": "a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d",
        "from_date": "2026-07-01T09:00:00",
        "to_date": "2026-07-05T18:00:00",
        "status": "new",
        "amount": 420.5,
    }


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        env="test",
        log_level="WARNING",
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'rent_car.db'}",
        default_page_limit=10,
        max_page_limit=50,
    )


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncIterator[FastAPI]:
    application = create_app(settings=settings)
    # httpx ASGITransport does not run lifespan events; drive them explicitly.
    async with application.router.lifespan_context(application):
        yield application


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
