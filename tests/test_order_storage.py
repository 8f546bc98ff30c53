"""
tests.test_order_storage

SqlOrderStorage against a temporary SQLite database.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator
from typing import Any

import pytest
import pytest_asyncio

from rent_car.db.init_db import init_db
from rent_car.db.repositories.orders import SqlOrderStorage
from rent_car.db.session import create_engine, create_sessionmaker
from rent_car.domain.orders import CreateOrder, GetAllOrdersRequest, UpdateOrder
from rent_car.errors import NotFoundError, StorageError
from rent_car.settings import Settings


@pytest_asyncio.fixture
async def storage(settings: Settings) -> AsyncIterator[SqlOrderStorage]:
    engine = create_engine(settings)
    await init_db(engine)
    try:
        yield SqlOrderStorage(create_sessionmaker(engine))
    finally:
        await engine.dispose()


@pytest.mark.asyncio
async def test_create_and_get(storage: SqlOrderStorage, order_payload: dict[str, Any]) -> None:
    payload = CreateOrder(**order_payload)
    order_id = await storage.create(payload)

    order = await storage.get_by_id(order_id)

    assert order.id == order_id
    assert order.model_dump(include=set(CreateOrder.model_fields)) == payload.model_dump()
    assert order.created_at is not None


@pytest.mark.asyncio
async def test_update_missing_row(storage: SqlOrderStorage, order_payload: dict[str, Any]) -> None:
    with pytest.raises(NotFoundError):
        await storage.update(UpdateOrder(id=uuid.uuid4(), **order_payload))


@pytest.mark.asyncio
async def test_update_existing_row(storage: SqlOrderStorage, order_payload: dict[str, Any]) -> None:
    order_id = await storage.create(CreateOrder(**order_payload))
    await storage.update(UpdateOrder(id=order_id, **{**order_payload, "status": "in_progress"}))

    assert (await storage.get_by_id(order_id)).status == "in_progress"


@pytest.mark.asyncio
async def test_delete(storage: SqlOrderStorage, order_payload: dict[str, Any]) -> None:
    order_id = await storage.create(CreateOrder(**order_payload))
    await storage.delete(order_id)

    with pytest.raises(NotFoundError):
        await storage.get_by_id(order_id)
    with pytest.raises(NotFoundError):
        await storage.delete(order_id)


@pytest.mark.asyncio
async def test_offset_limit_window(storage: SqlOrderStorage, order_payload: dict[str, Any]) -> None:
    for _ in range(25):
        await storage.create(CreateOrder(**order_payload))

    everything = await storage.get_all(GetAllOrdersRequest(page=1, limit=25))
    second = await storage.get_all(GetAllOrdersRequest(page=2, limit=10))
    third = await storage.get_all(GetAllOrdersRequest(page=3, limit=10))

    assert everything.count == second.count == third.count == 25
    assert [o.id for o in second.orders] == [o.id for o in everything.orders[10:20]]
    assert len(third.orders) == 5


@pytest.mark.asyncio
async def test_window_past_the_end(storage: SqlOrderStorage, order_payload: dict[str, Any]) -> None:
    for _ in range(5):
        await storage.create(CreateOrder(**order_payload))

    page = await storage.get_all(GetAllOrdersRequest(page=100, limit=10))

    assert page.orders == []
    assert page.count == 5


@pytest.mark.asyncio
async def test_search_matches_status_and_references(
    storage: SqlOrderStorage, order_payload: dict[str, Any]
) -> None:
    other_car = "b0b0b0b0-0000-4000-8000-000000000001"
    await storage.create(CreateOrder(**order_payload))
    await storage.create(CreateOrder(**{**order_payload, "status": "cancelled"}))
    await storage.create(CreateOrder(**{**order_payload, "car_id": other_car}))

    by_status = await storage.get_all(GetAllOrdersRequest(search="CANCEL", limit=10))
    by_car = await storage.get_all(GetAllOrdersRequest(search="b0b0b0b0", limit=10))
    by_customer = await storage.get_all(
        GetAllOrdersRequest(search=order_payload["customer_id"], limit=10)
    )
    nothing = await storage.get_all(GetAllOrdersRequest(search="%", limit=10))

    assert by_status.count == 1
    assert by_status.orders[0].status == "cancelled"
    assert by_car.count == 1
    assert by_car.orders[0].car_id == other_car
    assert by_customer.count == 3
    assert nothing.count == 0


@pytest.mark.asyncio
async def test_unbindable_offset_is_storage_error(storage: SqlOrderStorage) -> None:
    with pytest.raises(StorageError):
        await storage.get_all(GetAllOrdersRequest(page=10**18, limit=50))
