"""
rent_car.db.repositories.orders

SQLAlchemy implementation of the order storage.

Responsibilities:
- Persist, replace, list, fetch and delete orders.
- Apply search + offset/limit windows and report the filtered total.
- Convert SQLAlchemy failures into `StorageError` and missing rows into `NotFoundError`.
"""

from __future__ import annotations

import uuid

from sqlalchemy import String, cast, func, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rent_car.db.models import OrderRecord
from rent_car.db.session import session_scope
from rent_car.domain.orders import (
    CreateOrder,
    GetAllOrdersRequest,
    GetAllOrdersResponse,
    Order,
    UpdateOrder,
)
from rent_car.errors import NotFoundError, StorageError


def _order_not_found(order_id: uuid.UUID) -> NotFoundError:
    return NotFoundError(f"order {order_id} not found")


class SqlOrderStorage:
    """
    Safe for concurrent use: every call opens its own session from the shared factory.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create(self, order: CreateOrder) -> uuid.UUID:
        try:
            async with session_scope(self._session_factory) as session:
                record = OrderRecord(**order.model_dump())
                session.add(record)
                await session.flush()
                return record.id
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    async def update(self, order: UpdateOrder) -> uuid.UUID:
        try:
            async with session_scope(self._session_factory) as session:
                record = await session.get(OrderRecord, order.id, with_for_update=True)
                if record is None:
                    raise _order_not_found(order.id)
                for field, value in order.model_dump(exclude={"id"}).items():
                    setattr(record, field, value)
                await session.flush()
                return record.id
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e

    async def get_all(self, request: GetAllOrdersRequest) -> GetAllOrdersResponse:
        stmt = select(OrderRecord)
        count_stmt = select(func.count()).select_from(OrderRecord)
        if request.search:
            predicate = or_(
                cast(OrderRecord.status, String).icontains(request.search, autoescape=True),
                OrderRecord.customer_id.icontains(request.search, autoescape=True),
                OrderRecord.car_id.icontains(request.search, autoescape=True),
            )
            stmt = stmt.where(predicate)
            count_stmt = count_stmt.where(predicate)

        stmt = (
            stmt.order_by(OrderRecord.created_at, OrderRecord.id)
            .offset(request.offset)
            .limit(request.limit)
        )
        try:
            async with session_scope(self._session_factory) as session:
                count = (await session.execute(count_stmt)).scalar_one()
                rows = (await session.execute(stmt)).scalars().all()
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: offset/limit beyond what the driver can bind.
            raise StorageError(str(e)) from e
        return GetAllOrdersResponse(
            orders=[Order.model_validate(r) for r in rows],
            count=count,
        )

    async def get_by_id(self, order_id: uuid.UUID) -> Order:
        try:
            async with session_scope(self._session_factory) as session:
                record = await session.get(OrderRecord, order_id)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e
        if record is None:
            raise _order_not_found(order_id)
        return Order.model_validate(record)

    async def delete(self, order_id: uuid.UUID) -> None:
        try:
            async with session_scope(self._session_factory) as session:
                record = await session.get(OrderRecord, order_id)
                if record is None:
                    raise _order_not_found(order_id)
                await session.delete(record)
        except SQLAlchemyError as e:
            raise StorageError(str(e)) from e


# --- Module Notes -----------------------------------------------------------
# Rows are ordered oldest-first (then by id) so offset windows are stable between pages.
