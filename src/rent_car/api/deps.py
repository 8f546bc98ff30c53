"""
rent_car.api.deps

FastAPI dependency wiring for the API layer.

Responsibilities:
- Expose settings, DB sessions and the order service held on app.state.
- Validate path identifiers and parse pagination before any handler body runs.
"""

from __future__ import annotations

import uuid
from collections.abc import AsyncIterator

from fastapi import Depends, Path, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from rent_car.pagination import Page, parse_pagination
from rent_car.services.order_service import OrderService
from rent_car.settings import Settings
from rent_car.validation import validate_uuid


def settings_dep(request: Request) -> Settings:
    # Set by `api.app.create_app`, so tests can inject their own Settings.
    return request.app.state.settings  # type: ignore[attr-defined]


def sessionmaker_from_app(request: Request) -> async_sessionmaker[AsyncSession]:
    return request.app.state.sessionmaker  # type: ignore[attr-defined]


async def db_session(
    session_factory: async_sessionmaker[AsyncSession] = Depends(sessionmaker_from_app),
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as session:
        yield session


def order_service_dep(request: Request) -> OrderService:
    return request.app.state.order_service  # type: ignore[attr-defined]


def order_id_path(id: str = Path(description="order id (canonical UUID)")) -> uuid.UUID:
    # Shared by every single-order route; raises MalformedInputError before storage is touched.
    return validate_uuid(id)


def pagination_dep(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    settings: Settings = Depends(settings_dep),
) -> Page:
    # Raw strings on purpose: parse errors must surface as our 400 envelope, not FastAPI's 422.
    return parse_pagination(
        page,
        limit,
        default_limit=settings.default_page_limit,
        max_limit=settings.max_page_limit,
    )
