"""
rent_car.api.routers.health

Liveness (`/healthz`) and readiness (`/readyz`) probes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from rent_car.api.deps import db_session
from rent_car.db.models import OrderRecord

router = APIRouter()


@router.get("/healthz")
async def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/readyz")
async def readyz(session: AsyncSession = Depends(db_session)) -> dict[str, str]:
    # Ready only when the orders table exists and answers; an empty table is fine.
    await session.execute(select(OrderRecord.id).limit(1))
    return {"status": "ready"}
