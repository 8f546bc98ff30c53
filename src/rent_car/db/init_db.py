"""
rent_car.db.init_db

Schema bootstrap for local development and tests.
"""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncEngine

from rent_car.db import models  # noqa: F401  # registers tables on Base.metadata
from rent_car.db.base import Base


async def init_db(engine: AsyncEngine) -> None:
    """
    Create tables if they don't exist. Only called when `env` is dev or test.
    """

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
