from __future__ import annotations

from motor.motor_asyncio import AsyncIOMotorDatabase

from ..repositories.mongo import CHECK_INS_COL


async def ensure_indexes(db: AsyncIOMotorDatabase) -> None:
    await db[CHECK_INS_COL].create_index([("user_id", 1), ("created_at", 1)])
    await db[CHECK_INS_COL].create_index("gym_id")
