from __future__ import annotations

from datetime import datetime, timezone

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorDatabase

from ..core.config import settings
from ..schemas.check_ins import CheckIn, CheckInCreate
from ..schemas.gyms import Gym, GymCreate
from .check_ins import CheckInsRepository, day_bounds, ensure_aware
from .gyms import GymsRepository

GYMS_COL = "gyms"
CHECK_INS_COL = "check_ins"


def _normalize_gym(doc: dict) -> Gym:
    doc = {**doc}
    doc["id"] = str(doc.pop("_id"))
    return Gym(**doc)


def _normalize_check_in(doc: dict) -> CheckIn:
    doc = {**doc}
    doc["id"] = str(doc.pop("_id"))
    return CheckIn(**doc)


class MongoGymsRepository(GymsRepository):
    def __init__(self, db: AsyncIOMotorDatabase) -> None:
        self._collection = db[GYMS_COL]

    async def find_by_id(self, gym_id: str) -> Gym | None:
        # 외부 등록 시스템의 문자열 ID와 Mongo 기본 ObjectId를 모두 허용
        candidates: list[str | ObjectId] = [gym_id]
        if ObjectId.is_valid(gym_id):
            candidates.append(ObjectId(gym_id))
        doc = await self._collection.find_one({"_id": {"$in": candidates}})
        return _normalize_gym(doc) if doc else None

    async def create(self, data: GymCreate) -> Gym:
        doc = data.model_dump(exclude={"id"})
        # 체육관 ID는 외부 등록 시스템의 문자열 ID를 그대로 사용
        doc["_id"] = data.id or str(ObjectId())
        await self._collection.insert_one(doc)
        return _normalize_gym(doc)


class MongoCheckInsRepository(CheckInsRepository):
    def __init__(self, db: AsyncIOMotorDatabase, page_size: int | None = None) -> None:
        self._collection = db[CHECK_INS_COL]
        self.page_size = page_size or settings.check_ins_page_size

    async def find_by_user_id_on_date(self, user_id: str, date: datetime) -> CheckIn | None:
        start, end = day_bounds(date)
        doc = await self._collection.find_one(
            {"user_id": user_id, "created_at": {"$gte": start, "$lt": end}}
        )
        return _normalize_check_in(doc) if doc else None

    async def find_many_by_user_id(self, user_id: str, page: int) -> list[CheckIn]:
        cursor = (
            self._collection.find({"user_id": user_id})
            .sort("created_at", 1)
            .skip((page - 1) * self.page_size)
            .limit(self.page_size)
        )
        items: list[CheckIn] = []
        async for doc in cursor:
            items.append(_normalize_check_in(doc))
        return items

    async def create(self, data: CheckInCreate) -> CheckIn:
        doc = {
            "user_id": data.user_id,
            "gym_id": data.gym_id,
            "created_at": ensure_aware(data.created_at) if data.created_at else datetime.now(timezone.utc),
            "validated_at": data.validated_at,
        }
        result = await self._collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return _normalize_check_in(doc)
