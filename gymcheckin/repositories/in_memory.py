from __future__ import annotations

from datetime import datetime, timezone
from uuid import uuid4

from ..core.config import settings
from ..schemas.check_ins import CheckIn, CheckInCreate
from ..schemas.gyms import Gym, GymCreate
from .check_ins import CheckInsRepository, day_bounds, ensure_aware
from .gyms import GymsRepository


class InMemoryGymsRepository(GymsRepository):
    def __init__(self) -> None:
        self.items: list[Gym] = []

    async def find_by_id(self, gym_id: str) -> Gym | None:
        return next((gym for gym in self.items if gym.id == gym_id), None)

    async def create(self, data: GymCreate) -> Gym:
        gym = Gym(**{**data.model_dump(), "id": data.id or str(uuid4())})
        self.items.append(gym)
        return gym


class InMemoryCheckInsRepository(CheckInsRepository):
    def __init__(self, page_size: int | None = None) -> None:
        self.items: list[CheckIn] = []
        self.page_size = page_size or settings.check_ins_page_size

    async def find_by_user_id_on_date(self, user_id: str, date: datetime) -> CheckIn | None:
        start, end = day_bounds(date)
        for check_in in self.items:
            if check_in.user_id == user_id and start <= check_in.created_at < end:
                return check_in
        return None

    async def find_many_by_user_id(self, user_id: str, page: int) -> list[CheckIn]:
        offset = (page - 1) * self.page_size
        owned = sorted(
            (check_in for check_in in self.items if check_in.user_id == user_id),
            key=lambda check_in: check_in.created_at,
        )
        return owned[offset : offset + self.page_size]

    async def create(self, data: CheckInCreate) -> CheckIn:
        check_in = CheckIn(
            id=str(uuid4()),
            user_id=data.user_id,
            gym_id=data.gym_id,
            created_at=ensure_aware(data.created_at) if data.created_at else datetime.now(timezone.utc),
            validated_at=data.validated_at,
        )
        self.items.append(check_in)
        return check_in
