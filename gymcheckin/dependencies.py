from collections.abc import AsyncGenerator

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from .core.clock import Clock, system_clock
from .core.config import settings
from .db.mongo import MongoConnectionManager
from .repositories import CheckInsRepository, GymsRepository, MongoCheckInsRepository, MongoGymsRepository
from .services.check_in import CheckInUseCase
from .services.check_ins_history import FetchUserCheckInsHistoryUseCase


async def get_mongo_db() -> AsyncGenerator[AsyncIOMotorDatabase, None]:
    db = MongoConnectionManager.get_database()
    yield db


def get_clock() -> Clock:
    return system_clock


def get_gyms_repository(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> GymsRepository:
    return MongoGymsRepository(db)


def get_check_ins_repository(db: AsyncIOMotorDatabase = Depends(get_mongo_db)) -> CheckInsRepository:
    return MongoCheckInsRepository(db, page_size=settings.check_ins_page_size)


def get_check_in_use_case(
    check_ins_repository: CheckInsRepository = Depends(get_check_ins_repository),
    gyms_repository: GymsRepository = Depends(get_gyms_repository),
    clock: Clock = Depends(get_clock),
) -> CheckInUseCase:
    return CheckInUseCase(
        check_ins_repository,
        gyms_repository,
        clock=clock,
        max_distance_meters=settings.check_in_max_distance_meters,
    )


def get_check_ins_history_use_case(
    check_ins_repository: CheckInsRepository = Depends(get_check_ins_repository),
) -> FetchUserCheckInsHistoryUseCase:
    return FetchUserCheckInsHistoryUseCase(check_ins_repository)
