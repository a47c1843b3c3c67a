from __future__ import annotations

from datetime import datetime
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from gymcheckin.core.clock import FixedClock
from gymcheckin.db import init
from gymcheckin.db.mongo import MongoConnectionManager
from gymcheckin.repositories import InMemoryCheckInsRepository, InMemoryGymsRepository
from gymcheckin.schemas import Gym

GYM_LATITUDE = -23.1309312
GYM_LONGITUDE = -46.563328


class _DummyCollection:
    async def create_index(self, *_args: Any, **_kwargs: Any) -> None:
        return None


class _DummyDatabase:
    def __getitem__(self, _name: str) -> _DummyCollection:
        return _DummyCollection()


class _DummyMongoClient:
    def __init__(self) -> None:
        self._db = _DummyDatabase()

    def __getitem__(self, _name: str) -> _DummyDatabase:
        return self._db

    def close(self) -> None:
        return None


@pytest.fixture(autouse=True)
def stub_infrastructure(monkeypatch: pytest.MonkeyPatch) -> None:
    """Mongo 연결과 인덱스 생성을 stub으로 대체"""
    dummy_mongo_client = _DummyMongoClient()

    async def _noop_ensure_indexes(_db: Any) -> None:
        return None

    async def _noop_close_mongo(cls: type[MongoConnectionManager]) -> None:
        return None

    monkeypatch.setattr(
        MongoConnectionManager,
        "get_client",
        classmethod(lambda cls: dummy_mongo_client),
    )
    monkeypatch.setattr(
        MongoConnectionManager,
        "close",
        classmethod(lambda cls: _noop_close_mongo(cls)),
    )
    monkeypatch.setattr(init, "ensure_indexes", _noop_ensure_indexes)


@pytest.fixture
def gyms_repository() -> InMemoryGymsRepository:
    repository = InMemoryGymsRepository()
    repository.items.append(
        Gym(
            id="gym-01",
            title="Python Gym",
            description="",
            phone="",
            latitude=GYM_LATITUDE,
            longitude=GYM_LONGITUDE,
        )
    )
    return repository


@pytest.fixture
def check_ins_repository() -> InMemoryCheckInsRepository:
    return InMemoryCheckInsRepository(page_size=20)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2025, 11, 12, 17, 0, 0, tzinfo=ZoneInfo("UTC")))
