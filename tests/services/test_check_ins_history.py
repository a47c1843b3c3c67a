"""
체크인 이력 조회 유스케이스 테스트
"""
from datetime import datetime, timedelta, timezone

import pytest

from gymcheckin.schemas import CheckInCreate
from gymcheckin.services.check_ins_history import FetchUserCheckInsHistoryUseCase


async def _seed(repository, user_id: str, count: int) -> None:
    start = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)
    for i in range(count):
        await repository.create(
            CheckInCreate(user_id=user_id, gym_id=f"gym-{i:02d}", created_at=start + timedelta(days=i))
        )


@pytest.mark.asyncio
async def test_fetch_check_ins_history(check_ins_repository):
    await _seed(check_ins_repository, "user-01", 2)
    await _seed(check_ins_repository, "user-02", 1)
    use_case = FetchUserCheckInsHistoryUseCase(check_ins_repository)

    check_ins = await use_case.execute(user_id="user-01", page=1)

    assert [c.gym_id for c in check_ins] == ["gym-00", "gym-01"]


@pytest.mark.asyncio
async def test_fetch_paginated_check_ins_history(check_ins_repository):
    await _seed(check_ins_repository, "user-01", 22)
    use_case = FetchUserCheckInsHistoryUseCase(check_ins_repository)

    first_page = await use_case.execute(user_id="user-01", page=1)
    second_page = await use_case.execute(user_id="user-01", page=2)

    assert len(first_page) == 20
    assert [c.gym_id for c in second_page] == ["gym-20", "gym-21"]


@pytest.mark.asyncio
async def test_page_must_be_positive(check_ins_repository):
    use_case = FetchUserCheckInsHistoryUseCase(check_ins_repository)

    with pytest.raises(ValueError):
        await use_case.execute(user_id="user-01", page=0)


@pytest.mark.asyncio
async def test_history_is_ordered_by_created_at(check_ins_repository):
    await check_ins_repository.create(
        CheckInCreate(user_id="user-01", gym_id="late", created_at=datetime(2025, 1, 10, tzinfo=timezone.utc))
    )
    await check_ins_repository.create(
        CheckInCreate(user_id="user-01", gym_id="early", created_at=datetime(2025, 1, 5, tzinfo=timezone.utc))
    )
    use_case = FetchUserCheckInsHistoryUseCase(check_ins_repository)

    check_ins = await use_case.execute(user_id="user-01")

    assert [c.gym_id for c in check_ins] == ["early", "late"]
