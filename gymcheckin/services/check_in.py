from __future__ import annotations

import logging

from ..core.clock import Clock, system_clock
from ..core.config import settings
from ..repositories.check_ins import CheckInsRepository, ensure_aware
from ..repositories.gyms import GymsRepository
from ..schemas.check_ins import CheckIn, CheckInCreate
from .errors import MaxDistanceError, MaxNumberOfCheckInsError, ResourceNotFoundError
from .geolocation import calculate_distance, is_within_radius

logger = logging.getLogger(__name__)


class CheckInUseCase:
    """
    체육관 체크인 유스케이스

    1. 체육관 존재 확인
    2. 사용자 위치가 체육관 반경(기본 100m) 안인지 확인
    3. 같은 날 이미 체크인했는지 확인
    4. 체크인 생성

    검증에 실패하면 아무것도 저장하지 않고 예외를 그대로 호출자에게 던집니다.
    """

    def __init__(
        self,
        check_ins_repository: CheckInsRepository,
        gyms_repository: GymsRepository,
        clock: Clock = system_clock,
        max_distance_meters: float | None = None,
    ) -> None:
        self.check_ins_repository = check_ins_repository
        self.gyms_repository = gyms_repository
        self.clock = clock
        self.max_distance_meters = (
            max_distance_meters if max_distance_meters is not None else settings.check_in_max_distance_meters
        )

    async def execute(
        self,
        user_id: str,
        gym_id: str,
        user_latitude: float,
        user_longitude: float,
    ) -> CheckIn:
        gym = await self.gyms_repository.find_by_id(gym_id)
        if gym is None:
            raise ResourceNotFoundError(f"체육관을 찾을 수 없습니다: {gym_id}")

        distance = calculate_distance(user_latitude, user_longitude, gym.latitude, gym.longitude)
        if not is_within_radius(
            user_latitude, user_longitude, gym.latitude, gym.longitude, radius_meters=self.max_distance_meters
        ):
            logger.info(
                "체크인 거절(거리 초과): user=%s gym=%s distance=%.0fm", user_id, gym_id, distance
            )
            raise MaxDistanceError(
                f"체육관으로부터 {distance:.0f}m 떨어져 있습니다. (필요: {self.max_distance_meters:.0f}m 이내)"
            )

        # 시각은 한 번만 읽어 날짜 판단과 created_at에 같이 사용
        now = ensure_aware(self.clock())
        existing = await self.check_ins_repository.find_by_user_id_on_date(user_id, now)
        if existing is not None:
            logger.info("체크인 거절(하루 1회 초과): user=%s date=%s", user_id, now.date().isoformat())
            raise MaxNumberOfCheckInsError()

        check_in = await self.check_ins_repository.create(
            CheckInCreate(user_id=user_id, gym_id=gym_id, created_at=now)
        )
        logger.info("체크인 완료: id=%s user=%s gym=%s", check_in.id, user_id, gym_id)
        return check_in
