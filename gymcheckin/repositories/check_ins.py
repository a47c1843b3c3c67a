from abc import ABC, abstractmethod
from datetime import datetime, timedelta

from ..core.clock import get_timezone
from ..schemas.check_ins import CheckIn, CheckInCreate


def ensure_aware(value: datetime) -> datetime:
    """naive datetime은 설정된 기준 타임존의 시각으로 간주합니다."""
    if value.tzinfo is None:
        return value.replace(tzinfo=get_timezone())
    return value


def day_bounds(date: datetime) -> tuple[datetime, datetime]:
    """date가 속한 달력상 하루의 [시작, 다음 날 시작) 구간. date의 tzinfo를 그대로 사용합니다."""
    start = ensure_aware(date).replace(hour=0, minute=0, second=0, microsecond=0)
    return start, start + timedelta(days=1)


class CheckInsRepository(ABC):
    """
    체크인 저장소 계약.

    '하루 한 번' 규칙의 유일성은 find_by_user_id_on_date의 조회 의미에 맡깁니다.
    동시 요청 사이의 경합은 저장소 쪽 제약이 없으면 막지 못합니다.
    """

    @abstractmethod
    async def find_by_user_id_on_date(self, user_id: str, date: datetime) -> CheckIn | None:
        """
        사용자가 date와 같은 날에 만든 체크인을 찾습니다.

        Args:
            user_id: 사용자 ID
            date: 기준 시각 (timezone-aware). 이 값의 타임존에서 하루 경계를 계산합니다.

        Returns:
            해당 날짜의 체크인, 없으면 None
        """

    @abstractmethod
    async def find_many_by_user_id(self, user_id: str, page: int) -> list[CheckIn]:
        """사용자의 체크인 목록 (1부터 시작하는 페이지, 생성 순)"""

    @abstractmethod
    async def create(self, data: CheckInCreate) -> CheckIn:
        """체크인 생성. ID를 부여하고, created_at이 없으면 현재 시각(UTC)으로 채웁니다."""
