"""
현재 시각 공급자

체크인의 '같은 날' 판단은 호출 시점의 시각에 의존하므로,
유스케이스는 전역 시계 대신 주입 가능한 Clock을 사용합니다.
"""

from collections.abc import Callable
from datetime import datetime
from zoneinfo import ZoneInfo

from .config import settings

Clock = Callable[[], datetime]


def get_timezone(name: str | None = None) -> ZoneInfo:
    return ZoneInfo(name or settings.check_in_timezone)


def system_clock() -> datetime:
    """설정된 기준 타임존의 현재 시각 (timezone-aware)"""
    return datetime.now(get_timezone())


class FixedClock:
    """항상 지정된 시각을 돌려주는 시계. 테스트나 배치 재처리에서 날짜 경계를 고정할 때 사용합니다."""

    def __init__(self, now: datetime) -> None:
        self.set(now)

    def set(self, now: datetime) -> None:
        if now.tzinfo is None:
            raise ValueError("FixedClock에는 timezone-aware datetime이 필요합니다.")
        self.now = now

    def __call__(self) -> datetime:
        return self.now
