from abc import ABC, abstractmethod

from ..schemas.gyms import Gym, GymCreate


class GymsRepository(ABC):
    """체육관 조회 계약. 체크인 유스케이스는 읽기만 합니다."""

    @abstractmethod
    async def find_by_id(self, gym_id: str) -> Gym | None:
        ...

    @abstractmethod
    async def create(self, data: GymCreate) -> Gym:
        """체육관 등록 (외부 등록 프로세스 및 테스트 시드용)"""
