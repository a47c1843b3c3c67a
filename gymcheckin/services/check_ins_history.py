from __future__ import annotations

from ..repositories.check_ins import CheckInsRepository
from ..schemas.check_ins import CheckIn


class FetchUserCheckInsHistoryUseCase:
    """사용자 체크인 이력 조회 (페이지 단위)"""

    def __init__(self, check_ins_repository: CheckInsRepository) -> None:
        self.check_ins_repository = check_ins_repository

    async def execute(self, user_id: str, page: int = 1) -> list[CheckIn]:
        if page < 1:
            raise ValueError(f"page는 1 이상이어야 합니다: {page}")
        return await self.check_ins_repository.find_many_by_user_id(user_id, page)
