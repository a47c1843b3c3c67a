from fastapi import APIRouter, Depends, HTTPException, Query, status

from ...core.auth import get_current_user_id
from ...dependencies import get_check_in_use_case, get_check_ins_history_use_case
from ...schemas import CheckInHistoryOut, CheckInOut, CheckInRequest
from ...services.check_in import CheckInUseCase
from ...services.check_ins_history import FetchUserCheckInsHistoryUseCase
from ...services.errors import MaxDistanceError, MaxNumberOfCheckInsError, ResourceNotFoundError

router = APIRouter()


@router.post("/gyms/{gym_id}/check-ins", response_model=CheckInOut, status_code=status.HTTP_201_CREATED)
async def create_check_in(
    gym_id: str,
    payload: CheckInRequest,
    user_id: str = Depends(get_current_user_id),
    use_case: CheckInUseCase = Depends(get_check_in_use_case),
) -> CheckInOut:
    """체육관 체크인: 100m 반경 안, 하루 1회"""
    try:
        check_in = await use_case.execute(
            user_id=user_id,
            gym_id=gym_id,
            user_latitude=payload.latitude,
            user_longitude=payload.longitude,
        )
    except ResourceNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    except MaxDistanceError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except MaxNumberOfCheckInsError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return CheckInOut(check_in=check_in)


@router.get("/check-ins/history", response_model=CheckInHistoryOut)
async def get_check_ins_history(
    page: int = Query(default=1, ge=1),
    user_id: str = Depends(get_current_user_id),
    use_case: FetchUserCheckInsHistoryUseCase = Depends(get_check_ins_history_use_case),
) -> CheckInHistoryOut:
    check_ins = await use_case.execute(user_id=user_id, page=page)
    return CheckInHistoryOut(check_ins=check_ins)
