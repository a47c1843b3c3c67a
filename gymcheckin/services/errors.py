class CheckInError(Exception):
    """체크인 요청 거절. 서버 오류가 아니라 입력/상태에 따른 거절입니다."""

    default_message = "체크인 요청이 거절되었습니다."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class ResourceNotFoundError(CheckInError):
    default_message = "리소스를 찾을 수 없습니다."


class MaxDistanceError(CheckInError):
    default_message = "체육관과의 거리가 허용 범위를 벗어났습니다."


class MaxNumberOfCheckInsError(CheckInError):
    default_message = "오늘은 이미 체크인했습니다."
