from .check_ins import CheckIn, CheckInCreate, CheckInHistoryOut, CheckInOut, CheckInRequest
from .gyms import Gym, GymCreate

__all__ = [
    "CheckIn",
    "CheckInCreate",
    "CheckInHistoryOut",
    "CheckInOut",
    "CheckInRequest",
    "Gym",
    "GymCreate",
]
