from datetime import datetime

from pydantic import BaseModel, Field


class CheckInCreate(BaseModel):
    user_id: str
    gym_id: str
    created_at: datetime | None = None
    validated_at: datetime | None = None


class CheckIn(BaseModel):
    id: str
    user_id: str
    gym_id: str
    created_at: datetime
    validated_at: datetime | None = None


class CheckInRequest(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)


class CheckInOut(BaseModel):
    check_in: CheckIn


class CheckInHistoryOut(BaseModel):
    check_ins: list[CheckIn] = Field(default_factory=list)
