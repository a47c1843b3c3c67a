from pydantic import BaseModel, ConfigDict


class GymCreate(BaseModel):
    id: str | None = None
    title: str
    description: str | None = None
    phone: str | None = None
    latitude: float
    longitude: float


class Gym(GymCreate):
    model_config = ConfigDict(frozen=True)

    id: str
