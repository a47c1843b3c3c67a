from .check_ins import CheckInsRepository
from .gyms import GymsRepository
from .in_memory import InMemoryCheckInsRepository, InMemoryGymsRepository
from .mongo import MongoCheckInsRepository, MongoGymsRepository

__all__ = [
    "CheckInsRepository",
    "GymsRepository",
    "InMemoryCheckInsRepository",
    "InMemoryGymsRepository",
    "MongoCheckInsRepository",
    "MongoGymsRepository",
]
