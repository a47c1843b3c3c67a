from fastapi import APIRouter

from .routes import check_ins, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(check_ins.router, tags=["check-ins"])
