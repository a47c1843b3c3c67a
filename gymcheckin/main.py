from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from .api import api_router
from .core.config import settings
from .db import init
from .db.mongo import MongoConnectionManager

logging.basicConfig(level=settings.log_level.upper())
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 애플리케이션 시작 시 커넥션 미리 생성
    MongoConnectionManager.get_client()
    logger.info("데이터베이스 커넥션 초기화 완료")
    try:
        await init.ensure_indexes(MongoConnectionManager.get_database())
    except Exception as exc:  # pragma: no cover - 인덱스 생성 실패는 기동을 막지 않음
        logger.warning("인덱스 생성 중 오류 발생: %s", exc)
    yield
    # 종료 시 커넥션 정리
    await MongoConnectionManager.close()


app = FastAPI(title=settings.project_name, lifespan=lifespan)

app.include_router(api_router, prefix=settings.api_prefix)
