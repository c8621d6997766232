from __future__ import annotations

from fastapi import APIRouter, Depends
from pymongo.database import Database

from common.mongo.client import get_database


router = APIRouter()


@router.get("/health", summary="헬스 체크")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/health/ready", summary="MongoDB 연결 확인")
async def ready(db: Database = Depends(get_database)) -> dict[str, str]:
    db.command("ping")
    return {"status": "ok", "database": db.name}
