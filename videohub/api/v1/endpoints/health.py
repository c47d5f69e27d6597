from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from videohub.api.deps import db_session
from videohub.core.config import get_settings
from videohub.core.metrics import REQUEST_COUNTER

router = APIRouter(tags=["health"])


@router.get("/health/live")
async def health_live():
    REQUEST_COUNTER.labels(path="/health/live").inc()
    settings = get_settings()
    return {"status": "ok", "env": settings.app_env, "max_upload_bytes": settings.upload_max_bytes}


@router.get("/health/ready")
async def health_ready(db: AsyncSession = Depends(db_session)):
    REQUEST_COUNTER.labels(path="/health/ready").inc()
    await db.execute(text("SELECT 1"))
    return {"status": "ready", "bucket": get_settings().s3_bucket}


@router.get("/metrics", response_class=PlainTextResponse)
async def metrics():
    # upload, s3 and media-tool counters live in videohub.core.metrics
    return PlainTextResponse(generate_latest().decode("utf-8"), media_type=CONTENT_TYPE_LATEST)
