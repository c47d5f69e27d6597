from fastapi import APIRouter

from videohub.api.v1.endpoints import health, videos

api_router = APIRouter()
api_router.include_router(videos.router)
api_router.include_router(health.router)
