from functools import lru_cache
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from videohub.core.config import get_settings
from videohub.core.errors import AuthError, ValidationError
from videohub.core.security import user_id_from_token
from videohub.db.session import get_db
from videohub.integrations.media.factory import get_remuxer, get_stream_prober
from videohub.integrations.storage.factory import get_storage_provider
from videohub.repositories.video_repository import VideoRepository
from videohub.services.video_service import VideoService

bearer = HTTPBearer(auto_error=False)


async def db_session() -> AsyncSession:
    async for s in get_db():
        yield s


def parse_video_id(video_id: str) -> UUID:
    try:
        return UUID(video_id)
    except ValueError as exc:
        raise ValidationError("Invalid ID") from exc


async def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer),
) -> UUID:
    if not credentials:
        raise AuthError("Couldn't find JWT")
    return user_id_from_token(credentials.credentials, get_settings())


async def get_video_repository(db: AsyncSession = Depends(db_session)) -> VideoRepository:
    return VideoRepository(db)


@lru_cache
def get_video_service() -> VideoService:
    settings = get_settings()
    return VideoService(
        settings=settings,
        storage=get_storage_provider(settings),
        remuxer=get_remuxer(settings),
        prober=get_stream_prober(settings),
    )
