from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from videohub.core.errors import PersistenceError, VideoNotFoundError
from videohub.models.domain import Video


class VideoRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, video_id: UUID) -> Video:
        try:
            res = await self.db.execute(select(Video).where(Video.id == video_id))
            video = res.scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise PersistenceError("Couldn't find video") from exc
        if video is None:
            raise VideoNotFoundError("Couldn't find video")
        return video

    async def list_by_owner(self, owner_id: UUID) -> list[Video]:
        try:
            res = await self.db.execute(
                select(Video).where(Video.owner_id == owner_id).order_by(Video.created_at.desc())
            )
        except SQLAlchemyError as exc:
            raise PersistenceError("Couldn't list videos") from exc
        return list(res.scalars().all())

    async def create(self, video: Video) -> Video:
        try:
            self.db.add(video)
            await self.db.commit()
            await self.db.refresh(video)
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise PersistenceError("Couldn't create video") from exc
        return video

    async def set_locator(self, video: Video, locator: str) -> Video:
        try:
            video.video_url = locator
            await self.db.commit()
            await self.db.refresh(video)
        except SQLAlchemyError as exc:
            await self.db.rollback()
            raise PersistenceError("Couldn't update video") from exc
        return video
