from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class VideoCreate(BaseModel):
    title: str = Field(min_length=1, max_length=300)
    description: str = ""


class VideoOut(BaseModel):
    id: UUID
    owner_id: UUID
    title: str
    description: str
    thumbnail_url: str | None = None
    video_url: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
