from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, Request, status
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from videohub.api.deps import get_current_user_id, get_video_repository, get_video_service, parse_video_id
from videohub.core.constants import UPLOAD_FORM_FIELD
from videohub.core.errors import AuthError, LocatorError, ValidationError
from videohub.models.domain import Video
from videohub.repositories.video_repository import VideoRepository
from videohub.schemas.common import ErrorOut
from videohub.schemas.videos import VideoCreate, VideoOut
from videohub.services.video_service import VideoService

logger = structlog.get_logger()

router = APIRouter(prefix="/videos", tags=["videos"])


@router.post("", response_model=VideoOut, status_code=status.HTTP_201_CREATED)
async def create_video(
    payload: VideoCreate,
    user_id: UUID = Depends(get_current_user_id),
    repo: VideoRepository = Depends(get_video_repository),
):
    video = await repo.create(Video(owner_id=user_id, title=payload.title, description=payload.description))
    return VideoOut.model_validate(video)


@router.get("", response_model=list[VideoOut])
async def list_videos(
    user_id: UUID = Depends(get_current_user_id),
    repo: VideoRepository = Depends(get_video_repository),
    service: VideoService = Depends(get_video_service),
):
    signed = []
    for video in await repo.list_by_owner(user_id):
        try:
            signed.append(await run_in_threadpool(service.sign_video, video))
        except LocatorError as exc:
            logger.warning("video_locator_undecodable", video_id=str(video.id), error=exc.message)
            signed.append(VideoOut.model_validate(video).model_copy(update={"video_url": None}))
    return signed


@router.get("/{video_id}", response_model=VideoOut)
async def get_video(
    video_id: UUID = Depends(parse_video_id),
    user_id: UUID = Depends(get_current_user_id),
    repo: VideoRepository = Depends(get_video_repository),
    service: VideoService = Depends(get_video_service),
):
    video = await repo.get_by_id(video_id)
    if video.owner_id != user_id:
        raise AuthError("Not authorized to view this video")
    return await run_in_threadpool(service.sign_video, video)


@router.post(
    "/{video_id}/upload",
    response_model=VideoOut,
    responses={code: {"model": ErrorOut} for code in (400, 401, 404, 413, 500)},
)
async def upload_video(
    request: Request,
    video_id: UUID = Depends(parse_video_id),
    user_id: UUID = Depends(get_current_user_id),
    repo: VideoRepository = Depends(get_video_repository),
    service: VideoService = Depends(get_video_service),
):
    video = await repo.get_by_id(video_id)
    if video.owner_id != user_id:
        raise AuthError("Not authorized to update this video")

    async with request.form(max_files=1) as form:
        upload = form.get(UPLOAD_FORM_FIELD)
        if not isinstance(upload, UploadFile):
            raise ValidationError("Unable to parse form file")
        locator = await run_in_threadpool(service.ingest, upload.file, upload.content_type)

    video = await repo.set_locator(video, locator.encode())
    logger.info("video_uploaded", video_id=str(video.id), bucket=locator.bucket, key=locator.key)
    return await run_in_threadpool(service.sign_video, video)
