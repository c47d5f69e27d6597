from contextlib import ExitStack
from typing import BinaryIO

import structlog

from videohub.core.config import Settings
from videohub.core.errors import ProcessingError, VideoHubError
from videohub.core.metrics import VIDEO_UPLOADS
from videohub.integrations.media.base import Remuxer, StreamProber
from videohub.integrations.storage.base import StorageProvider
from videohub.models.domain import Video
from videohub.schemas.videos import VideoOut
from videohub.services.asset_keys import generate_asset_key
from videohub.services.locator import Locator, decode_locator
from videohub.services.media_processing import AspectRatioClassifier, FastStartProcessor
from videohub.services.media_types import ensure_supported_video
from videohub.services.upload_buffer import buffer_upload, discard_temp_file, remove_path

logger = structlog.get_logger()


class VideoService:
    def __init__(
        self,
        settings: Settings,
        storage: StorageProvider,
        remuxer: Remuxer,
        prober: StreamProber,
    ):
        self.settings = settings
        self.storage = storage
        self.fast_start = FastStartProcessor(remuxer, tmp_dir=settings.upload_tmp_dir)
        self.classifier = AspectRatioClassifier(prober)

    def ingest(self, source: BinaryIO, content_type: str | None) -> Locator:
        """Validate, normalize, classify and store an uploaded video.

        Blocking. Every temporary file created along the way is removed
        before this returns or raises.
        """
        try:
            locator = self._ingest(source, content_type)
        except VideoHubError as exc:
            VIDEO_UPLOADS.labels(status=type(exc).__name__).inc()
            raise
        VIDEO_UPLOADS.labels(status="ok").inc()
        return locator

    def _ingest(self, source: BinaryIO, content_type: str | None) -> Locator:
        media_type = ensure_supported_video(content_type)

        with ExitStack() as cleanup:
            upload = buffer_upload(source, tmp_dir=self.settings.upload_tmp_dir)
            cleanup.callback(discard_temp_file, upload)

            processed_path = self.fast_start.process(upload.name)
            cleanup.callback(remove_path, processed_path)

            aspect = self.classifier.classify(processed_path)
            locator = Locator(bucket=self.settings.s3_bucket, key=generate_asset_key(media_type, aspect.value))
            # rejects a misconfigured bucket before anything is written
            locator.encode()

            try:
                processed = cleanup.enter_context(open(processed_path, "rb"))
            except OSError as exc:
                raise ProcessingError(f"Error opening processed file: {exc}") from exc
            self.storage.put_object(locator.bucket, locator.key, processed, media_type)

        logger.info("video_stored", bucket=locator.bucket, key=locator.key, aspect=aspect.value)
        return locator

    def sign_video(self, video: Video) -> VideoOut:
        out = VideoOut.model_validate(video)
        if video.video_url is None:
            return out
        locator = decode_locator(video.video_url)
        url = self.storage.presign_get(locator.bucket, locator.key, self.settings.presign_ttl_seconds)
        return out.model_copy(update={"video_url": url})
