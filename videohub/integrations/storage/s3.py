from typing import BinaryIO

import boto3
import structlog
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from videohub.core.config import Settings
from videohub.core.errors import StorageError
from videohub.core.metrics import S3_OPS
from videohub.integrations.storage.base import StorageProvider

logger = structlog.get_logger()


def build_s3_client(settings: Settings):
    return boto3.client(
        "s3",
        endpoint_url=settings.s3_endpoint or None,
        region_name=settings.s3_region,
        aws_access_key_id=settings.s3_access_key or None,
        aws_secret_access_key=settings.s3_secret_key or None,
        config=Config(signature_version="s3v4", retries={"max_attempts": 1, "mode": "standard"}),
    )


class S3StorageProvider(StorageProvider):
    name = "s3"

    def __init__(self, settings: Settings, client=None):
        self.settings = settings
        self.client = client or build_s3_client(settings)

    def put_object(self, bucket: str, key: str, body: BinaryIO, content_type: str) -> None:
        try:
            self.client.put_object(Bucket=bucket, Key=key, Body=body, ContentType=content_type)
        except (BotoCoreError, ClientError) as exc:
            S3_OPS.labels(op="put", status="error").inc()
            logger.warning("s3_put_failed", bucket=bucket, key=key, error=str(exc))
            raise StorageError(f"Error saving file: {exc}") from exc
        S3_OPS.labels(op="put", status="ok").inc()

    def presign_get(self, bucket: str, key: str, expires_in: int) -> str:
        try:
            url = self.client.generate_presigned_url(
                "get_object",
                Params={"Bucket": bucket, "Key": key},
                ExpiresIn=expires_in,
                HttpMethod="GET",
            )
        except (BotoCoreError, ClientError) as exc:
            S3_OPS.labels(op="presign", status="error").inc()
            logger.warning("s3_presign_failed", bucket=bucket, key=key, error=str(exc))
            raise StorageError(f"Could not generate presigned URL: {exc}") from exc
        S3_OPS.labels(op="presign", status="ok").inc()
        return url
