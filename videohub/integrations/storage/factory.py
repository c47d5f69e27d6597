from videohub.core.config import Settings
from videohub.integrations.storage.base import StorageProvider
from videohub.integrations.storage.s3 import S3StorageProvider


def get_storage_provider(settings: Settings) -> StorageProvider:
    return S3StorageProvider(settings)
