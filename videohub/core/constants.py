from enum import StrEnum

SUPPORTED_VIDEO_TYPE = "video/mp4"
UPLOAD_FORM_FIELD = "video"
FALLBACK_EXTENSION = ".bin"
ASSET_ID_BYTES = 32


class AspectClass(StrEnum):
    LANDSCAPE = "landscape"
    PORTRAIT = "portrait"
    OTHER = "other"
