import re

from videohub.core.constants import SUPPORTED_VIDEO_TYPE
from videohub.core.errors import ValidationError

_TOKEN = r"[A-Za-z0-9!#$&^_.+-]+"
_MEDIA_TYPE_RE = re.compile(rf"^({_TOKEN})/({_TOKEN})$")


def parse_media_type(value: str | None) -> str:
    """Return the bare ``type/subtype`` of a Content-Type value, lowercased."""
    if not value or not value.strip():
        raise ValidationError("Media type missing")
    bare = value.split(";", 1)[0].strip()
    match = _MEDIA_TYPE_RE.match(bare)
    if not match:
        raise ValidationError(f"Invalid media type: {value!r}")
    return f"{match.group(1)}/{match.group(2)}".lower()


def ensure_supported_video(value: str | None) -> str:
    media_type = parse_media_type(value)
    # exact match only: "video/mp4; codecs=..." is a different declared type
    if media_type != SUPPORTED_VIDEO_TYPE or ";" in value:
        raise ValidationError(f"Wrong media type, {SUPPORTED_VIDEO_TYPE} accepted")
    return media_type
