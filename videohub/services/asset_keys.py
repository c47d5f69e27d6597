import posixpath
import secrets

from videohub.core.constants import ASSET_ID_BYTES, FALLBACK_EXTENSION


def media_type_to_ext(media_type: str) -> str:
    parts = media_type.split("/")
    if len(parts) != 2 or not parts[0] or not parts[1]:
        return FALLBACK_EXTENSION
    return "." + parts[1]


def new_asset_id() -> str:
    # 32 random bytes -> 43 url-safe base64 chars, no padding
    return secrets.token_urlsafe(ASSET_ID_BYTES)


def generate_asset_key(media_type: str, prefix: str) -> str:
    return posixpath.join(str(prefix), new_asset_id() + media_type_to_ext(media_type))
