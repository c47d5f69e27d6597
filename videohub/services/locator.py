"""Encoding of the object-store locator persisted on a video record.

The only format written or read is ``{bucket}/{key}``; it is decoded by
splitting on the first ``/``. Two legacy forms exist in older rows, the
comma-joined ``{bucket},{key}`` and a virtual-hosted S3 URL. They are not
accepted by :func:`decode_locator`; :func:`normalize_legacy_locator` rewrites
them and is used by the locator migration.
"""

import re
from dataclasses import dataclass
from urllib.parse import unquote, urlsplit

from videohub.core.errors import LocatorError

DELIMITER = "/"
_BUCKET_RE = re.compile(r"^[A-Za-z0-9._-]+$")
_VIRTUAL_HOST_RE = re.compile(r"^(?P<bucket>[A-Za-z0-9._-]+)\.s3(?:[.-](?P<region>[a-z0-9-]+))?\.amazonaws\.com$")


@dataclass(frozen=True)
class Locator:
    bucket: str
    key: str

    def encode(self) -> str:
        return encode_locator(self.bucket, self.key)


def _check(bucket: str, key: str) -> None:
    if not bucket or not _BUCKET_RE.match(bucket):
        raise LocatorError(f"Invalid bucket name in locator: {bucket!r}")
    if not key or key.startswith(DELIMITER):
        raise LocatorError(f"Invalid object key in locator: {key!r}")


def encode_locator(bucket: str, key: str) -> str:
    _check(bucket, key)
    return f"{bucket}{DELIMITER}{key}"


def decode_locator(value: str | None) -> Locator:
    if not value or DELIMITER not in value:
        raise LocatorError(f"Malformed video locator: {value!r}")
    bucket, key = value.split(DELIMITER, 1)
    _check(bucket, key)
    return Locator(bucket=bucket, key=key)


def normalize_legacy_locator(value: str | None) -> str | None:
    if not value:
        return None
    value = value.strip()

    if "://" in value:
        parts = urlsplit(value)
        host = (parts.hostname or "").lower()
        match = _VIRTUAL_HOST_RE.match(host)
        key = unquote(parts.path.lstrip("/"))
        if not match or not key:
            return None
        return _encode_or_none(match.group("bucket"), key)

    if "," in value:
        bucket, key = value.split(",", 1)
        return _encode_or_none(bucket.strip(), key.strip())

    try:
        return decode_locator(value).encode()
    except LocatorError:
        return None


def _encode_or_none(bucket: str, key: str) -> str | None:
    try:
        return encode_locator(bucket, key)
    except LocatorError:
        return None
