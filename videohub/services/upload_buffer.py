import os
import shutil
import tempfile
from typing import IO, BinaryIO

import structlog

from videohub.core.errors import ProcessingError

logger = structlog.get_logger()

UPLOAD_PREFIX = "videohub-upload-"
COPY_CHUNK_SIZE = 1024 * 1024


def buffer_upload(source: BinaryIO, tmp_dir: str | None = None, suffix: str = ".mp4") -> IO[bytes]:
    """Copy ``source`` into a new temporary file positioned at offset 0.

    The caller owns the returned file and must close and unlink it.
    """
    try:
        target = tempfile.NamedTemporaryFile(prefix=UPLOAD_PREFIX, suffix=suffix, dir=tmp_dir, delete=False)
    except OSError as exc:
        raise ProcessingError(f"Couldn't create temporary file: {exc}") from exc

    try:
        shutil.copyfileobj(source, target, COPY_CHUNK_SIZE)
        target.flush()
        target.seek(0)
    except BaseException as exc:
        discard_temp_file(target)
        if isinstance(exc, (OSError, ValueError)):
            raise ProcessingError(f"Error saving file: {exc}") from exc
        raise
    return target


def discard_temp_file(handle: IO[bytes]) -> None:
    handle.close()
    remove_path(handle.name)


def remove_path(path: str) -> None:
    try:
        os.remove(path)
    except FileNotFoundError:
        pass
    except OSError as exc:
        logger.warning("temp_file_remove_failed", path=path, error=str(exc))
