import math
import os
import tempfile
from typing import Any

import structlog

from videohub.core.constants import AspectClass
from videohub.core.errors import ProcessingError
from videohub.integrations.media.base import Remuxer, StreamProber
from videohub.services.upload_buffer import remove_path

logger = structlog.get_logger()

PROCESSED_PREFIX = "videohub-faststart-"

_RATIO_CLASSES = {
    (16, 9): AspectClass.LANDSCAPE,
    (9, 16): AspectClass.PORTRAIT,
}


def classify_aspect_ratio(width: int, height: int) -> AspectClass:
    # Exact match on the reduced ratio; 1280x722 is not 16:9.
    if width <= 0 or height <= 0:
        return AspectClass.OTHER
    divisor = math.gcd(width, height)
    return _RATIO_CLASSES.get((width // divisor, height // divisor), AspectClass.OTHER)


def _dimension(stream: dict[str, Any], name: str) -> int:
    value = stream.get(name) or 0
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ProcessingError(f"Invalid stream {name}: {value!r}") from exc


class FastStartProcessor:
    def __init__(self, remuxer: Remuxer, tmp_dir: str | None = None):
        self.remuxer = remuxer
        self.tmp_dir = tmp_dir

    def process(self, input_path: str) -> str:
        """Remux ``input_path`` into a new temp file and return its path.

        The input is left untouched. The caller owns the returned file.
        """
        try:
            fd, output_path = tempfile.mkstemp(prefix=PROCESSED_PREFIX, suffix=".mp4", dir=self.tmp_dir)
        except OSError as exc:
            raise ProcessingError(f"Couldn't create temporary file: {exc}") from exc
        os.close(fd)

        try:
            self.remuxer.remux_fast_start(input_path, output_path)
        except BaseException:
            remove_path(output_path)
            raise
        logger.debug("fast_start_done", input=input_path, output=output_path)
        return output_path


class AspectRatioClassifier:
    def __init__(self, prober: StreamProber):
        self.prober = prober

    def classify(self, path: str) -> AspectClass:
        info = self.prober.probe_streams(path)
        streams = info.get("streams")
        if not isinstance(streams, list) or not streams:
            raise ProcessingError("No streams found in video")
        first = streams[0]
        if not isinstance(first, dict):
            raise ProcessingError("Unexpected stream entry in probe output")
        width, height = _dimension(first, "width"), _dimension(first, "height")
        aspect = classify_aspect_ratio(width, height)
        logger.debug("aspect_ratio_classified", width=width, height=height, aspect=aspect.value)
        return aspect
