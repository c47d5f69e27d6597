import json
import subprocess
from typing import Any

import structlog

from videohub.core.config import Settings
from videohub.core.errors import ProcessingError
from videohub.core.metrics import MEDIA_TOOL_RUNS
from videohub.integrations.media.base import Remuxer, StreamProber

logger = structlog.get_logger()


def run_media_tool(tool: str, cmd: list[str], timeout: float) -> subprocess.CompletedProcess[str]:
    """Run an external media tool, raising ``ProcessingError`` unless it exits 0."""
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, timeout=timeout, check=False)
    except FileNotFoundError:
        MEDIA_TOOL_RUNS.labels(tool=tool, status="missing").inc()
        raise ProcessingError(f"{tool} executable not found: {cmd[0]}") from None
    except subprocess.TimeoutExpired as exc:
        MEDIA_TOOL_RUNS.labels(tool=tool, status="timeout").inc()
        logger.warning("media_tool_timeout", tool=tool, timeout=timeout)
        raise ProcessingError(f"{tool} timed out after {timeout}s") from exc
    except OSError as exc:
        MEDIA_TOOL_RUNS.labels(tool=tool, status="error").inc()
        raise ProcessingError(f"{tool} could not be started: {exc}") from exc

    if result.returncode != 0:
        MEDIA_TOOL_RUNS.labels(tool=tool, status="error").inc()
        stderr = (result.stderr or "").strip()
        logger.warning("media_tool_failed", tool=tool, returncode=result.returncode, stderr=stderr[-2000:])
        raise ProcessingError(
            f"{tool} exited with status {result.returncode}: {stderr}",
            returncode=result.returncode,
            stderr=stderr,
        )
    MEDIA_TOOL_RUNS.labels(tool=tool, status="ok").inc()
    return result


class FFmpegRemuxer(Remuxer):
    name = "ffmpeg"

    def __init__(self, settings: Settings):
        self.ffmpeg_path = settings.ffmpeg_path
        self.timeout = settings.media_tool_timeout_seconds

    def remux_fast_start(self, input_path: str, output_path: str) -> None:
        cmd = [
            self.ffmpeg_path,
            "-y",
            "-v",
            "error",
            "-i",
            input_path,
            "-c",
            "copy",
            "-movflags",
            "faststart",
            "-f",
            "mp4",
            output_path,
        ]
        run_media_tool(self.name, cmd, self.timeout)


class FFprobeProber(StreamProber):
    name = "ffprobe"

    def __init__(self, settings: Settings):
        self.ffprobe_path = settings.ffprobe_path
        self.timeout = settings.media_tool_timeout_seconds

    def probe_streams(self, path: str) -> dict[str, Any]:
        cmd = [self.ffprobe_path, "-v", "error", "-print_format", "json", "-show_streams", path]
        result = run_media_tool(self.name, cmd, self.timeout)
        try:
            data = json.loads(result.stdout)
        except json.JSONDecodeError as exc:
            raise ProcessingError(f"Failed to parse ffprobe output: {exc}") from exc
        if not isinstance(data, dict):
            raise ProcessingError("Unexpected ffprobe output: expected a JSON object")
        return data
