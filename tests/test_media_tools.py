import json
import subprocess

import pytest

from videohub.core.config import get_settings
from videohub.core.errors import ProcessingError
from videohub.integrations.media import ffmpeg as ffmpeg_module
from videohub.integrations.media.ffmpeg import FFmpegRemuxer, FFprobeProber


@pytest.fixture
def calls(monkeypatch):
    recorded = []

    def install(returncode=0, stdout="", stderr="", exc=None):
        def fake_run(cmd, **kwargs):
            recorded.append((cmd, kwargs))
            if exc is not None:
                raise exc
            return subprocess.CompletedProcess(cmd, returncode, stdout=stdout, stderr=stderr)

        monkeypatch.setattr(ffmpeg_module.subprocess, "run", fake_run)
        return recorded

    return install


def test_remux_invokes_ffmpeg_with_faststart(calls):
    recorded = calls()
    FFmpegRemuxer(get_settings()).remux_fast_start("/tmp/in.mp4", "/tmp/out.mp4")

    cmd, kwargs = recorded[0]
    assert cmd[0] == "ffmpeg"
    assert cmd[cmd.index("-i") + 1] == "/tmp/in.mp4"
    assert cmd[cmd.index("-movflags") + 1] == "faststart"
    assert cmd[cmd.index("-c") + 1] == "copy"
    assert cmd[-1] == "/tmp/out.mp4"
    assert kwargs["timeout"] == get_settings().media_tool_timeout_seconds


def test_remux_failure_carries_exit_status_and_stderr(calls):
    calls(returncode=1, stderr="moov atom not found\n")
    with pytest.raises(ProcessingError) as exc_info:
        FFmpegRemuxer(get_settings()).remux_fast_start("in.mp4", "out.mp4")
    assert exc_info.value.returncode == 1
    assert exc_info.value.stderr == "moov atom not found"


def test_missing_binary(calls):
    calls(exc=FileNotFoundError("ffmpeg"))
    with pytest.raises(ProcessingError, match="not found"):
        FFmpegRemuxer(get_settings()).remux_fast_start("in.mp4", "out.mp4")


def test_timeout(calls):
    calls(exc=subprocess.TimeoutExpired(["ffprobe"], 300))
    with pytest.raises(ProcessingError, match="timed out"):
        FFprobeProber(get_settings()).probe_streams("in.mp4")


def test_probe_returns_parsed_streams(calls):
    output = {"streams": [{"index": 0, "codec_type": "video", "width": 1920, "height": 1080}]}
    recorded = calls(stdout=json.dumps(output))
    assert FFprobeProber(get_settings()).probe_streams("clip.mp4") == output

    cmd, _ = recorded[0]
    assert cmd[0] == "ffprobe"
    assert "-show_streams" in cmd
    assert cmd[cmd.index("-print_format") + 1] == "json"
    assert cmd[-1] == "clip.mp4"


@pytest.mark.parametrize("stdout", ["", "not json", "[1, 2]"])
def test_probe_rejects_unparseable_output(calls, stdout):
    calls(stdout=stdout)
    with pytest.raises(ProcessingError):
        FFprobeProber(get_settings()).probe_streams("clip.mp4")
