from videohub.core.config import Settings
from videohub.integrations.media.base import Remuxer, StreamProber
from videohub.integrations.media.ffmpeg import FFmpegRemuxer, FFprobeProber


def get_remuxer(settings: Settings) -> Remuxer:
    return FFmpegRemuxer(settings)


def get_stream_prober(settings: Settings) -> StreamProber:
    return FFprobeProber(settings)
