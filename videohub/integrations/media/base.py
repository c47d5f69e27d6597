from typing import Any


class Remuxer:
    name: str = "base"

    def remux_fast_start(self, input_path: str, output_path: str) -> None:
        raise NotImplementedError


class StreamProber:
    name: str = "base"

    def probe_streams(self, path: str) -> dict[str, Any]:
        raise NotImplementedError
