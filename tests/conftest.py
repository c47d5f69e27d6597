from pathlib import Path

import pytest

from tests.fakes import FakeProber, FakeRemuxer, FakeStorage, FakeVideoRepository
from videohub.core.config import Settings, get_settings
from videohub.services.video_service import VideoService


@pytest.fixture
def tmp_upload_dir(tmp_path: Path) -> Path:
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_upload_dir: Path) -> Settings:
    return get_settings().model_copy(
        update={"upload_tmp_dir": str(tmp_upload_dir), "s3_bucket": "videohub-test"}
    )


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def remuxer() -> FakeRemuxer:
    return FakeRemuxer()


@pytest.fixture
def prober() -> FakeProber:
    return FakeProber()


@pytest.fixture
def repo() -> FakeVideoRepository:
    return FakeVideoRepository()


@pytest.fixture
def service(settings, storage, remuxer, prober) -> VideoService:
    return VideoService(settings=settings, storage=storage, remuxer=remuxer, prober=prober)
