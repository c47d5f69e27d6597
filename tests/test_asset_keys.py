import re

from videohub.core.constants import AspectClass
from videohub.services.asset_keys import generate_asset_key, media_type_to_ext

KEY_RE = re.compile(r"^landscape/[A-Za-z0-9_-]{43}\.mp4$")


def test_key_layout():
    key = generate_asset_key("video/mp4", AspectClass.LANDSCAPE.value)
    assert KEY_RE.match(key)


def test_keys_do_not_repeat():
    keys = {generate_asset_key("video/mp4", "other") for _ in range(1000)}
    assert len(keys) == 1000


def test_extension_follows_subtype():
    assert media_type_to_ext("video/mp4") == ".mp4"
    assert media_type_to_ext("image/png") == ".png"
    assert media_type_to_ext("video/quicktime") == ".quicktime"


def test_extension_falls_back_for_malformed_types():
    assert media_type_to_ext("videomp4") == ".bin"
    assert media_type_to_ext("") == ".bin"
    assert media_type_to_ext("video/") == ".bin"
    assert media_type_to_ext("a/b/c") == ".bin"
    assert generate_asset_key("garbage", "portrait").endswith(".bin")
