import pytest

from videohub.core.errors import LocatorError
from videohub.services.locator import Locator, decode_locator, encode_locator, normalize_legacy_locator


@pytest.mark.parametrize(
    ("bucket", "key"),
    [
        ("videohub", "landscape/abc.mp4"),
        ("my.bucket-01", "portrait/x_y-z.mp4"),
        ("Legacy_Bucket", "plain-key"),
    ],
)
def test_round_trip(bucket, key):
    assert decode_locator(encode_locator(bucket, key)) == Locator(bucket, key)


def test_decode_splits_on_first_delimiter():
    assert decode_locator("videohub/other/nested/key.mp4") == Locator("videohub", "other/nested/key.mp4")


@pytest.mark.parametrize(
    "value",
    [
        "",
        None,
        "videohub",
        "videohub/",
        "/landscape/key.mp4",
        "videohub,landscape/key.mp4",
        "https://videohub.s3.us-east-1.amazonaws.com/landscape/key.mp4",
    ],
)
def test_decode_rejects_non_canonical_values(value):
    with pytest.raises(LocatorError):
        decode_locator(value)


def test_encode_rejects_delimiter_in_bucket():
    with pytest.raises(LocatorError):
        encode_locator("a/b", "key")
    with pytest.raises(LocatorError):
        encode_locator("bucket", "")


def test_normalize_comma_form():
    assert normalize_legacy_locator("videohub,landscape/key.mp4") == "videohub/landscape/key.mp4"


def test_normalize_virtual_hosted_url():
    url = "https://videohub.s3.us-east-2.amazonaws.com/portrait/key.mp4"
    assert normalize_legacy_locator(url) == "videohub/portrait/key.mp4"


def test_normalize_keeps_canonical_values():
    assert normalize_legacy_locator("videohub/other/key.mp4") == "videohub/other/key.mp4"


@pytest.mark.parametrize("value", [None, "", "nonsense", "https://example.com/key.mp4", ",key"])
def test_normalize_gives_up_on_unknown_values(value):
    assert normalize_legacy_locator(value) is None
