from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from videohub.core.config import get_settings
from videohub.core.errors import AuthError
from videohub.core.security import create_access_token, user_id_from_token


def test_token_round_trip():
    user_id = uuid4()
    assert user_id_from_token(create_access_token(user_id)) == user_id


def test_expired_token_is_rejected():
    token = create_access_token(uuid4(), ttl=timedelta(seconds=-30))
    with pytest.raises(AuthError):
        user_id_from_token(token)


def test_token_signed_with_other_secret_is_rejected():
    token = jwt.encode({"sub": str(uuid4()), "type": "access"}, "some-other-secret-value", algorithm="HS256")
    with pytest.raises(AuthError):
        user_id_from_token(token)


@pytest.mark.parametrize("claims", [{"sub": "not-a-uuid", "type": "access"}, {"sub": str(uuid4()), "type": "refresh"}, {"type": "access"}])
def test_bad_claims_are_rejected(claims):
    token = jwt.encode(claims, get_settings().jwt_secret_key, algorithm="HS256")
    with pytest.raises(AuthError):
        user_id_from_token(token)


def test_garbage_token_is_rejected():
    with pytest.raises(AuthError):
        user_id_from_token("not.a.jwt")
