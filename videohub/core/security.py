from datetime import UTC, datetime, timedelta
from typing import Any
from uuid import UUID

import jwt

from videohub.core.config import Settings, get_settings
from videohub.core.errors import AuthError


def create_access_token(user_id: UUID, settings: Settings | None = None, ttl: timedelta | None = None) -> str:
    settings = settings or get_settings()
    now = datetime.now(UTC)
    ttl = ttl if ttl is not None else timedelta(minutes=settings.jwt_access_ttl_min)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "type": "access",
        "iat": int(now.timestamp()),
        "exp": int((now + ttl).timestamp()),
    }
    return jwt.encode(payload, settings.jwt_secret_key, algorithm="HS256")


def decode_access_token(token: str, settings: Settings | None = None) -> dict[str, Any]:
    settings = settings or get_settings()
    return jwt.decode(token, settings.jwt_secret_key, algorithms=["HS256"])


def user_id_from_token(token: str, settings: Settings | None = None) -> UUID:
    try:
        payload = decode_access_token(token, settings)
        if payload.get("type") != "access":
            raise ValueError("invalid token type")
        return UUID(payload["sub"])
    except (jwt.PyJWTError, KeyError, TypeError, ValueError) as exc:
        raise AuthError("Couldn't validate JWT") from exc
