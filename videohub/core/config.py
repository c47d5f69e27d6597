from functools import lru_cache
from pathlib import Path
from typing import Literal
from urllib.parse import quote_plus

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_env: Literal["dev", "staging", "prod"] = "dev"
    app_name: str = "VideoHub API"
    api_prefix: str = "/api/v1"
    debug: bool = False
    cors_allow_origins: str = "http://localhost:5173,http://localhost:3000"
    log_level: str = "INFO"
    log_json: bool = True

    database_url: str = ""
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "videohub"
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_sslmode: Literal["disable", "allow", "prefer", "require", "verify-ca", "verify-full"] = "disable"

    jwt_secret_key: str = Field(default="change-me-access", min_length=16)
    jwt_access_ttl_min: int = 60

    upload_max_bytes: int = 1 << 30
    upload_tmp_dir: str | None = None

    ffmpeg_path: str = "ffmpeg"
    ffprobe_path: str = "ffprobe"
    media_tool_timeout_seconds: float = Field(default=300, gt=0)

    s3_endpoint: str = ""
    s3_region: str = "us-east-1"
    s3_bucket: str = "videohub"
    s3_access_key: str = ""
    s3_secret_key: str = ""
    presign_ttl_seconds: int = 5 * 60

    @property
    def async_database_url(self) -> str:
        if self.database_url:
            if self.database_url.startswith("postgresql+asyncpg://"):
                return self.database_url
            if self.database_url.startswith("postgresql://"):
                return "postgresql+asyncpg://" + self.database_url.removeprefix("postgresql://")
            return self.database_url
        user = quote_plus(self.db_user)
        password = quote_plus(self.db_password)
        ssl_query = ""
        if self.db_sslmode == "require":
            ssl_query = "?ssl=require"
        return (
            f"postgresql+asyncpg://{user}:{password}@{self.db_host}:{self.db_port}/{self.db_name}"
            f"{ssl_query}"
        )

    @property
    def cors_origins(self) -> list[str]:
        return [item.strip() for item in self.cors_allow_origins.split(",") if item.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()
