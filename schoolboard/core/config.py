import logging
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

# Only acceptable for local development; production refuses to start without JWT_SECRET.
DEV_FALLBACK_JWT_SECRET = "schoolboard-dev-insecure-secret"


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    app_env: str = Field("development", alias="APP_ENV")
    database_url: str = Field("sqlite+aiosqlite:///./schoolboard.db", alias="DATABASE_URL")

    jwt_secret: Optional[str] = Field(None, alias="JWT_SECRET")
    jwt_algorithm: str = Field("HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(24 * 60, alias="ACCESS_TOKEN_EXPIRE_MINUTES")

    log_level: str = Field("INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(None, alias="LOG_FILE")
    cors_origins: str = Field("*", alias="CORS_ORIGINS")

    admin_email: Optional[str] = Field(None, alias="ADMIN_EMAIL")
    admin_password: Optional[str] = Field(None, alias="ADMIN_PASSWORD")
    admin_name: str = Field("Administrator", alias="ADMIN_NAME")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    @property
    def cors_origin_list(self) -> List[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


settings = Settings()

_warned_fallback = False


def resolve_jwt_secret(config: Optional[Settings] = None) -> str:
    """Return the token signing key.

    Raises RuntimeError in production when JWT_SECRET is unset. In development the
    insecure fallback is returned and a warning is logged once per process.
    """
    global _warned_fallback
    config = config or settings
    if config.jwt_secret:
        return config.jwt_secret
    if config.is_production:
        raise RuntimeError("JWT_SECRET must be set when APP_ENV=production")
    if not _warned_fallback:
        logger.warning("JWT_SECRET is not set; using an insecure development key")
        _warned_fallback = True
    return DEV_FALLBACK_JWT_SECRET
