from pydantic_settings import BaseSettings
from pydantic import AliasChoices, Field, field_validator, model_validator
from typing import Optional
import os


# Used only outside production when SESSION_SECRET is unset
DEVELOPMENT_SESSION_SECRET = "default_secret_for_development"


def normalize_database_url(v: str) -> str:
    """Rewrite sync driver URLs to their asyncio equivalents"""
    if v.startswith("postgresql://"):
        return v.replace("postgresql://", "postgresql+asyncpg://", 1)
    if v.startswith("sqlite:///"):
        return v.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    return v


class Settings(BaseSettings):
    """Application settings - all configurable via environment variables"""

    # ==========================================
    # Application
    # ==========================================
    APP_NAME: str = "M&E Portal"
    # NODE_ENV is honoured when ENVIRONMENT is not set
    ENVIRONMENT: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
    )
    DEBUG: bool = False

    # Server Configuration
    SERVER_HOST: str = "0.0.0.0"
    SERVER_PORT: int = 8000

    # ==========================================
    # Database
    # ==========================================
    DATABASE_URL: str = "sqlite+aiosqlite:///./me_portal.db"
    DB_ECHO: bool = False

    # ==========================================
    # Sessions
    # ==========================================
    SESSION_SECRET: Optional[str] = None
    SESSION_COOKIE_NAME: str = "ME_session"
    SESSION_MAX_AGE_DAYS: int = 30
    SESSION_ALGORITHM: str = "HS256"
    BCRYPT_ROUNDS: int = 12  # 4 for tests (fast), 12 for prod (secure)

    # ==========================================
    # Rate Limiting
    # ==========================================
    RATE_LIMIT_ENABLED: bool = True
    LOGIN_RATE_LIMIT: str = "10/minute"

    # ==========================================
    # Logging
    # ==========================================
    LOG_LEVEL: str = "INFO"
    LOG_FILE: str = "logs/app.log"

    # ==========================================
    # Bootstrap admin (scripts/init_db.py)
    # ==========================================
    ADMIN_NAME: str = "Administrator"
    ADMIN_EMAIL: str = ""
    ADMIN_PASSWORD: str = ""

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"
        frozen = True

    @field_validator("DATABASE_URL")
    @classmethod
    def _async_driver(cls, v: str) -> str:
        return normalize_database_url(v)

    @field_validator("ENVIRONMENT")
    @classmethod
    def _lower_environment(cls, v: str) -> str:
        return v.strip().lower()

    @model_validator(mode="after")
    def _require_secret_in_production(self):
        """A production process must never sign cookies with the fallback secret"""
        if self.ENVIRONMENT == "production" and not self.SESSION_SECRET:
            raise ValueError("SESSION_SECRET must be set in production")
        return self

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def cookie_secure(self) -> bool:
        return self.is_production

    @property
    def session_max_age_seconds(self) -> int:
        return self.SESSION_MAX_AGE_DAYS * 24 * 60 * 60

    @property
    def using_fallback_secret(self) -> bool:
        return not self.SESSION_SECRET

    @property
    def effective_session_secret(self) -> str:
        return self.SESSION_SECRET or DEVELOPMENT_SESSION_SECRET


# Create settings instance
settings = Settings()

if settings.LOG_FILE:
    os.makedirs(os.path.dirname(settings.LOG_FILE) or ".", exist_ok=True)
