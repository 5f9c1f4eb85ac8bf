# portfolio/core/config.py
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Optional, Union
from urllib.parse import quote_plus


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.
    Uses pydantic-settings for validation and type conversion.
    """

    # Application
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"
    APP_HOST: str = "127.0.0.1"
    APP_PORT: int = 8080

    # Database - PostgreSQL
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "root"
    DB_NAME: str = "portfolio_db"
    DB_SSLMODE: str = "disable"
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20

    # Full SQLAlchemy URL; overrides the DB_* parts when set
    DATABASE_URL: Optional[str] = None

    # Create missing tables on startup
    AUTO_CREATE_SCHEMA: bool = True

    # Session cookie
    SESSION_SECRET: str = "change-this-secret-key-in-production"
    SESSION_ALGO: str = "HS256"
    SESSION_COOKIE_NAME: str = "session"
    SESSION_MAX_AGE_DAYS: int = 7
    SESSION_COOKIE_SECURE: bool = False

    # CORS - Can be a comma-separated string or list
    CORS_ORIGINS: Union[List[str], str] = "http://localhost:3000,http://localhost:8080"

    @field_validator('CORS_ORIGINS', mode='before')
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip().rstrip('/') for origin in v.split(',') if origin.strip()]
        elif isinstance(v, list):
            return [origin.strip().rstrip('/') for origin in v if isinstance(origin, str) and origin.strip()]
        return v

    # Observability
    SENTRY_DSN: Optional[str] = None
    SENTRY_ENVIRONMENT: str = "production"
    SENTRY_TRACES_SAMPLE_RATE: float = 0.1

    # Static files and uploads
    PUBLIC_DIR: str = "public"
    UPLOAD_DIR: str = "assets/uploads"
    MAX_UPLOAD_SIZE_MB: int = 5
    ALLOWED_UPLOAD_EXTENSIONS: Union[List[str], str] = ".jpg,.jpeg,.png,.gif,.webp"

    @field_validator('ALLOWED_UPLOAD_EXTENSIONS', mode='before')
    @classmethod
    def parse_allowed_extensions(cls, v):
        """Parse ALLOWED_UPLOAD_EXTENSIONS from comma-separated string or list."""
        if isinstance(v, str):
            return [ext.strip().lower() for ext in v.split(',') if ext.strip()]
        return v

    @property
    def database_url(self) -> str:
        """SQLAlchemy async URL for the configured database."""
        if self.DATABASE_URL:
            return self.DATABASE_URL

        url = (
            f"postgresql+asyncpg://{quote_plus(self.DB_USER)}:{quote_plus(self.DB_PASSWORD)}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )
        # asyncpg takes "ssl" rather than libpq's "sslmode"
        if self.DB_SSLMODE and self.DB_SSLMODE != "disable":
            url += f"?ssl={self.DB_SSLMODE}"
        return url

    @property
    def session_max_age_seconds(self) -> int:
        return self.SESSION_MAX_AGE_DAYS * 24 * 3600

    @property
    def max_upload_size_bytes(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


# Create global settings instance
settings = Settings()
