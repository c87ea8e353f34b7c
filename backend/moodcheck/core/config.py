"""
Application configuration and environment settings.
"""
from pydantic_settings import BaseSettings
from pydantic import field_validator
from typing import List, Union


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    APP_NAME: str = "MoodCheck"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./moodcheck.db"
    DB_ECHO: bool = False

    # Storage
    STORAGE_BACKEND: str = "sql"  # Options: "sql" (authoritative), "memory" (demo store)
    PERSIST_SESSION: bool = True  # Keep a shadow copy of the last session in the store

    # JWT
    SECRET_KEY: str = "your-secret-key-change-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_DAYS: int = 7

    # CORS
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:5173", "http://localhost:8080"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS_ORIGINS from comma-separated string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("STORAGE_BACKEND")
    @classmethod
    def check_storage_backend(cls, v):
        if v not in ("sql", "memory"):
            raise ValueError("STORAGE_BACKEND must be 'sql' or 'memory'")
        return v

    # Login rate limiting
    LOGIN_MAX_ATTEMPTS: int = 5
    LOGIN_WINDOW_SECONDS: int = 15 * 60  # 15 minutes

    # Reviews
    REVIEW_COMMENT_MAX_LENGTH: int = 300

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
