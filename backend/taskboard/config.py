"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (the default JWT secret is
      for local development only and is reported at startup)
    - get_settings() is cached (lru_cache): single instance per process
    - Storage location is resolved here once; nothing else reads the environment

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - mirror_file is opt-in: set it when data_file lives on ephemeral storage
      such as /tmp on a serverless host
"""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-secret-key-change-in-production"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Storage
    storage_backend: Literal["json", "sql"] = "json"
    data_file: Path = Path("data.json")
    mirror_file: Path | None = None
    database_url: str = "sqlite:///taskboard.db"

    @field_validator("mirror_file", mode="before")
    @classmethod
    def blank_mirror_is_none(cls, v):
        """MIRROR_FILE= (empty) disables the mirror."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    # Credentials
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    bcrypt_rounds: int = Field(10, ge=4, le=31)

    # API
    cors_origins: list[str] = ["http://localhost:3000"]
    enable_debug_routes: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    return Settings()
