# wordhoard\shared\config.py
from enum import Enum
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordhoard.core.domain.models import ReferenceScope


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class StorageBackend(str, Enum):
    FILESYSTEM = "filesystem"
    MEMORY = "memory"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic; every field can be set from the
    environment or a .env file.
    """

    # --- Application Meta ---
    APP_NAME: str = "wordhoard"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "wordhoard-api"
    OTEL_EXPORTER_OTLP_ENDPOINT: Optional[str] = None

    # --- Persistence ---
    STORAGE_BACKEND: StorageBackend = StorageBackend.FILESYSTEM
    LEXICON_DATA_DIR: str = "data/lexicon"
    SHARD_LOCK_TIMEOUT_SEC: float = Field(5.0, gt=0)

    # --- Moderation ---
    REPORT_PENALTY: int = Field(2, ge=0)
    APPROVAL_WEIGHT: int = Field(1, ge=0)
    REFERENCE_DEDUP_SCOPE: ReferenceScope = ReferenceScope.WORD

    # --- Authentication (set by the upstream auth proxy) ---
    AUTH_USER_HEADER: str = "X-Authenticated-User"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
