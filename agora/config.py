"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class RelayerSettings(BaseModel):
    """Comment index (relayer) configuration."""

    base_url: str = "http://localhost:3001"
    timeout_seconds: float = 15.0

    # Relayer caps a single page at 100 comments
    page_size: int = 100


class IpfsSettings(BaseModel):
    """Content-addressed store configuration."""

    # Gateway serving GET /ipfs/{cid}; the relayer proxies it by default
    gateway_url: str = "http://localhost:3001"
    timeout_seconds: float = 15.0

    # Upper bound on concurrent content fetches within one tree build
    max_concurrency: int = 16


class APISettings(BaseModel):
    """API configuration."""

    cors_origins: list[str] = [
        "http://localhost:3000",  # Local development
        "http://localhost:5173",  # Vite default
    ]


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, nested with a double underscore:

        RELAYER__BASE_URL=https://relayer.example.org
        IPFS__GATEWAY_URL=https://relayer.example.org
        IPFS__MAX_CONCURRENCY=32
        ENVIRONMENT=production
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows RELAYER__BASE_URL syntax
    )

    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = ""

    host: str = "0.0.0.0"
    port: int = 8000

    # Nested settings
    relayer: RelayerSettings = RelayerSettings()
    ipfs: IpfsSettings = IpfsSettings()
    api: APISettings = APISettings()
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_git_sha(self) -> "Settings":
        """Load git SHA from the version file unless set explicitly."""
        if not self.git_sha:
            self.git_sha = self._load_git_sha()
        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
