"""Application settings using pydantic-settings."""

from functools import cache
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from trackbridge.config import ResolverConfig
from trackbridge.lib.identifiers import DEFAULT_SERVICE_BASE_URL

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="TRACKBRIDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # YouTube Data API credential (API tier is skipped when unset)
    youtube_api_key: str | None = Field(
        default=None, description="YouTube Data API v3 key"
    )

    # Server settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    reload: bool = Field(default=False, description="Enable auto-reload")
    log_level: LogLevel = Field(default="INFO", description="Log level")

    # Upstream settings
    request_timeout: float = Field(
        default=10.0, gt=0, description="Upstream request timeout in seconds"
    )
    service_base_url: str = Field(
        default=DEFAULT_SERVICE_BASE_URL,
        description="Base URL of synthesized track links",
    )

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    def resolver_config(self) -> ResolverConfig:
        """Build the library configuration from these settings."""
        return ResolverConfig(
            api_key=self.youtube_api_key or None,
            service_base_url=self.service_base_url,
            request_timeout=self.request_timeout,
        )


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
