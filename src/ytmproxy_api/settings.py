"""Application settings using pydantic-settings."""

from functools import cache
from typing import Annotated, Literal

from pydantic import BeforeValidator, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from ytmproxy.providers import available_providers

LogLevel = Annotated[
    Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    BeforeValidator(lambda v: v.upper() if isinstance(v, str) else v),
]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="YTMPROXY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server settings
    host: str = Field(default="127.0.0.1", description="Server host")
    port: int = Field(default=8000, description="Server port")
    reload: bool = Field(default=False, description="Enable auto-reload")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: LogLevel = Field(default="INFO", description="Log level")

    # CORS settings
    cors_origins: list[str] = Field(default=["*"], description="Allowed CORS origins")

    # Provider settings
    metadata_provider: str = Field(
        default="ytmusicapi", description="Registered metadata provider name"
    )
    language: str = Field(default="en", description="Metadata response language")
    location: str = Field(default="", description="Metadata response location")

    # Timeouts
    provider_timeout_seconds: float = Field(
        default=20.0, gt=0, description="Budget for one metadata provider call"
    )
    extraction_timeout_seconds: float = Field(
        default=60.0, gt=0, description="Budget for a whole stream extraction"
    )

    # yt-dlp fallback
    ytdlp_player_clients: list[str] = Field(
        default_factory=list,
        description="yt-dlp player_client override for the fallback extractor",
    )

    @field_validator("metadata_provider")
    @classmethod
    def validate_metadata_provider(cls, v: str) -> str:
        if v not in available_providers():
            raise ValueError(
                f"Unknown metadata provider: {v} "
                f"(available: {', '.join(available_providers())})"
            )
        return v


@cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
