"""Configuration management using pydantic-settings."""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # https://no-color.org: any non-empty value disables color
    no_color: str = Field(
        default="",
        description="Disable ANSI colors when set to any non-empty value",
    )

    # Rendering
    incipit_width: int = Field(
        default=80,
        ge=1,
        description="Word-wrap width used when printing without the pager",
    )

    # Diagnostics
    incipit_log_file: Path | None = Field(
        default=None,
        description="Write debug logs to this file (the pager owns the terminal)",
    )

    @property
    def no_color_requested(self) -> bool:
        """Whether NO_COLOR asks for uncolored output."""
        return self.no_color != ""


def get_settings() -> Settings:
    """Get settings instance (lazy-loaded)."""
    return Settings()
