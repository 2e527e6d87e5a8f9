"""Configuration management for Chat Markup."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Speaker labels
    persona_name: str = Field(
        default="Assistant",
        alias="CHAT_MARKUP_PERSONA_NAME",
    )
    user_label: str = Field(
        default="You",
        alias="CHAT_MARKUP_USER_LABEL",
    )

    # HTML presentation
    line_gap_class: str = Field(
        default="mt-2",
        alias="CHAT_MARKUP_LINE_GAP_CLASS",
    )
    wrapper_class: str = Field(
        default="whitespace-pre-wrap break-words",
        alias="CHAT_MARKUP_WRAPPER_CLASS",
    )

    # Terminal presentation
    code_style: str = Field(
        default="bold cyan on grey23",
        alias="CHAT_MARKUP_CODE_STYLE",
    )

    # Word document presentation
    docx_font: str = Field(
        default="Calibri",
        alias="CHAT_MARKUP_DOCX_FONT",
    )
    docx_code_font: str = Field(
        default="Consolas",
        alias="CHAT_MARKUP_DOCX_CODE_FONT",
    )

    log_level: str = Field(
        default="WARNING",
        alias="CHAT_MARKUP_LOG_LEVEL",
    )


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
