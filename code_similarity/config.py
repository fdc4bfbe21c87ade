"""Runtime settings, read from CODESIM_* environment variables or .env."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    corpus_dir: Path = Field(default=Path("."))
    pattern: str = Field(default="**/*.java")
    encoding: str = Field(default="utf-8")
    threshold: float = Field(default=0.0, ge=0.0, le=1.0)
    top_k: int = Field(default=20, ge=1)
    lemmatize: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CODESIM_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, value: str) -> str:
        upper_value = value.upper()
        if upper_value not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {value}. Must be one of {', '.join(sorted(LOG_LEVELS))}."
            )
        return upper_value


def get_settings(**overrides) -> Settings:
    """Settings from the environment, with explicit overrides applied on top.

    Overrides set to None are ignored so unset CLI flags fall through.
    """
    return Settings(**{k: v for k, v in overrides.items() if v is not None})
