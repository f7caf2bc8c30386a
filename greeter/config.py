from __future__ import annotations

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Ambient knobs only; the greeting text and default name are fixed."""

    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="GREETER_", case_sensitive=False, extra="ignore"
    )

    # Farewell delay in milliseconds
    GOODBYE_DELAY_MS: int = Field(default=1000, ge=0)

    LOG_JSON: bool = Field(default=False)
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def _validate_level(cls, v):  # type: ignore[override]
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level

    @property
    def goodbye_delay_s(self) -> float:
        return self.GOODBYE_DELAY_MS / 1000.0


def load_settings() -> Settings:
    return Settings()
