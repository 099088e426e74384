"""Central configuration for the microwave panel service."""
from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT_DIR = Path(__file__).resolve().parents[2]
DEFAULT_ENV_FILE = ROOT_DIR / ".env"


# ============================================================
# Nested Configuration Classes
# ============================================================

class PowerSettings(BaseModel):
    """Power level accumulation on the panel."""
    step_watts: int = Field(50, gt=0, description="Increment per power press, also the lowest level")
    max_watts: int = Field(700, gt=0, description="Highest level before wrapping back to the step")

    @model_validator(mode="after")
    def _check_multiple(self) -> "PowerSettings":
        if self.max_watts < self.step_watts or self.max_watts % self.step_watts:
            raise ValueError("max_watts must be a positive multiple of step_watts")
        return self


class CookSettings(BaseModel):
    """Cooking engine tuning."""
    tick_seconds: float = Field(1.0, gt=0, description="Timer resolution; one tick is one second of cook time")
    tube_max_watts: int = Field(700, gt=0, description="Highest power the power tube accepts")


class Settings(BaseSettings):
    """Environment-driven settings for panel subsystems."""

    # Panel HTTP Server
    panel_host: str = Field("127.0.0.1", description="Host interface for local FastAPI server")
    panel_port: int = Field(5050, description="Port for FastAPI server")
    ui_event_queue_size: int = Field(32, gt=0, description="Max buffered UI events per subscriber")

    # Logging
    log_level: str = Field("INFO", description="Logging level")
    log_directory: Path = Field(ROOT_DIR / "logs", description="Log directory path")
    log_retention_days: int = Field(14, description="Number of log files to retain")

    # Nested Configuration Objects
    power: PowerSettings = Field(default_factory=PowerSettings, description="Power level settings")
    cook: CookSettings = Field(default_factory=CookSettings, description="Cooking engine settings")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> object:
        if isinstance(value, str):
            level = value.strip().upper()
            if level not in logging.getLevelNamesMapping():
                raise ValueError(f"Unknown log level: {value}")
            return level
        return value

    @model_validator(mode="after")
    def _check_power_fits_tube(self) -> "Settings":
        if self.power.max_watts > self.cook.tube_max_watts:
            raise ValueError(
                f"power.max_watts ({self.power.max_watts}) exceeds cook.tube_max_watts ({self.cook.tube_max_watts})"
            )
        return self

    model_config = SettingsConfigDict(
        env_file=str(DEFAULT_ENV_FILE),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache()
def get_settings(override_env_file: Optional[Path] = None) -> Settings:
    """Cached Settings instance; accepts optional env override for tests."""

    if override_env_file:
        return Settings(_env_file=str(override_env_file))
    return Settings()
