"""Engine configuration settings."""
import os
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from typing import Optional


class EngineSettings(BaseSettings):
    """Engine settings loaded from environment variables (TILELINK_*)."""

    # Attempt budgets
    primary_max_attempts: int = 100
    fallback_max_attempts: int = 100

    # Fallback stops early once a candidate reaches this complexity
    target_complexity: float = 0.7

    # Same-type neighbours (of 8) that reject a candidate cell
    cluster_threshold: int = 2

    debug: bool = False

    model_config = SettingsConfigDict(
        env_prefix="TILELINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("primary_max_attempts", "fallback_max_attempts", "cluster_threshold")
    @classmethod
    def _positive(cls, value: int) -> int:
        if value < 1:
            raise ValueError("must be a positive integer")
        return value

    @field_validator("target_complexity")
    @classmethod
    def _unit_interval(cls, value: float) -> float:
        if not 0.0 <= value <= 1.0:
            raise ValueError("must be within [0, 1]")
        return value


_settings: Optional[EngineSettings] = None


def get_settings() -> EngineSettings:
    """Get settings instance (rebuilt on every call when DEBUG=true)."""
    global _settings
    if _settings is None or os.getenv("DEBUG", "false").lower() == "true":
        _settings = EngineSettings()
    return _settings
