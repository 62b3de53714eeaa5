from __future__ import annotations

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed runtime settings."""

    app_name: str = "PulseSignal"
    env: str = "dev"
    log_level: str = "INFO"

    strategy: Literal["points", "rsi-ma"] = "points"
    price_source: Literal["synthetic", "yfinance"] = "synthetic"
    history_length: int = Field(default=50, gt=0)
    schedule_minutes: int = Field(default=2, gt=0)
    random_seed: int | None = None
    symbols: str | None = None

    @field_validator("random_seed", "symbols", mode="before")
    @classmethod
    def _blank_to_none(cls, value: object) -> object:
        if isinstance(value, str) and value.strip() == "":
            return None
        return value

    def symbol_list(self) -> list[str] | None:
        if self.symbols is None:
            return None
        return [s.strip() for s in self.symbols.split(",") if s.strip()]

    model_config = SettingsConfigDict(
        env_prefix="PULSESIG_",
        env_file=".env",
        env_file_encoding="utf-8-sig",
        extra="ignore",
    )
