from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class CalculatorSettings(BaseSettings):
    app_name: str = "Calculator"
    app_version: str = "0.1.0"

    log_level: str = "WARNING"
    log_json: bool = True
    chain_end_command: str = Field(default="end", min_length=1)

    model_config = SettingsConfigDict(
        env_prefix="CHAINCALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def _normalise_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level


@lru_cache
def get_settings() -> CalculatorSettings:
    return CalculatorSettings()
