"""Client configuration via environment variables."""

from typing import Any, Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="AIRPORT_", env_file=".env", extra="ignore"
    )

    # Airport REST service
    base_url: str = "http://localhost:8080"

    # Whole-request timeout (seconds)
    timeout: float = 10.0

    # CLI only; the library never configures logging itself
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value


settings = ClientSettings()
