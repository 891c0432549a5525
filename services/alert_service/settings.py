"""Alert service settings loaded from the environment."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AlertServiceSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="ALERT_SERVICE_", populate_by_name=True)

    service_name: str = Field(
        default="alert-service",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "service_name"),
    )
    strict_terminal_state: bool = Field(
        default=False,
        description="Reject acknowledge/resolve once an alert is resolved",
    )
    dispatch_delay_min_ms: int = Field(default=10, ge=0)
    dispatch_delay_max_ms: int = Field(default=50, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> AlertServiceSettings:
    return AlertServiceSettings()
