"""Camera gateway settings loaded from the environment."""

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class CameraGatewaySettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="CAMERA_GATEWAY_", populate_by_name=True)

    service_name: str = Field(
        default="camera-gateway",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "service_name"),
    )
    alert_service_url: str = Field(default="http://alert-service:8080")
    forward_timeout_sec: float = Field(default=10.0, gt=0.0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


@lru_cache
def get_settings() -> CameraGatewaySettings:
    return CameraGatewaySettings()
