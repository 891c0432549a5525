from libs.core.application.gateway_service import CameraGatewayService
from libs.infra.telemetry.metrics import CameraGatewayMetrics
from services.camera_gateway.infrastructure.alert_forwarder import HttpAlertForwarder
from services.camera_gateway.infrastructure.camera_registry import (
    InMemoryCameraRepository,
)
from services.camera_gateway.settings import get_settings

settings = get_settings()
metrics = CameraGatewayMetrics()
camera_repository = InMemoryCameraRepository()
forwarder = HttpAlertForwarder(
    base_url=settings.alert_service_url,
    timeout_sec=settings.forward_timeout_sec,
)
gateway_service = CameraGatewayService(
    camera_repository=camera_repository,
    forwarder=forwarder,
)
metrics.track_online(camera_repository.online_count)


def get_gateway_service() -> CameraGatewayService:
    return gateway_service


def get_metrics() -> CameraGatewayMetrics:
    return metrics


def reset_state() -> None:
    camera_repository.reset()
