from libs.core.application.alert_service import AlertService
from libs.infra.telemetry.metrics import AlertServiceMetrics
from services.alert_service.infrastructure.memory_store import InMemoryAlertRepository
from services.alert_service.infrastructure.notifier import SimulatedOperatorNotifier
from services.alert_service.settings import get_settings

settings = get_settings()
metrics = AlertServiceMetrics()
alert_repository = InMemoryAlertRepository()
notifier = SimulatedOperatorNotifier(
    metrics=metrics,
    delay_min_ms=settings.dispatch_delay_min_ms,
    delay_max_ms=settings.dispatch_delay_max_ms,
)
alert_service = AlertService(
    alert_repository=alert_repository,
    notifier=notifier,
    strict_terminal_state=settings.strict_terminal_state,
)
metrics.track_active(alert_repository.active_count)


def get_alert_service() -> AlertService:
    return alert_service


def get_metrics() -> AlertServiceMetrics:
    return metrics


def reset_state() -> None:
    alert_repository.clear()
