from typing import Callable, Protocol

from libs.core.domain.entities import Alert, AlertRequest, CameraRecord

AlertMutation = Callable[[Alert], Alert]


class AlertRepository(Protocol):
    """Alert storage contract."""

    def add(self, alert: Alert) -> None: ...

    def get(self, alert_id: str) -> Alert | None: ...

    def list(self, active_only: bool = False) -> list[Alert]: ...

    def transition(self, alert_id: str, mutation: AlertMutation) -> Alert | None: ...

    def active_count(self) -> int: ...


class CameraRepository(Protocol):
    """Camera registry contract."""

    def get(self, camera_id: str) -> CameraRecord | None: ...

    def list(self) -> list[CameraRecord]: ...

    def set_online(
        self,
        camera_id: str,
        is_online: bool,
    ) -> tuple[CameraRecord, CameraRecord] | None: ...


class AlertNotifier(Protocol):
    """Hands high-severity alerts to on-duty operators."""

    def dispatch(self, alert: Alert) -> None: ...


class AlertForwarder(Protocol):
    """Sends alert creation requests to the alert service."""

    def forward(self, request: AlertRequest) -> None: ...
