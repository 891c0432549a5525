from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from uuid import uuid4

from libs.core.application.contracts import AlertNotifier, AlertRepository
from libs.core.domain.entities import (
    SEVERITY_CRITICAL,
    SEVERITY_HIGH,
    STATUS_ACKNOWLEDGED,
    STATUS_ACTIVE,
    STATUS_RESOLVED,
    Alert,
    AlertRequest,
)

logger = logging.getLogger(__name__)

DISPATCH_SEVERITIES = frozenset({SEVERITY_HIGH, SEVERITY_CRITICAL})


class AlertNotFoundError(LookupError):
    """Raised when a transition targets an unknown alert."""


class AlertTransitionError(ValueError):
    """Raised when strict mode rejects a transition out of Resolved."""


@dataclass
class AlertStats:
    """Aggregate counts over a point-in-time snapshot of the store."""

    total: int
    active: int
    acknowledged: int
    resolved: int
    by_severity: dict[str, int]
    by_type: dict[str, int]


class AlertService:
    """Application service for alert ingestion and lifecycle."""

    def __init__(
        self,
        alert_repository: AlertRepository,
        notifier: AlertNotifier,
        strict_terminal_state: bool = False,
    ) -> None:
        self._alerts = alert_repository
        self._notifier = notifier
        self._strict_terminal_state = strict_terminal_state

    def create_alert(self, request: AlertRequest) -> Alert:
        alert = Alert(
            alert_id=str(uuid4()),
            type=request.type,
            source=request.source,
            severity=request.severity,
            message=request.message,
            timestamp=ensure_utc(request.timestamp) if request.timestamp else _utc_now(),
            status=STATUS_ACTIVE,
            metadata=request.metadata,
        )
        self._alerts.add(alert)
        logger.info(
            "New %s alert received: %s from %s (alert_id=%s)",
            alert.severity,
            alert.type,
            alert.source,
            alert.alert_id,
        )

        if should_dispatch(alert.severity):
            self._notifier.dispatch(alert)
        return alert

    def get_alert(self, alert_id: str) -> Alert | None:
        return self._alerts.get(alert_id)

    def list_alerts(self, active_only: bool = False) -> list[Alert]:
        alerts = self._alerts.list(active_only=active_only)
        logger.info(
            "Retrieved %d alerts (active_only=%s)", len(alerts), active_only
        )
        return sorted(alerts, key=lambda item: item.timestamp, reverse=True)

    def acknowledge(self, alert_id: str, operator_id: str) -> Alert:
        def mutation(alert: Alert) -> Alert:
            self._check_not_terminal(alert)
            return replace(
                alert,
                status=STATUS_ACKNOWLEDGED,
                acknowledged_by=operator_id,
                acknowledged_at=_utc_now(),
            )

        updated = self._alerts.transition(alert_id, mutation)
        if updated is None:
            logger.warning("Cannot acknowledge - Alert not found: %s", alert_id)
            raise AlertNotFoundError(alert_id)

        logger.info(
            "Alert %s acknowledged by operator %s. Response time: %.3fs",
            alert_id,
            operator_id,
            _elapsed_sec(updated.timestamp, updated.acknowledged_at),
        )
        return updated

    def resolve(self, alert_id: str, resolution: str) -> Alert:
        def mutation(alert: Alert) -> Alert:
            self._check_not_terminal(alert)
            return replace(
                alert,
                status=STATUS_RESOLVED,
                resolution=resolution,
                resolved_at=_utc_now(),
            )

        updated = self._alerts.transition(alert_id, mutation)
        if updated is None:
            logger.warning("Cannot resolve - Alert not found: %s", alert_id)
            raise AlertNotFoundError(alert_id)

        logger.info(
            "Alert %s resolved. Resolution: %s. Total time: %.3fs",
            alert_id,
            resolution,
            _elapsed_sec(updated.timestamp, updated.resolved_at),
        )
        return updated

    def get_stats(self) -> AlertStats:
        alerts = self._alerts.list()
        statuses = Counter(alert.status for alert in alerts)
        stats = AlertStats(
            total=len(alerts),
            active=statuses[STATUS_ACTIVE],
            acknowledged=statuses[STATUS_ACKNOWLEDGED],
            resolved=statuses[STATUS_RESOLVED],
            by_severity=dict(Counter(alert.severity for alert in alerts)),
            by_type=dict(Counter(alert.type for alert in alerts)),
        )
        logger.info(
            "Alert statistics retrieved. Active: %d, Total: %d",
            stats.active,
            stats.total,
        )
        return stats

    def active_count(self) -> int:
        return self._alerts.active_count()

    def _check_not_terminal(self, alert: Alert) -> None:
        if self._strict_terminal_state and alert.status == STATUS_RESOLVED:
            raise AlertTransitionError("Alert already resolved")


def should_dispatch(severity: str) -> bool:
    return severity in DISPATCH_SEVERITIES


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _elapsed_sec(start: datetime, end: datetime | None) -> float:
    if end is None:
        return 0.0
    return (end - start).total_seconds()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
