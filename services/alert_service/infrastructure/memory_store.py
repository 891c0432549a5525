"""In-memory alert storage with per-alert locking."""

from __future__ import annotations

import threading

from libs.core.application.contracts import AlertMutation
from libs.core.domain.entities import STATUS_ACTIVE, Alert


class InMemoryAlertRepository:
    """Alert store keyed by alert id.

    Each alert has its own lock so transitions on different alerts never
    wait on each other. The index lock only covers key registration and
    snapshot copies.
    """

    def __init__(self) -> None:
        self._index_lock = threading.Lock()
        self._counter_lock = threading.Lock()
        self._alerts: dict[str, Alert] = {}
        self._locks: dict[str, threading.Lock] = {}
        self._active = 0

    def add(self, alert: Alert) -> None:
        with self._index_lock:
            if alert.alert_id in self._alerts:
                raise ValueError(f"Alert already exists: {alert.alert_id}")
            self._locks[alert.alert_id] = threading.Lock()
            self._alerts[alert.alert_id] = alert
            if alert.status == STATUS_ACTIVE:
                self._adjust_active(1)

    def get(self, alert_id: str) -> Alert | None:
        return self._alerts.get(alert_id)

    def list(self, active_only: bool = False) -> list[Alert]:
        with self._index_lock:
            alerts = list(self._alerts.values())
        if active_only:
            return [alert for alert in alerts if alert.status == STATUS_ACTIVE]
        return alerts

    def transition(self, alert_id: str, mutation: AlertMutation) -> Alert | None:
        """Apply ``mutation`` atomically; exceptions leave the alert untouched."""
        lock = self._locks.get(alert_id)
        if lock is None:
            return None

        with lock:
            current = self._alerts[alert_id]
            updated = mutation(current)
            self._alerts[alert_id] = updated
            if current.status == STATUS_ACTIVE and updated.status != STATUS_ACTIVE:
                self._adjust_active(-1)
        return updated

    def active_count(self) -> int:
        with self._counter_lock:
            return self._active

    def clear(self) -> None:
        with self._index_lock, self._counter_lock:
            self._alerts.clear()
            self._locks.clear()
            self._active = 0

    def _adjust_active(self, delta: int) -> None:
        with self._counter_lock:
            self._active += delta
