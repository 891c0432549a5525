"""Simulated hand-off of high-severity alerts to the operations center."""

from __future__ import annotations

import logging
import random
import threading
import time

from libs.core.domain.entities import Alert
from libs.infra.telemetry.metrics import AlertServiceMetrics

logger = logging.getLogger(__name__)


class SimulatedOperatorNotifier:
    """Counts the dispatch and plays out the notification delay off-thread."""

    def __init__(
        self,
        metrics: AlertServiceMetrics,
        delay_min_ms: int = 10,
        delay_max_ms: int = 50,
    ) -> None:
        if delay_min_ms < 0 or delay_max_ms < delay_min_ms:
            raise ValueError("invalid dispatch delay range")
        self._metrics = metrics
        self._delay_min_ms = delay_min_ms
        self._delay_max_ms = delay_max_ms

    def dispatch(self, alert: Alert) -> None:
        logger.warning(
            "DISPATCHING %s ALERT to on-duty operators: %s",
            alert.severity,
            alert.message,
        )
        self._metrics.alerts_dispatched.labels(
            severity=alert.severity, type=alert.type
        ).inc()

        delay_sec = random.randint(self._delay_min_ms, self._delay_max_ms) / 1000
        thread = threading.Thread(
            target=_notify_operators,
            args=(alert.alert_id, delay_sec),
            daemon=True,
        )
        thread.start()


def _notify_operators(alert_id: str, delay_sec: float) -> None:
    time.sleep(delay_sec)
    logger.info("Alert %s dispatched to Security Operations Center", alert_id)
