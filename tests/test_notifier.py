"""Simulated operator notification tests."""

from datetime import datetime, timezone

import pytest

from libs.core.domain.entities import STATUS_ACTIVE, Alert
from libs.infra.telemetry.metrics import AlertServiceMetrics
from services.alert_service.infrastructure.notifier import SimulatedOperatorNotifier


def _alert() -> Alert:
    return Alert(
        alert_id="a-1",
        type="RestrictedAreaIntrusion",
        source="CAM-003",
        severity="Critical",
        message="Unauthorized person detected in restricted area",
        timestamp=datetime(2026, 1, 1, tzinfo=timezone.utc),
        status=STATUS_ACTIVE,
    )


def test_dispatch_counts_alert() -> None:
    metrics = AlertServiceMetrics()
    notifier = SimulatedOperatorNotifier(metrics, delay_min_ms=0, delay_max_ms=0)

    notifier.dispatch(_alert())

    value = metrics.registry.get_sample_value(
        "alerts_dispatched_total",
        {"severity": "Critical", "type": "RestrictedAreaIntrusion"},
    )
    assert value == 1.0


def test_invalid_delay_range_rejected() -> None:
    with pytest.raises(ValueError):
        SimulatedOperatorNotifier(AlertServiceMetrics(), delay_min_ms=50, delay_max_ms=10)
