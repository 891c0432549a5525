"""Prometheus metric sets for the alert service and the camera gateway."""

from __future__ import annotations

from typing import Callable

from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

PROCESSING_BUCKETS_MS = (1.0, 5.0, 10.0, 25.0, 50.0, 100.0, 250.0, 500.0, 1000.0)


class AlertServiceMetrics:
    """Alert counters bound to a private registry."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self.alerts_received = Counter(
            "alerts_received_total",
            "Total alerts received",
            registry=self.registry,
        )
        self.alerts_dispatched = Counter(
            "alerts_dispatched_total",
            "Total alerts dispatched to operators",
            ["severity", "type"],
            registry=self.registry,
        )
        self.alerts_by_severity = Counter(
            "alerts_by_severity_total",
            "Alerts by severity level",
            ["severity"],
            registry=self.registry,
        )
        self.active_alerts = Gauge(
            "active_alerts",
            "Currently active (unacknowledged) alerts",
            registry=self.registry,
        )
        self.processing_ms = Histogram(
            "alert_processing_ms",
            "Alert processing time",
            ["severity"],
            buckets=PROCESSING_BUCKETS_MS,
            registry=self.registry,
        )

    def track_active(self, read_active: Callable[[], int]) -> None:
        self.active_alerts.set_function(lambda: float(read_active()))

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST


class CameraGatewayMetrics:
    """Camera event counters bound to a private registry."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        self.registry = registry or CollectorRegistry()
        self.events_received = Counter(
            "camera_events_received_total",
            "Total camera events received",
            ["event_type"],
            registry=self.registry,
        )
        self.motion_detections = Counter(
            "motion_detections_total",
            "Total motion detection events",
            ["camera_id", "zone"],
            registry=self.registry,
        )
        self.cameras_online = Gauge(
            "cameras_online",
            "Number of cameras currently online",
            registry=self.registry,
        )
        self.processing_ms = Histogram(
            "camera_event_processing_ms",
            "Time to process camera events",
            ["event_type"],
            buckets=PROCESSING_BUCKETS_MS,
            registry=self.registry,
        )

    def track_online(self, read_online: Callable[[], int]) -> None:
        self.cameras_online.set_function(lambda: float(read_online()))

    def render(self) -> tuple[bytes, str]:
        return generate_latest(self.registry), CONTENT_TYPE_LATEST
