"""Rules that turn camera events into alert creation requests."""

from __future__ import annotations

from dataclasses import asdict
from datetime import datetime, timezone

from libs.core.domain.entities import (
    SEVERITY_CRITICAL,
    SEVERITY_HIGH,
    SEVERITY_MEDIUM,
    AlertRequest,
    AnalyticsEvent,
    MotionEvent,
)

MOTION_ALERT_THRESHOLD = 80
MOTION_HIGH_SEVERITY_THRESHOLD = 95
RESTRICTED_OBJECT_TYPE = "Person"

MOTION_ALERT_TYPE = "MotionDetection"
INTRUSION_ALERT_TYPE = "RestrictedAreaIntrusion"
INTRUSION_MESSAGE = "Unauthorized person detected in restricted area"


def correlate_motion(event: MotionEvent) -> AlertRequest | None:
    if event.confidence < MOTION_ALERT_THRESHOLD:
        return None

    severity = (
        SEVERITY_HIGH
        if event.confidence >= MOTION_HIGH_SEVERITY_THRESHOLD
        else SEVERITY_MEDIUM
    )
    return AlertRequest(
        type=MOTION_ALERT_TYPE,
        source=event.camera_id,
        severity=severity,
        message=f"Motion detected in {event.zone}",
        timestamp=_utc_now(),
        metadata={"zone": event.zone, "confidence": event.confidence},
    )


def correlate_analytics(event: AnalyticsEvent) -> AlertRequest | None:
    """Only a person inside a restricted area is worth an alert."""
    if event.object_type != RESTRICTED_OBJECT_TYPE or not event.is_restricted_area:
        return None

    bounding_box = asdict(event.bounding_box) if event.bounding_box else None
    return AlertRequest(
        type=INTRUSION_ALERT_TYPE,
        source=event.camera_id,
        severity=SEVERITY_CRITICAL,
        message=INTRUSION_MESSAGE,
        timestamp=_utc_now(),
        metadata={
            "objectType": event.object_type,
            "confidence": event.confidence,
            "boundingBox": bounding_box,
        },
    )


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)
