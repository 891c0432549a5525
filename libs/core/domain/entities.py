from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

STATUS_ACTIVE = "Active"
STATUS_ACKNOWLEDGED = "Acknowledged"
STATUS_RESOLVED = "Resolved"

SEVERITY_LOW = "Low"
SEVERITY_MEDIUM = "Medium"
SEVERITY_HIGH = "High"
SEVERITY_CRITICAL = "Critical"


@dataclass(frozen=True)
class Alert:
    """Security alert tracked by the alert service.

    Severity is kept as free text; only status is a closed vocabulary.
    """

    alert_id: str
    type: str
    source: str
    severity: str
    message: str
    timestamp: datetime
    status: str
    metadata: Optional[Any] = None
    acknowledged_by: Optional[str] = None
    acknowledged_at: Optional[datetime] = None
    resolution: Optional[str] = None
    resolved_at: Optional[datetime] = None


@dataclass
class AlertRequest:
    """Alert creation payload, produced by the gateway or posted directly."""

    type: str
    source: str
    severity: str
    message: str
    timestamp: datetime | None = None
    metadata: Any = None


@dataclass(frozen=True)
class CameraRecord:
    """Registry entry for a camera known to the gateway."""

    camera_id: str
    location: str
    building: str
    is_online: bool


@dataclass
class BoundingBox:
    x: int
    y: int
    width: int
    height: int


@dataclass
class MotionEvent:
    camera_id: str
    zone: str
    confidence: int


@dataclass
class AnalyticsEvent:
    camera_id: str
    object_type: str
    confidence: int
    is_restricted_area: bool
    bounding_box: BoundingBox | None = None


@dataclass
class HealthEvent:
    camera_id: str
    is_online: bool
    error_message: str | None = None
