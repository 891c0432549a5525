from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import uuid4

from libs.core.application.contracts import AlertForwarder, CameraRepository
from libs.core.application.correlation import correlate_analytics, correlate_motion
from libs.core.domain.entities import (
    AlertRequest,
    AnalyticsEvent,
    CameraRecord,
    HealthEvent,
    MotionEvent,
)

logger = logging.getLogger(__name__)


@dataclass
class ProcessedEvent:
    """Outcome of handling a motion or analytics event."""

    event_id: str
    alert_request: AlertRequest | None = None


@dataclass
class HealthUpdate:
    """Camera record before and after a health event."""

    previous: CameraRecord
    current: CameraRecord

    @property
    def changed(self) -> bool:
        return self.previous.is_online != self.current.is_online


class CameraGatewayService:
    """Application service behind the camera gateway endpoints."""

    def __init__(
        self,
        camera_repository: CameraRepository,
        forwarder: AlertForwarder,
    ) -> None:
        self._cameras = camera_repository
        self._forwarder = forwarder

    def list_cameras(self) -> list[CameraRecord]:
        cameras = self._cameras.list()
        logger.info("Retrieving all camera status. Total cameras: %d", len(cameras))
        return cameras

    def get_camera(self, camera_id: str) -> CameraRecord | None:
        camera = self._cameras.get(camera_id)
        if camera is None:
            logger.warning("Camera not found: %s", camera_id)
            return None
        logger.info("Camera status retrieved: %s - %s", camera_id, camera.location)
        return camera

    def process_motion(self, event: MotionEvent) -> ProcessedEvent:
        logger.info(
            "Motion detected by camera %s in zone %s. Confidence: %d%%",
            event.camera_id,
            event.zone,
            event.confidence,
        )
        request = correlate_motion(event)
        if request is not None:
            logger.info("High confidence motion event, forwarding to Alert Service")
            self._forwarder.forward(request)
        return ProcessedEvent(event_id=str(uuid4()), alert_request=request)

    def process_analytics(self, event: AnalyticsEvent) -> ProcessedEvent:
        logger.info(
            "Video analytics event from %s: %s detected. Confidence: %d%%",
            event.camera_id,
            event.object_type,
            event.confidence,
        )
        request = correlate_analytics(event)
        if request is not None:
            logger.warning(
                "SECURITY: Person detected in RESTRICTED AREA by camera %s",
                event.camera_id,
            )
            self._forwarder.forward(request)
        return ProcessedEvent(event_id=str(uuid4()), alert_request=request)

    def process_health(self, event: HealthEvent) -> HealthUpdate | None:
        """Apply a health event; unknown cameras are ignored."""
        result = self._cameras.set_online(event.camera_id, event.is_online)
        if result is None:
            return None

        update = HealthUpdate(previous=result[0], current=result[1])
        if update.changed:
            if event.is_online:
                logger.info(
                    "Camera %s is now ONLINE at %s",
                    event.camera_id,
                    update.current.location,
                )
            else:
                logger.warning(
                    "Camera %s went OFFLINE at %s. Last error: %s",
                    event.camera_id,
                    update.current.location,
                    event.error_message or "Unknown",
                )
        return update
