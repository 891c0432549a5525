import time

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from libs.core.domain.entities import (
    AnalyticsEvent,
    BoundingBox,
    CameraRecord,
    HealthEvent,
    MotionEvent,
)
from services.camera_gateway.dependencies import get_gateway_service, get_metrics
from services.camera_gateway.settings import get_settings

router = APIRouter()


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MotionEventRequest(CamelModel):
    camera_id: str
    zone: str
    confidence: int = Field(ge=0, le=100)


class BoundingBoxRequest(CamelModel):
    x: int
    y: int
    width: int
    height: int


class AnalyticsEventRequest(CamelModel):
    camera_id: str
    object_type: str
    confidence: int = Field(ge=0, le=100)
    is_restricted_area: bool
    bounding_box: BoundingBoxRequest | None = None


class HealthEventRequest(CamelModel):
    camera_id: str
    is_online: bool
    error_message: str | None = None


@router.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "Camera Gateway service is running!"


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok", "service": get_settings().service_name}


@router.get("/ready")
def ready() -> dict[str, str]:
    return {"status": "ready"}


@router.get("/version")
def version() -> dict[str, str]:
    return {"version": "1.0.0"}


@router.get("/metrics")
def metrics() -> Response:
    body, content_type = get_metrics().render()
    return Response(content=body, media_type=content_type)


@router.get("/cameras")
def get_cameras() -> list[dict[str, object]]:
    return [_camera_to_dict(camera) for camera in get_gateway_service().list_cameras()]


@router.get("/cameras/{camera_id}")
def get_camera(camera_id: str) -> dict[str, object]:
    camera = get_gateway_service().get_camera(camera_id)
    if camera is None:
        raise HTTPException(status_code=404, detail=f"Camera {camera_id} not found")
    return _camera_to_dict(camera)


@router.post("/events/motion")
def ingest_motion_event(payload: MotionEventRequest) -> dict[str, str]:
    started = time.perf_counter()
    telemetry = get_metrics()
    telemetry.events_received.labels(event_type="motion").inc()
    telemetry.motion_detections.labels(
        camera_id=payload.camera_id, zone=payload.zone
    ).inc()

    result = get_gateway_service().process_motion(
        MotionEvent(
            camera_id=payload.camera_id,
            zone=payload.zone,
            confidence=payload.confidence,
        )
    )

    telemetry.processing_ms.labels(event_type="motion").observe(
        (time.perf_counter() - started) * 1000
    )
    return {"status": "Processed", "eventId": result.event_id}


@router.post("/events/health")
def ingest_health_event(payload: HealthEventRequest) -> dict[str, str]:
    get_metrics().events_received.labels(event_type="health").inc()
    get_gateway_service().process_health(
        HealthEvent(
            camera_id=payload.camera_id,
            is_online=payload.is_online,
            error_message=payload.error_message,
        )
    )
    return {"status": "Updated"}


@router.post("/events/analytics")
def ingest_analytics_event(payload: AnalyticsEventRequest) -> dict[str, str]:
    started = time.perf_counter()
    telemetry = get_metrics()
    telemetry.events_received.labels(event_type="analytics").inc()

    bounding_box = None
    if payload.bounding_box is not None:
        bounding_box = BoundingBox(
            x=payload.bounding_box.x,
            y=payload.bounding_box.y,
            width=payload.bounding_box.width,
            height=payload.bounding_box.height,
        )
    result = get_gateway_service().process_analytics(
        AnalyticsEvent(
            camera_id=payload.camera_id,
            object_type=payload.object_type,
            confidence=payload.confidence,
            is_restricted_area=payload.is_restricted_area,
            bounding_box=bounding_box,
        )
    )

    telemetry.processing_ms.labels(event_type="analytics").observe(
        (time.perf_counter() - started) * 1000
    )
    return {"status": "Processed", "eventId": result.event_id}


def _camera_to_dict(camera: CameraRecord) -> dict[str, object]:
    return {
        "cameraId": camera.camera_id,
        "location": camera.location,
        "building": camera.building,
        "isOnline": camera.is_online,
    }
