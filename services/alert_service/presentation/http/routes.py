import time
from datetime import datetime
from typing import Any

from fastapi import APIRouter, HTTPException, Query, Response
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from libs.core.application.alert_service import (
    AlertNotFoundError,
    AlertStats,
    AlertTransitionError,
)
from libs.core.domain.entities import Alert, AlertRequest
from services.alert_service.dependencies import get_alert_service, get_metrics
from services.alert_service.settings import get_settings

router = APIRouter()


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CreateAlertRequest(CamelModel):
    type: str
    source: str
    severity: str
    message: str
    timestamp: datetime | None = None
    metadata: Any = None


class AcknowledgeRequest(CamelModel):
    operator_id: str


class ResolveRequest(CamelModel):
    resolution: str


@router.get("/", response_class=PlainTextResponse)
def index() -> str:
    return "Alert Service is running!"


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


@router.get("/alerts")
def get_alerts(
    active_only: bool = Query(default=False, alias="activeOnly"),
) -> list[dict[str, object]]:
    service = get_alert_service()
    return [_alert_to_dict(alert) for alert in service.list_alerts(active_only)]


@router.get("/alerts/stats")
def get_alert_stats() -> dict[str, object]:
    return _stats_to_dict(get_alert_service().get_stats())


@router.get("/alerts/{alert_id}")
def get_alert_details(alert_id: str) -> dict[str, object]:
    alert = get_alert_service().get_alert(alert_id)
    if alert is None:
        raise HTTPException(status_code=404, detail="Alert not found")
    return _alert_to_dict(alert)


@router.post("/alerts", status_code=201)
def create_alert(payload: CreateAlertRequest, response: Response) -> dict[str, object]:
    started = time.perf_counter()
    service = get_alert_service()
    telemetry = get_metrics()

    alert = service.create_alert(
        AlertRequest(
            type=payload.type,
            source=payload.source,
            severity=payload.severity,
            message=payload.message,
            timestamp=payload.timestamp,
            metadata=payload.metadata,
        )
    )

    telemetry.alerts_received.inc()
    telemetry.alerts_by_severity.labels(severity=alert.severity).inc()
    telemetry.processing_ms.labels(severity=alert.severity).observe(
        (time.perf_counter() - started) * 1000
    )
    response.headers["Location"] = f"/alerts/{alert.alert_id}"
    return _alert_to_dict(alert)


@router.post("/alerts/{alert_id}/acknowledge")
def acknowledge_alert(alert_id: str, payload: AcknowledgeRequest) -> dict[str, object]:
    try:
        alert = get_alert_service().acknowledge(alert_id, payload.operator_id)
    except AlertNotFoundError as error:
        raise HTTPException(status_code=404, detail="Alert not found") from error
    except AlertTransitionError as error:
        raise HTTPException(status_code=409, detail=str(error)) from error
    return _alert_to_dict(alert)


@router.post("/alerts/{alert_id}/resolve")
def resolve_alert(alert_id: str, payload: ResolveRequest) -> dict[str, object]:
    try:
        alert = get_alert_service().resolve(alert_id, payload.resolution)
    except AlertNotFoundError as error:
        raise HTTPException(status_code=404, detail="Alert not found") from error
    except AlertTransitionError as error:
        raise HTTPException(status_code=409, detail=str(error)) from error
    return _alert_to_dict(alert)


def _alert_to_dict(alert: Alert) -> dict[str, object]:
    return {
        "id": alert.alert_id,
        "type": alert.type,
        "source": alert.source,
        "severity": alert.severity,
        "message": alert.message,
        "timestamp": alert.timestamp.isoformat(),
        "status": alert.status,
        "metadata": alert.metadata,
        "acknowledgedBy": alert.acknowledged_by,
        "acknowledgedAt": _iso_or_none(alert.acknowledged_at),
        "resolution": alert.resolution,
        "resolvedAt": _iso_or_none(alert.resolved_at),
    }


def _stats_to_dict(stats: AlertStats) -> dict[str, object]:
    return {
        "total": stats.total,
        "active": stats.active,
        "acknowledged": stats.acknowledged,
        "resolved": stats.resolved,
        "bySeverity": stats.by_severity,
        "byType": stats.by_type,
    }


def _iso_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None
