"""Gateway to alert service flow through an in-process forwarder."""

import pytest
from fastapi.testclient import TestClient

from libs.core.application.gateway_service import CameraGatewayService
from libs.core.domain.entities import AlertRequest
from services.alert_service.app import app as alert_app
from services.alert_service.dependencies import reset_state as reset_alerts
from services.camera_gateway import dependencies as gateway_dependencies
from services.camera_gateway.app import app as gateway_app
from services.camera_gateway.dependencies import reset_state as reset_cameras
from services.camera_gateway.infrastructure.alert_forwarder import build_alert_payload

alert_client = TestClient(alert_app)
gateway_client = TestClient(gateway_app)


class InProcessForwarder:
    def __init__(self) -> None:
        self.status_codes: list[int] = []

    def forward(self, request: AlertRequest) -> None:
        response = alert_client.post("/alerts", json=build_alert_payload(request))
        self.status_codes.append(response.status_code)


@pytest.fixture(autouse=True)
def forwarder(monkeypatch: pytest.MonkeyPatch) -> InProcessForwarder:
    reset_alerts()
    reset_cameras()
    in_process = InProcessForwarder()
    monkeypatch.setattr(
        gateway_dependencies,
        "gateway_service",
        CameraGatewayService(
            camera_repository=gateway_dependencies.camera_repository,
            forwarder=in_process,
        ),
    )
    return in_process


def test_events_become_alerts(forwarder: InProcessForwarder) -> None:
    events = [
        ("/events/motion", {"cameraId": "CAM-001", "zone": "Lobby", "confidence": 79}),
        ("/events/motion", {"cameraId": "CAM-001", "zone": "Lobby", "confidence": 85}),
        ("/events/motion", {"cameraId": "CAM-002", "zone": "Lot", "confidence": 96}),
        (
            "/events/analytics",
            {
                "cameraId": "CAM-003",
                "objectType": "Person",
                "confidence": 90,
                "isRestrictedArea": True,
            },
        ),
        (
            "/events/analytics",
            {
                "cameraId": "CAM-003",
                "objectType": "Vehicle",
                "confidence": 90,
                "isRestrictedArea": True,
            },
        ),
        ("/events/health", {"cameraId": "CAM-001", "isOnline": False}),
    ]
    for path, body in events:
        assert gateway_client.post(path, json=body).status_code == 200

    assert forwarder.status_codes == [201, 201, 201]
    stats = alert_client.get("/alerts/stats").json()
    assert stats["total"] == 3
    assert stats["active"] == 3
    assert stats["bySeverity"] == {"Medium": 1, "High": 1, "Critical": 1}
    assert stats["byType"] == {"MotionDetection": 2, "RestrictedAreaIntrusion": 1}


def test_operator_handles_forwarded_intrusion() -> None:
    gateway_client.post(
        "/events/analytics",
        json={
            "cameraId": "CAM-003",
            "objectType": "Person",
            "confidence": 97,
            "isRestrictedArea": True,
            "boundingBox": {"x": 5, "y": 6, "width": 70, "height": 180},
        },
    )
    (alert,) = alert_client.get("/alerts?activeOnly=true").json()
    assert alert["source"] == "CAM-003"
    assert alert["metadata"]["boundingBox"] == {
        "x": 5,
        "y": 6,
        "width": 70,
        "height": 180,
    }

    alert_client.post(f"/alerts/{alert['id']}/acknowledge", json={"operatorId": "op-2"})
    alert_client.post(f"/alerts/{alert['id']}/resolve", json={"resolution": "Escorted"})

    assert alert_client.get("/alerts?activeOnly=true").json() == []
    assert alert_client.get(f"/alerts/{alert['id']}").json()["status"] == "Resolved"
