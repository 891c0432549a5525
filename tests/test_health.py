"""Service health endpoint tests."""

import pytest
from fastapi.testclient import TestClient

from services.alert_service.app import app as alert_app
from services.camera_gateway.app import app as gateway_app

clients = {
    "alert-service": TestClient(alert_app),
    "camera-gateway": TestClient(gateway_app),
}


@pytest.mark.parametrize("service_name", sorted(clients))
def test_health_ok(service_name: str) -> None:
    response = clients[service_name].get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


@pytest.mark.parametrize("service_name", sorted(clients))
def test_ready_ok(service_name: str) -> None:
    response = clients[service_name].get("/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready"}


@pytest.mark.parametrize("service_name", sorted(clients))
def test_version_ok(service_name: str) -> None:
    response = clients[service_name].get("/version")
    assert response.status_code == 200
    assert response.json() == {"version": "1.0.0"}


def test_index_banners() -> None:
    assert clients["alert-service"].get("/").text == "Alert Service is running!"
    assert (
        clients["camera-gateway"].get("/").text
        == "Camera Gateway service is running!"
    )
