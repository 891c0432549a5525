"""Best-effort delivery of alert requests to the alert service."""

from __future__ import annotations

import json
import logging
import threading
from http.client import HTTPException
from urllib import request
from urllib.error import HTTPError, URLError

from libs.core.domain.entities import AlertRequest

logger = logging.getLogger(__name__)


class HttpAlertForwarder:
    """Posts alert requests on a daemon thread.

    Delivery is attempted once. Failures are logged and never reach the
    caller of ``forward``.
    """

    def __init__(self, base_url: str, timeout_sec: float = 10.0) -> None:
        self._alerts_url = f"{base_url.rstrip('/')}/alerts"
        self._timeout_sec = timeout_sec

    def forward(self, alert_request: AlertRequest) -> None:
        thread = threading.Thread(target=self.send, args=(alert_request,), daemon=True)
        thread.start()

    def send(self, alert_request: AlertRequest) -> bool:
        try:
            _post_json(
                self._alerts_url,
                build_alert_payload(alert_request),
                timeout_sec=self._timeout_sec,
            )
        except HTTPError as error:
            logger.error("Failed to create alert. Status: %s", error.code)
            return False
        except (URLError, HTTPException, OSError, TypeError, ValueError):
            logger.exception("Failed to communicate with Alert Service")
            return False

        logger.info("Alert created successfully for camera %s", alert_request.source)
        return True


def build_alert_payload(alert_request: AlertRequest) -> dict[str, object]:
    timestamp = alert_request.timestamp
    return {
        "type": alert_request.type,
        "source": alert_request.source,
        "severity": alert_request.severity,
        "message": alert_request.message,
        "timestamp": timestamp.isoformat() if timestamp is not None else None,
        "metadata": alert_request.metadata,
    }


def _post_json(url: str, payload: dict[str, object], timeout_sec: float) -> None:
    """POST ``payload`` as JSON; any non-2xx reply raises ``HTTPError``."""
    req = request.Request(
        url=url,
        data=json.dumps(payload).encode("utf-8"),
        headers={"Content-Type": "application/json"},
        method="POST",
    )
    request.urlopen(req, timeout=timeout_sec).close()
