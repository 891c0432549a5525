"""Alert service entrypoint."""

from fastapi import FastAPI

from libs.infra.telemetry.logs import configure_logging
from services.alert_service.presentation.http.routes import router
from services.alert_service.settings import get_settings

settings = get_settings()
configure_logging(settings.service_name, settings.log_level)

app = FastAPI(
    title="Alert Service API",
    description="Security alert lifecycle service",
    version="1.0.0",
)
app.include_router(router)
