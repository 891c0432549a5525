"""Camera gateway entrypoint."""

from fastapi import FastAPI

from libs.infra.telemetry.logs import configure_logging
from services.camera_gateway.presentation.http.routes import router
from services.camera_gateway.settings import get_settings

settings = get_settings()
configure_logging(settings.service_name, settings.log_level)

app = FastAPI(
    title="Camera Gateway API",
    description="Camera event ingestion gateway",
    version="1.0.0",
)
app.include_router(router)
