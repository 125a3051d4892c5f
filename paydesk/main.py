"""FastAPI application entrypoint."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from paydesk.api.errors import register_exception_handlers
from paydesk.api.router import api_router
from paydesk.config import get_settings
from paydesk.logging_setup import configure_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure process-wide logging before serving requests."""

    settings = get_settings()
    configure_logging(level=settings.log_level, log_json=settings.log_json)
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, debug=settings.debug, lifespan=lifespan)
app.include_router(api_router, prefix=settings.api_v1_prefix)
register_exception_handlers(app)


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    """Simple endpoint for uptime checks."""

    return {"status": "ok"}
