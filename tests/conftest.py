from __future__ import annotations

from datetime import date

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from paydesk.api.errors import register_exception_handlers
from paydesk.api.router import api_router
from paydesk.config import get_settings
from paydesk.services.payment_service import PaymentService

FIXED_TODAY = date(2025, 6, 15)
SUPPORTED = frozenset({"NGN", "USD", "GBP", "GHS"})


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Set deterministic test env and reset cached Settings."""

    monkeypatch.setenv("DEBUG", "true")
    monkeypatch.setenv("SUPPORTED_CURRENCIES", "NGN,USD,GBP,GHS")
    monkeypatch.setenv("TIMEZONE", "Africa/Lagos")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def service() -> PaymentService:
    """Pipeline pinned to a fixed calendar day."""

    return PaymentService(supported_currencies=SUPPORTED, today=lambda: FIXED_TODAY)


@pytest.fixture
def accounts() -> list[dict]:
    return [
        {"id": "a1", "balance": 1000, "currency": "NGN"},
        {"id": "a2", "balance": 200, "currency": "NGN"},
    ]


@pytest.fixture
def api_app() -> FastAPI:
    """Build API app the same way the entrypoint does."""

    app = FastAPI()
    app.include_router(api_router, prefix="/api/v1")
    register_exception_handlers(app)
    return app


@pytest_asyncio.fixture
async def api_client(api_app: FastAPI) -> httpx.AsyncClient:
    """ASGI client for API integration tests."""

    transport = httpx.ASGITransport(app=api_app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
