"""Top-level API router aggregation."""

from fastapi import APIRouter

from paydesk.api.routes.payments import router as payments_router

api_router = APIRouter()
api_router.include_router(payments_router)
