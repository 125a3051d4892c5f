"""Dependency helpers for API layer."""

from fastapi import Depends

from paydesk.config import Settings, get_settings
from paydesk.services.payment_service import PaymentService


def get_payment_service(settings: Settings = Depends(get_settings)) -> PaymentService:
    """Build payment instruction service dependency."""

    return PaymentService.from_settings(settings)
