"""Payment instruction endpoints."""

from fastapi import APIRouter, Depends

from paydesk.api.deps import get_payment_service
from paydesk.schemas.payment import PaymentInstructionRequest, SupportedCurrenciesResponse, TransactionResult
from paydesk.services.payment_service import PaymentService

router = APIRouter(prefix="/payment-instructions", tags=["payment-instructions"])


@router.post("", response_model=TransactionResult)
async def process_instruction(
    payload: PaymentInstructionRequest,
    service: PaymentService = Depends(get_payment_service),
) -> TransactionResult:
    """Parse and apply one instruction; rejected instructions still return 200 with a status code."""

    return service.process(payload)


@router.get("/currencies", response_model=SupportedCurrenciesResponse)
async def supported_currencies(
    service: PaymentService = Depends(get_payment_service),
) -> SupportedCurrenciesResponse:
    """List currency codes accepted in instructions."""

    return SupportedCurrenciesResponse(currencies=sorted(service.supported_currencies))
