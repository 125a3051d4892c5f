"""Payment instruction schemas."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, StrictStr

from paydesk.domain.enums import StatusCode, TransactionStatus, TransactionType
from paydesk.schemas.common import Balance, FrozenSchema


class AccountPayload(BaseModel):
    """One account snapshot supplied by the caller."""

    id: StrictStr
    balance: Balance
    currency: StrictStr


class PaymentInstructionRequest(BaseModel):
    """Payload for processing one payment instruction."""

    accounts: list[AccountPayload]
    instruction: StrictStr


class AccountView(FrozenSchema):
    """Account state reported back with a processed instruction."""

    id: str
    balance: Balance
    balance_before: Balance
    currency: str


class TransactionResult(FrozenSchema):
    """Outcome of one processed instruction."""

    type: Optional[TransactionType] = None
    amount: Optional[int] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    status: TransactionStatus
    status_reason: str
    status_code: StatusCode
    accounts: list[AccountView]


class SupportedCurrenciesResponse(BaseModel):
    """Currency codes accepted in instructions."""

    currencies: list[str]
