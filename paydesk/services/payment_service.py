"""Payment instruction pipeline: parse, validate, then execute or schedule."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from functools import partial
from typing import Any, Callable, Mapping, Optional

import pydantic
import structlog

from paydesk.api.errors import ValidationError
from paydesk.config import Settings
from paydesk.domain.enums import StatusCode, TransactionStatus
from paydesk.messages import status_reason
from paydesk.parsing.scanner import KeywordScanner, ParsedInstruction
from paydesk.schemas.payment import (
    AccountPayload,
    AccountView,
    PaymentInstructionRequest,
    TransactionResult,
)
from paydesk.services.account_resolver import accounts_in_request_order, find_account
from paydesk.utils.clock import local_today
from paydesk.validators.business import currencies_match, has_sufficient_funds, is_supported_currency
from paydesk.validators.tokens import is_future_date, validate_amount, validate_date

logger = structlog.get_logger(__name__)

Step = Callable[["_PipelineState"], Optional[StatusCode]]


@dataclass
class _PipelineState:
    """Fields resolved so far for one instruction."""

    request: PaymentInstructionRequest
    parsed: ParsedInstruction
    amount: Optional[int] = None
    debit: Optional[AccountPayload] = None
    credit: Optional[AccountPayload] = None
    pending: bool = False


class PaymentService:
    """Interpret payment instructions against a snapshot of account balances.

    Checks run in a fixed order and the first failing one decides the status
    code, so an instruction breaking several rules always reports the same one.
    Expected failures are returned as ``failed`` results, never raised.
    """

    def __init__(
        self,
        supported_currencies: frozenset[str],
        today: Callable[[], date] = local_today,
        scanner: Optional[KeywordScanner] = None,
    ) -> None:
        self._supported_currencies = frozenset(code.upper() for code in supported_currencies)
        self._today = today
        self._scanner = scanner or KeywordScanner()
        self._steps: tuple[Step, ...] = (
            self._check_amount,
            self._check_currency_supported,
            self._resolve_accounts,
            self._check_distinct_accounts,
            self._check_account_currencies,
            self._check_instruction_currency,
            self._check_execution_date,
            self._check_funds,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PaymentService":
        """Factory wiring currencies and the scheduling clock from settings."""

        return cls(
            supported_currencies=settings.currency_set(),
            today=partial(local_today, settings.timezone),
        )

    @property
    def supported_currencies(self) -> frozenset[str]:
        return self._supported_currencies

    def process_payload(self, payload: Mapping[str, Any]) -> TransactionResult:
        """Validate a raw request mapping and process it."""

        try:
            request = PaymentInstructionRequest.model_validate(payload)
        except pydantic.ValidationError as exc:
            raise ValidationError(f"Invalid payment instruction payload: {exc}") from exc
        return self.process(request)

    def process(self, request: PaymentInstructionRequest) -> TransactionResult:
        """Run one instruction through the validation chain."""

        try:
            result = self._run(request)
        except Exception:
            logger.exception("parse_instruction_error", instruction=request.instruction)
            raise

        logger.debug(
            "instruction_processed",
            status=result.status.value,
            status_code=result.status_code.value,
            type=result.type.value if result.type else None,
        )
        return result

    def _run(self, request: PaymentInstructionRequest) -> TransactionResult:
        parsed = self._scanner.scan(request.instruction)
        state = _PipelineState(request=request, parsed=parsed)

        if parsed.parse_error is not None:
            return self._result(state, TransactionStatus.FAILED, parsed.parse_error, accounts=[])

        for step in self._steps:
            code = step(state)
            if code is not None:
                return self._result(state, TransactionStatus.FAILED, code)

        if state.pending:
            return self._result(state, TransactionStatus.PENDING, StatusCode.SCHEDULED)
        return self._result(
            state,
            TransactionStatus.SUCCESSFUL,
            StatusCode.EXECUTED,
            accounts=self._apply_transfer(state),
        )

    def _check_amount(self, state: _PipelineState) -> Optional[StatusCode]:
        check = validate_amount(state.parsed.amount)
        if not check.valid:
            return StatusCode.INVALID_AMOUNT
        state.amount = check.value
        return None

    def _check_currency_supported(self, state: _PipelineState) -> Optional[StatusCode]:
        if not is_supported_currency(state.parsed.currency, self._supported_currencies):
            return StatusCode.UNSUPPORTED_CURRENCY
        return None

    def _resolve_accounts(self, state: _PipelineState) -> Optional[StatusCode]:
        accounts = state.request.accounts
        state.debit = find_account(accounts, state.parsed.debit_account)
        state.credit = find_account(accounts, state.parsed.credit_account)
        if state.debit is None or state.credit is None:
            return StatusCode.ACCOUNT_NOT_FOUND
        return None

    def _check_distinct_accounts(self, state: _PipelineState) -> Optional[StatusCode]:
        if state.debit.id == state.credit.id:
            return StatusCode.SAME_ACCOUNT
        return None

    def _check_account_currencies(self, state: _PipelineState) -> Optional[StatusCode]:
        if not currencies_match(state.debit.currency, state.credit.currency):
            return StatusCode.CURRENCY_MISMATCH
        return None

    def _check_instruction_currency(self, state: _PipelineState) -> Optional[StatusCode]:
        # accounts already agree, so comparing against the debit side is enough
        if not currencies_match(state.parsed.currency, state.debit.currency):
            return StatusCode.CURRENCY_MISMATCH
        return None

    def _check_execution_date(self, state: _PipelineState) -> Optional[StatusCode]:
        execute_by = state.parsed.execute_by
        if execute_by is None:
            return None
        if not validate_date(execute_by).valid:
            return StatusCode.MALFORMED_INSTRUCTION
        state.pending = is_future_date(execute_by, self._today())
        return None

    def _check_funds(self, state: _PipelineState) -> Optional[StatusCode]:
        if state.pending:
            return None
        if not has_sufficient_funds(state.debit.balance, state.amount):
            return StatusCode.INSUFFICIENT_FUNDS
        return None

    def _apply_transfer(self, state: _PipelineState) -> list[AccountView]:
        """Return account views with the transfer applied to ``balance``."""

        views = accounts_in_request_order(state.request.accounts, state.debit.id, state.credit.id)
        updated: list[AccountView] = []
        for view in views:
            if view.id == state.debit.id:
                view = view.model_copy(update={"balance": view.balance_before - state.amount})
            elif view.id == state.credit.id:
                view = view.model_copy(update={"balance": view.balance_before + state.amount})
            updated.append(view)
        return updated

    def _result(
        self,
        state: _PipelineState,
        status: TransactionStatus,
        code: StatusCode,
        accounts: Optional[list[AccountView]] = None,
    ) -> TransactionResult:
        parsed = state.parsed
        if accounts is None:
            accounts = accounts_in_request_order(
                state.request.accounts,
                parsed.debit_account,
                parsed.credit_account,
            )

        return TransactionResult(
            type=parsed.type,
            amount=state.amount,
            currency=parsed.currency,
            debit_account=parsed.debit_account,
            credit_account=parsed.credit_account,
            execute_by=parsed.execute_by,
            status=status,
            status_reason=status_reason(code),
            status_code=code,
            accounts=accounts,
        )
