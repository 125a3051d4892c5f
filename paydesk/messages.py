"""Display texts for payment instruction status codes."""

from types import MappingProxyType

from paydesk.domain.enums import StatusCode

TRANSACTION_SUCCESSFUL = "Transaction executed successfully"
TRANSACTION_PENDING = "Transaction scheduled for future execution"

INVALID_AMOUNT = "Invalid amount. Amount must be a positive integer"

CURRENCY_MISMATCH = "Account currency mismatch. Both accounts must have the same currency"
UNSUPPORTED_CURRENCY = "Unsupported currency. Only NGN, USD, GBP, and GHS are supported"

INSUFFICIENT_FUNDS = "Insufficient funds in debit account"
SAME_ACCOUNT_ERROR = "Debit and credit accounts cannot be the same"
ACCOUNT_NOT_FOUND = "Account not found"

MISSING_KEYWORDS = "Missing required keywords"
INVALID_KEYWORD_ORDER = "Invalid keyword order"
MALFORMED_INSTRUCTION = "Malformed instruction: unable to parse keywords"

STATUS_MESSAGES: MappingProxyType[StatusCode, str] = MappingProxyType(
    {
        StatusCode.MISSING_KEYWORDS: MISSING_KEYWORDS,
        StatusCode.INVALID_KEYWORD_ORDER: INVALID_KEYWORD_ORDER,
        StatusCode.MALFORMED_INSTRUCTION: MALFORMED_INSTRUCTION,
        StatusCode.INVALID_AMOUNT: INVALID_AMOUNT,
        StatusCode.CURRENCY_MISMATCH: CURRENCY_MISMATCH,
        StatusCode.UNSUPPORTED_CURRENCY: UNSUPPORTED_CURRENCY,
        StatusCode.INSUFFICIENT_FUNDS: INSUFFICIENT_FUNDS,
        StatusCode.SAME_ACCOUNT: SAME_ACCOUNT_ERROR,
        StatusCode.ACCOUNT_NOT_FOUND: ACCOUNT_NOT_FOUND,
        StatusCode.EXECUTED: TRANSACTION_SUCCESSFUL,
        StatusCode.SCHEDULED: TRANSACTION_PENDING,
    }
)


def status_reason(code: StatusCode) -> str:
    """Return display text for a status code."""

    return STATUS_MESSAGES[code]
