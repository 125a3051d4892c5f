"""Enumerations used across the instruction pipeline."""

from __future__ import annotations

from enum import Enum


class TransactionType(str, Enum):
    """Grammar an instruction was written in."""

    DEBIT = "DEBIT"
    CREDIT = "CREDIT"


class TransactionStatus(str, Enum):
    """Final state of a processed instruction."""

    FAILED = "failed"
    PENDING = "pending"
    SUCCESSFUL = "successful"


class StatusCode(str, Enum):
    """Machine-readable outcome of a processed instruction."""

    MISSING_KEYWORDS = "SY01"
    INVALID_KEYWORD_ORDER = "SY02"
    MALFORMED_INSTRUCTION = "SY03"
    INVALID_AMOUNT = "AM01"
    CURRENCY_MISMATCH = "CU01"
    UNSUPPORTED_CURRENCY = "CU02"
    INSUFFICIENT_FUNDS = "AC01"
    SAME_ACCOUNT = "AC02"
    ACCOUNT_NOT_FOUND = "AC03"
    EXECUTED = "AP00"
    SCHEDULED = "AP01"
