"""Domain types shared by parsing, validation and the payment pipeline."""

from paydesk.domain.enums import StatusCode, TransactionStatus, TransactionType

__all__ = ["StatusCode", "TransactionStatus", "TransactionType"]
