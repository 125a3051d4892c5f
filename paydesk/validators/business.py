"""Business rule checks applied to resolved instruction fields."""

from __future__ import annotations

from typing import Union

Number = Union[int, float]


def is_supported_currency(code: str, supported: frozenset[str]) -> bool:
    """Return whether an uppercase currency code is in the supported set."""

    return code.upper() in supported


def currencies_match(left: str, right: str) -> bool:
    """Compare currency codes case-insensitively."""

    return left.upper() == right.upper()


def has_sufficient_funds(balance: Number, amount: int) -> bool:
    """Return whether a balance covers an amount."""

    return balance >= amount
