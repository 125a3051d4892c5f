"""Validation helpers for raw instruction tokens."""

from __future__ import annotations

from datetime import date
from typing import NamedTuple, Optional


class AmountCheck(NamedTuple):
    valid: bool
    value: Optional[int] = None


class DateCheck(NamedTuple):
    valid: bool
    value: Optional[str] = None


def validate_amount(token: Optional[str]) -> AmountCheck:
    """Accept only canonical positive integers such as ``"500"``.

    Leading zeros, signs, decimals, digit separators and padding are rejected
    because the parsed integer must render back to the exact token.
    """

    if not token:
        return AmountCheck(False)
    if "-" in token or "." in token:
        return AmountCheck(False)

    try:
        value = int(token, 10)
    except ValueError:
        return AmountCheck(False)

    if value <= 0 or str(value) != token:
        return AmountCheck(False)
    return AmountCheck(True, value)


def _date_parts(token: str) -> Optional[tuple[int, int, int]]:
    if len(token) != 10 or token[4] != "-" or token[7] != "-":
        return None

    parts = (token[0:4], token[5:7], token[8:10])
    if not all(part.isascii() and part.isdigit() for part in parts):
        return None
    return int(parts[0]), int(parts[1]), int(parts[2])


def validate_date(token: Optional[str]) -> DateCheck:
    """Check ``YYYY-MM-DD`` shape with month 1-12 and day 1-31.

    Month lengths and leap years are not checked.
    """

    if not token:
        return DateCheck(False)

    parts = _date_parts(token)
    if parts is None:
        return DateCheck(False)

    _, month, day = parts
    if not 1 <= month <= 12 or not 1 <= day <= 31:
        return DateCheck(False)
    return DateCheck(True, token)


def is_future_date(token: str, today: date) -> bool:
    """Return whether a validated date token falls strictly after ``today``."""

    parts = _date_parts(token)
    if parts is None:
        raise ValueError(f"Not a YYYY-MM-DD date: {token!r}")
    return parts > (today.year, today.month, today.day)
