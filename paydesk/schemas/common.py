"""Common schema helpers."""

from typing import Union

from pydantic import BaseModel, StrictFloat, StrictInt

# Balances arrive as JSON numbers; ints stay ints so whole balances render without ".0".
Balance = Union[StrictInt, StrictFloat]


class FrozenSchema(BaseModel):
    """Base schema for immutable response records."""

    model_config = {"frozen": True}
