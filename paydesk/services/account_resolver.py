"""Account lookups over the caller-supplied account snapshot."""

from __future__ import annotations

from typing import Optional, Sequence

from paydesk.schemas.payment import AccountPayload, AccountView


def find_account(accounts: Sequence[AccountPayload], account_id: Optional[str]) -> Optional[AccountPayload]:
    """Return the first account with an exactly matching id."""

    for account in accounts:
        if account.id == account_id:
            return account
    return None


def accounts_in_request_order(
    accounts: Sequence[AccountPayload],
    debit_account_id: Optional[str],
    credit_account_id: Optional[str],
) -> list[AccountView]:
    """Build views of the referenced accounts, keeping the caller's ordering."""

    targets = {account_id for account_id in (debit_account_id, credit_account_id) if account_id is not None}
    return [
        AccountView(
            id=account.id,
            balance=account.balance,
            balance_before=account.balance,
            currency=account.currency.upper(),
        )
        for account in accounts
        if account.id in targets
    ]
