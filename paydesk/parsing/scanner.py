"""Keyword-anchored tokenizer for free-text payment instructions.

Instructions follow one of two closed grammars::

    debit <amount> <currency> from account <debit> for credit to account <credit> [on <date>]
    credit <amount> <currency> to account <credit> for debit from account <debit> [on <date>]

Fields are recovered by locating literal anchor phrases with ``str.find`` and
slicing between their offsets. No semantic validation happens here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from paydesk.domain.enums import StatusCode, TransactionType

DATE_ANCHOR = " on "


@dataclass(frozen=True)
class Grammar:
    """Literal anchors of one instruction shape, in required left-to-right order."""

    type: TransactionType
    verb: str
    anchors: tuple[str, str]
    # which account field sits between the two anchors; the other one follows the second anchor
    first_account_field: str


@dataclass(frozen=True)
class ParsedInstruction:
    """Raw fields sliced out of an instruction."""

    type: Optional[TransactionType] = None
    amount: Optional[str] = None
    currency: Optional[str] = None
    debit_account: Optional[str] = None
    credit_account: Optional[str] = None
    execute_by: Optional[str] = None
    parse_error: Optional[StatusCode] = None

    @property
    def ok(self) -> bool:
        return self.parse_error is None


GRAMMARS: tuple[Grammar, ...] = (
    Grammar(
        type=TransactionType.DEBIT,
        verb="debit",
        anchors=("from account", "for credit to account"),
        first_account_field="debit_account",
    ),
    Grammar(
        type=TransactionType.CREDIT,
        verb="credit",
        anchors=("to account", "for debit from account"),
        first_account_field="credit_account",
    ),
)


class KeywordScanner:
    """Split an instruction into raw fields using fixed anchor phrases."""

    def __init__(self, grammars: tuple[Grammar, ...] = GRAMMARS) -> None:
        self._grammars = grammars

    def scan(self, instruction: str) -> ParsedInstruction:
        """Tokenize one instruction; failures are reported via ``parse_error``."""

        normalized = instruction.lower().strip()

        grammar = self._select_grammar(normalized)
        if grammar is None:
            return ParsedInstruction(parse_error=StatusCode.MALFORMED_INSTRUCTION)

        first_anchor, second_anchor = grammar.anchors
        verb_pos = normalized.find(grammar.verb)
        first_pos = normalized.find(first_anchor)
        second_pos = normalized.find(second_anchor)

        if first_pos == -1 or second_pos == -1:
            return ParsedInstruction(parse_error=StatusCode.MISSING_KEYWORDS)
        if not verb_pos < first_pos < second_pos:
            return ParsedInstruction(parse_error=StatusCode.INVALID_KEYWORD_ORDER)

        tokens = normalized[verb_pos + len(grammar.verb):first_pos].split()
        if len(tokens) < 2:
            return ParsedInstruction(parse_error=StatusCode.MALFORMED_INSTRUCTION)

        second_start = second_pos + len(second_anchor)
        date_pos = normalized.find(DATE_ANCHOR, second_start)
        second_end = date_pos if date_pos != -1 else len(normalized)

        first_account = normalized[first_pos + len(first_anchor):second_pos].strip()
        second_account = normalized[second_start:second_end].strip()
        execute_by = normalized[date_pos + len(DATE_ANCHOR):].strip() if date_pos != -1 else ""

        if grammar.first_account_field == "debit_account":
            debit_account, credit_account = first_account, second_account
        else:
            debit_account, credit_account = second_account, first_account

        return ParsedInstruction(
            type=grammar.type,
            amount=tokens[0],
            currency=tokens[1].upper(),
            debit_account=debit_account,
            credit_account=credit_account,
            execute_by=execute_by or None,
        )

    def _select_grammar(self, normalized: str) -> Optional[Grammar]:
        for grammar in self._grammars:
            if normalized.startswith(grammar.verb):
                return grammar
        return None
