"""Mini README: Pure state transitions for the expense ledger.

Structure:
    * ExpenseValidationError - raised when a draft cannot become an expense.
    * parse_amount - lenient leading-number parse of the amount text.
    * validate_draft - turn a draft into ``(name, amount)`` or raise.
    * total - derived sum of expense amounts.
    * apply_action - apply one ``EditField``/``Submit``/``Delete`` action to a state.

``apply_action`` never mutates its input and has no hidden inputs: ids and
timestamps come from the callables passed in, which keeps it easy to test
and replay.
"""

from __future__ import annotations

import math
import re
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable, Iterable, Optional, Tuple

from .actions import Delete, EditField, LedgerAction, Submit
from .models import Draft, Expense, LedgerState

INVALID_DRAFT_MESSAGE = "Please enter a valid description and a positive amount."

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


class ExpenseValidationError(ValueError):
    """The draft has no description or no positive amount."""

    def __init__(self, message: str = INVALID_DRAFT_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def parse_amount(text: str) -> Optional[float]:
    """Return the number at the start of ``text`` or ``None``.

    Surrounding whitespace is ignored and trailing garbage after a valid
    numeric prefix is dropped, so ``"7abc"`` parses as ``7.0``.
    """

    match = _LEADING_NUMBER.match(text.strip())
    if match is None:
        return None
    value = float(match.group(0))
    if not math.isfinite(value):
        return None
    return value


def validate_draft(draft: Draft) -> Tuple[str, float]:
    """Return the committed name and amount for ``draft``."""

    amount = parse_amount(draft.amount)
    if not draft.name or amount is None or amount <= 0:
        raise ExpenseValidationError()
    return draft.name, amount


def total(expenses: Iterable[Expense]) -> float:
    """Sum of all amounts; ``0.0`` for an empty ledger.

    Amounts are positive, so a sum past the float range is ``math.inf``.
    """

    try:
        return math.fsum(expense.amount for expense in expenses)
    except OverflowError:
        return math.inf


def apply_action(
    state: LedgerState,
    action: LedgerAction,
    *,
    next_id: Callable[[], int],
    clock: Callable[[], datetime] = utc_now,
) -> LedgerState:
    """Return the state that results from applying ``action`` to ``state``."""

    if isinstance(action, EditField):
        return replace(state, draft=state.draft.with_field(action.field, action.value))

    if isinstance(action, Submit):
        try:
            name, amount = validate_draft(state.draft)
        except ExpenseValidationError as error:
            return replace(state, error=error.message)
        expense = Expense(expense_id=next_id(), name=name, amount=amount, timestamp=clock())
        return LedgerState(expenses=(expense, *state.expenses), draft=Draft(), error=None)

    if isinstance(action, Delete):
        remaining = tuple(
            expense for expense in state.expenses if expense.expense_id != action.expense_id
        )
        if len(remaining) == len(state.expenses):
            return state
        return replace(state, expenses=remaining)

    raise TypeError(f"Unsupported ledger action: {action!r}")
