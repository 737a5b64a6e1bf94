"""Mini README: Stateful ledger owner used by the web interface.

Structure:
    * LedgerViewModel - holds the current ``LedgerState`` and exposes the
      form operations (edit a field, submit, delete, total, snapshot).

Every operation dispatches one action through ``apply_action`` and swaps the
result in as the new state, so callers only ever see complete states.
A failed submission records the message in state (where the page shows
it) and raises ``ExpenseValidationError`` to the caller.
"""

from __future__ import annotations

import math
from datetime import datetime
from typing import Callable, Dict, Optional, Tuple

from ..logging_utils import get_logger
from .actions import Delete, EditField, LedgerAction, Submit
from .identifiers import ExpenseIdGenerator
from .models import Draft, Expense, LedgerState
from .reducer import ExpenseValidationError, apply_action, total, utc_now

LOGGER = get_logger(__name__)


class LedgerViewModel:
    """In-memory expense list plus the draft form that feeds it."""

    def __init__(
        self,
        *,
        id_generator: Optional[Callable[[], int]] = None,
        clock: Callable[[], datetime] = utc_now,
        state: Optional[LedgerState] = None,
    ) -> None:
        self._state = state or LedgerState()
        if id_generator is None:
            # Continue after any seeded ids so new entries never reuse one.
            start = max((expense.expense_id for expense in self._state.expenses), default=0) + 1
            id_generator = ExpenseIdGenerator(start=start)
        self._next_id = id_generator
        self._clock = clock
        LOGGER.debug("Ledger initialised with %s expenses", len(self._state.expenses))

    @property
    def state(self) -> LedgerState:
        return self._state

    @property
    def expenses(self) -> Tuple[Expense, ...]:
        return self._state.expenses

    @property
    def draft(self) -> Draft:
        return self._state.draft

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    @property
    def total(self) -> float:
        """Running total, recomputed from the current expenses."""

        return total(self._state.expenses)

    def dispatch(self, action: LedgerAction) -> LedgerState:
        """Apply ``action`` and return the new state."""

        self._state = apply_action(self._state, action, next_id=self._next_id, clock=self._clock)
        return self._state

    def update_field(self, field_name: str, value: str) -> Draft:
        """Overwrite one draft field without validating it."""

        return self.dispatch(EditField(field=field_name, value=value)).draft

    def submit(self) -> Expense:
        """Commit the current draft, raising when it is invalid."""

        before = self._state
        after = self.dispatch(Submit())
        if after.expenses is before.expenses:
            LOGGER.info("Rejected draft name=%r amount=%r", before.draft.name, before.draft.amount)
            raise ExpenseValidationError(after.error)
        expense = after.expenses[0]
        LOGGER.info("Recorded expense %s (%s, %.2f)", expense.expense_id, expense.name, expense.amount)
        return expense

    def delete(self, expense_id: int) -> None:
        """Remove the expense with ``expense_id``; unknown ids are ignored."""

        before = self._state
        after = self.dispatch(Delete(expense_id=expense_id))
        if after is before:
            LOGGER.debug("Delete ignored, no expense with id %s", expense_id)
        else:
            LOGGER.info("Deleted expense %s", expense_id)

    @property
    def json_total(self) -> Optional[float]:
        """Total for JSON bodies, which cannot carry infinity; ``None`` then."""

        value = self.total
        return value if math.isfinite(value) else None

    def export_snapshot(self) -> Dict[str, object]:
        """Export the ledger for JSON responses."""

        return {
            "expenses": [expense.as_dict() for expense in self._state.expenses],
            "draft": self._state.draft.as_dict(),
            "error": self._state.error,
            "total": self.json_total,
            "count": len(self._state.expenses),
        }
