"""Mini README: Expense identifier generation.

``ExpenseIdGenerator`` hands out strictly increasing integers, so two
expenses submitted within the same millisecond still get distinct ids.
"""

from __future__ import annotations

import itertools


class ExpenseIdGenerator:
    """Monotonic integer id source, one per ledger."""

    def __init__(self, start: int = 1) -> None:
        self._counter = itertools.count(start)

    def __call__(self) -> int:
        return next(self._counter)
