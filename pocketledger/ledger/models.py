"""Mini README: Value types shared by the expense ledger.

Structure:
    * Expense - committed, immutable ledger entry.
    * Draft - raw text typed into the form but not yet submitted.
    * LedgerState - snapshot of the expense list, draft, and current error.

All three are frozen dataclasses. State changes always build a new
``LedgerState`` so a half-applied update can never be observed.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Dict, Optional, Tuple

DRAFT_FIELDS = ("name", "amount")


@dataclass(frozen=True, slots=True)
class Expense:
    """A recorded expense; ``expense_id`` is its identity."""

    expense_id: int
    name: str
    amount: float
    timestamp: datetime

    def as_dict(self) -> Dict[str, object]:
        """Export the expense with serialisable values."""

        return {
            "id": self.expense_id,
            "name": self.name,
            "amount": self.amount,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True, slots=True)
class Draft:
    """Unvalidated form input held between keystrokes and submission."""

    name: str = ""
    amount: str = ""

    def with_field(self, field_name: str, value: str) -> "Draft":
        """Return a copy with one field replaced."""

        if field_name not in DRAFT_FIELDS:
            raise ValueError(f"Unknown draft field: {field_name}")
        return replace(self, **{field_name: value})

    def as_dict(self) -> Dict[str, str]:
        return {"name": self.name, "amount": self.amount}


@dataclass(frozen=True, slots=True)
class LedgerState:
    """Everything the ledger page renders from.

    ``expenses`` is ordered newest first.
    """

    expenses: Tuple[Expense, ...] = ()
    draft: Draft = field(default_factory=Draft)
    error: Optional[str] = None
