"""Mini README: Expense ledger domain for Pocket Ledger.

This package holds the in-memory expense list and the draft form that feeds
it. ``reducer`` contains the pure transitions; ``view_model`` wraps them in
a small stateful object the web interface talks to.
"""

from .actions import Delete, EditField, LedgerAction, Submit
from .identifiers import ExpenseIdGenerator
from .models import DRAFT_FIELDS, Draft, Expense, LedgerState
from .reducer import (
    INVALID_DRAFT_MESSAGE,
    ExpenseValidationError,
    parse_amount,
    apply_action,
    total,
    validate_draft,
)
from .view_model import LedgerViewModel

__all__ = [
    "DRAFT_FIELDS",
    "Delete",
    "Draft",
    "EditField",
    "Expense",
    "ExpenseIdGenerator",
    "ExpenseValidationError",
    "INVALID_DRAFT_MESSAGE",
    "LedgerAction",
    "LedgerState",
    "LedgerViewModel",
    "Submit",
    "parse_amount",
    "apply_action",
    "total",
    "validate_draft",
]
