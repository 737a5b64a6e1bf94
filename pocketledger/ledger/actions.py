"""Mini README: Tagged actions accepted by the ledger reducer.

Structure:
    * EditField - overwrite one draft field with raw text.
    * Submit - validate the draft and commit it as an expense.
    * Delete - remove an expense by identifier.
    * LedgerAction - union of the above for type hints.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class EditField:
    field: str
    value: str


@dataclass(frozen=True, slots=True)
class Submit:
    pass


@dataclass(frozen=True, slots=True)
class Delete:
    expense_id: int


LedgerAction = Union[EditField, Submit, Delete]
