"""Mini README: Display helpers for amounts, dates, and counts.

Structure:
    * format_currency - ``$15.50`` style totals.
    * format_expense_amount - ``-$12.50`` style list entries.
    * format_expense_date - local calendar date of an expense timestamp.
    * describe_count - ``Tracking 3 transaction(s)`` summary line.
"""

from __future__ import annotations

import math
from datetime import datetime


def format_currency(amount: float, symbol: str = "$") -> str:
    """Render ``amount`` to two decimal places behind ``symbol``."""

    if math.isinf(amount):
        return f"{symbol}Infinity"
    return f"{symbol}{amount:.2f}"


def format_expense_amount(amount: float, symbol: str = "$") -> str:
    """Expenses are shown as outgoing money."""

    return f"-{format_currency(amount, symbol)}"


def format_expense_date(timestamp: datetime, date_format: str = "%m/%d/%Y") -> str:
    """Render the timestamp's date in the server's local timezone."""

    local = timestamp.astimezone() if timestamp.tzinfo is not None else timestamp
    return local.strftime(date_format)


def describe_count(count: int) -> str:
    return f"Tracking {count} transaction(s)"
