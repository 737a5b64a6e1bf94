"""Mini README: Interactive interfaces for Pocket Ledger.

Exports the FastAPI application factory that serves the expense form and
its JSON mirror.
"""

from .web_app import create_application

__all__ = ["create_application"]
