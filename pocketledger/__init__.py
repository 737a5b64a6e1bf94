"""Mini README: Core package initializer for Pocket Ledger.

Pocket Ledger is a single-page expense tracker: record named expenses, watch
the running total, and delete entries you no longer need. Everything lives
in process memory. The package root only re-exports the logging helper so
modules can share one logging setup.
"""

from .logging_utils import get_logger

__all__ = ["get_logger"]
