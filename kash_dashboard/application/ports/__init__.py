"""Application ports package."""

from .auth import AuthPort
from .finance_api import FinanceRecordsPort

__all__ = ["AuthPort", "FinanceRecordsPort"]
