"""
Signup Service Domain Entities

Each entity in its own file.
"""

from .account import Account, AccountDraft
from .error_log import ErrorLog

__all__ = [
    "Account",
    "AccountDraft",
    "ErrorLog",
]
