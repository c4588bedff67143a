"""
Use Cases

Organized into domain folders:
- accounts/: Account registration
"""

from .accounts import (
    AddAccountUseCase,
    IAddAccount,
)

__all__ = [
    # Accounts
    "AddAccountUseCase",
    "IAddAccount",
]
