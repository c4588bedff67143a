"""
Account Use Cases

Account registration business logic.
"""

from .add_account_use_case import AddAccountUseCase, IAddAccount

__all__ = [
    "AddAccountUseCase",
    "IAddAccount",
]
