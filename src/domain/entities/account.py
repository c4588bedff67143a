"""
Account Entity

Represents a registered account and the draft it is created from.
"""

from sqlmodel import Field, SQLModel

from src.domain.base import BaseModel, generate_uuid


class AccountDraft(BaseModel):
    """
    Account prior to persistence - no id yet.

    The password is plaintext when produced by the signup handler and is
    replaced by its digest before the draft reaches a store.
    """

    name: str
    email: str
    password: str


class Account(SQLModel, table=True):
    """
    Account entity - a persisted signup.

    Business Rules:
    - id is assigned at persistence time and never changes
    - Email must be unique across all accounts
    - Password is stored as a bcrypt digest, never plaintext
    """

    __tablename__ = "accounts"

    id: str = Field(default_factory=generate_uuid, primary_key=True, max_length=36)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password: str = Field(max_length=60)  # Bcrypt output is 60 chars
