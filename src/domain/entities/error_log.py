"""
ErrorLog Entity

Append-only record of unexpected server failures.
"""

from datetime import UTC, datetime
from uuid import UUID, uuid4

from sqlalchemy import Text
from sqlmodel import Column, DateTime, Field, Index, SQLModel


class ErrorLog(SQLModel, table=True):
    """
    ErrorLog entity - the stack trace of a request that ended in a 500.

    Business Rules:
    - Immutable (never updated or deleted by the service)
    - Stack text is kept verbatim for debugging
    """

    __tablename__ = "error_logs"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    stack: str = Field(sa_column=Column(Text, nullable=False))

    created_at: datetime = Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(DateTime(timezone=True)),
    )

    __table_args__ = (Index("idx_error_log_created_at", "created_at"),)
