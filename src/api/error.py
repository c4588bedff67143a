from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ErrorKind(str, Enum):
    """Category of a failed signup request"""

    missing_param = "MissingParam"
    invalid_param = "InvalidParam"
    server_error = "ServerError"


class ErrorDescriptor(BaseModel):
    """
    Error body of an HttpResponse.

    stack is only set for server errors and is excluded from serialization;
    it exists for the error log.
    """

    kind: ErrorKind
    field: Optional[str] = None
    message: str
    stack: Optional[str] = Field(default=None, exclude=True, repr=False)


def missing_param(field: str) -> ErrorDescriptor:
    return ErrorDescriptor(
        kind=ErrorKind.missing_param, field=field, message=f"Missing param: {field}"
    )


def invalid_param(field: str) -> ErrorDescriptor:
    return ErrorDescriptor(
        kind=ErrorKind.invalid_param, field=field, message=f"Invalid param: {field}"
    )


def server_error(stack: Optional[str] = None) -> ErrorDescriptor:
    return ErrorDescriptor(
        kind=ErrorKind.server_error, message="Internal server error", stack=stack
    )
