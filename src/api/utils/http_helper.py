"""
HTTP envelope types and helpers.

Every request handler accepts an HttpRequest and returns an HttpResponse;
the status code alone determines whether the body is a result or an
ErrorDescriptor.
"""

import traceback
from typing import Any, Dict

from fastapi import status
from pydantic import BaseModel, Field

from src.api.error import ErrorDescriptor, server_error as server_error_descriptor


class HttpRequest(BaseModel):
    body: Dict[str, Any] = Field(default_factory=dict)


class HttpResponse(BaseModel):
    status_code: int
    body: Any = None


def bad_request(error: ErrorDescriptor) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_400_BAD_REQUEST, body=error)


def server_error(error: BaseException) -> HttpResponse:
    """500 response; the formatted traceback travels on the descriptor only"""
    stack = "".join(traceback.format_exception(error))
    return HttpResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        body=server_error_descriptor(stack),
    )


def ok(data: Any) -> HttpResponse:
    return HttpResponse(status_code=status.HTTP_200_OK, body=data)
