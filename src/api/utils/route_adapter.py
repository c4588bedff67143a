from typing import Any, Callable

from fastapi import Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from src.api.controllers.controller import IController
from src.api.error import ErrorDescriptor
from src.api.utils.http_helper import HttpRequest


def to_content(body: Any) -> Any:
    """Serialize an envelope body; error stacks never leave the process"""
    if isinstance(body, ErrorDescriptor):
        return {"error": body.model_dump(mode="json", exclude_none=True)}
    return jsonable_encoder(body)


def adapt_route(controller_dependency: Callable[..., IController]) -> Callable:
    """
    Build a FastAPI endpoint around a controller.

    Non-JSON and non-object bodies are handed to the controller as an empty
    body so that it reports the missing params itself.
    """

    async def route(
        request: Request, controller: IController = Depends(controller_dependency)
    ) -> JSONResponse:
        try:
            body = await request.json()
        except ValueError:
            body = {}

        http_request = HttpRequest(body=body if isinstance(body, dict) else {})
        http_response = await controller.handle(http_request)

        return JSONResponse(
            status_code=http_response.status_code,
            content=to_content(http_response.body),
        )

    return route
