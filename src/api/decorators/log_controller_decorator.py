import logging

from fastapi import status

from src.api.controllers.controller import IController
from src.api.utils.http_helper import HttpRequest, HttpResponse
from src.app.repositories.log_error_repository import ILogErrorRepository

logger = logging.getLogger(__name__)


class LogControllerDecorator(IController):
    """
    Wraps a controller and records the stack of every 500 response.

    The stack is the one captured on the ErrorDescriptor body. A 500 whose
    body carries no stack (a controller that does not build its errors with
    server_error) is recorded as the text of the body instead.

    The wrapped controller's response is returned as-is, including when the
    error log itself fails.
    """

    def __init__(self, controller: IController, log_error_repository: ILogErrorRepository):
        self.controller = controller
        self.log_error_repository = log_error_repository

    async def handle(self, request: HttpRequest) -> HttpResponse:
        response = await self.controller.handle(request)

        if response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
            stack = getattr(response.body, "stack", None)
            if not stack:
                stack = str(response.body)
            logger.error(f"Server error in {type(self.controller).__name__}")
            try:
                await self.log_error_repository.log_error(stack)
            except Exception:
                logger.exception("Failed to write error log")

        return response
