from abc import ABC, abstractmethod

from src.api.utils.http_helper import HttpRequest, HttpResponse


class IController(ABC):
    """Request handler interface - anything that turns a request into an envelope"""

    @abstractmethod
    async def handle(self, request: HttpRequest) -> HttpResponse:
        pass
