from abc import ABC, abstractmethod


class ILogErrorRepository(ABC):
    """Error log repository interface - application layer"""

    @abstractmethod
    async def log_error(self, stack: str) -> None:
        """Record the stack trace of an unexpected failure"""
        pass
