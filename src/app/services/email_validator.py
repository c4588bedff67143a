from abc import ABC, abstractmethod


class IEmailValidator(ABC):
    """Email syntax check - application layer"""

    @abstractmethod
    def is_valid(self, email: str) -> bool:
        """Return True if email is syntactically valid. Never raises for strings."""
        pass
