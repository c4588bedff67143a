from abc import ABC, abstractmethod

from src.domain.entities import Account, AccountDraft


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def add(self, draft: AccountDraft) -> Account:
        """
        Persist a new account from a draft whose password is already hashed.

        Returns:
            The stored Account with a freshly assigned id

        Raises:
            PersistenceError: connectivity failure or constraint violation
        """
        pass
