from abc import ABC, abstractmethod

from src.app.services.hasher import IHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, AccountDraft


class IAddAccount(ABC):
    """Account registration capability consumed by the signup handler"""

    @abstractmethod
    async def add(self, draft: AccountDraft) -> Account:
        pass


class AddAccountUseCase(IAddAccount):
    """
    Add Account Use Case

    Business Logic:
    1. Hash the draft password
    2. Replace the plaintext password with the digest
    3. Persist through the account store (single attempt)
    4. Commit and return the stored Account unmodified

    Hashing and persistence errors propagate unchanged. Leaving the unit of
    work without commit rolls back, so a failed add never partially commits.
    """

    def __init__(self, hasher: IHasher, uow: UnitOfWork):
        self.hasher = hasher
        self.uow = uow

    async def add(self, draft: AccountDraft) -> Account:
        """
        Register an account

        Args:
            draft: AccountDraft with plaintext password

        Returns:
            Stored Account carrying the password digest

        Raises:
            HashingError: password could not be hashed
            PersistenceError: account could not be stored
        """
        hashed_password = await self.hasher.hash(draft.password)
        hashed_draft = draft.model_copy(update={"password": hashed_password})

        async with self.uow:
            account = await self.uow.accounts.add(hashed_draft)
            await self.uow.commit()

        return account
