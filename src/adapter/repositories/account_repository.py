from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.errors import PersistenceError
from src.app.repositories.account_repository import IAccountRepository
from src.domain.entities import Account, AccountDraft


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def add(self, draft: AccountDraft) -> Account:
        """Create a new account; the id is generated here"""
        account = Account(name=draft.name, email=draft.email, password=draft.password)
        self.session.add(account)
        try:
            await self.session.flush()
            await self.session.refresh(account)
        except IntegrityError as exc:
            raise PersistenceError(f"Account could not be stored: {draft.email}") from exc
        except SQLAlchemyError as exc:
            raise PersistenceError("Account store unavailable") from exc
        return account
