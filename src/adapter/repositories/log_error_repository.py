from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.log_error_repository import ILogErrorRepository
from src.domain.entities import ErrorLog


class LogErrorRepository(ILogErrorRepository):
    """Error log repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def log_error(self, stack: str) -> None:
        """Append an error log entry and commit it on its own session"""
        self.session.add(ErrorLog(stack=stack))
        await self.session.commit()
