from fastapi import Depends
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.repositories.log_error_repository import LogErrorRepository
from src.adapter.services.bcrypt_hasher import BcryptHasher
from src.adapter.services.email_validator_adapter import EmailValidatorAdapter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.controllers.controller import IController
from src.api.controllers.signup_controller import SignupController
from src.api.decorators.log_controller_decorator import LogControllerDecorator
from src.app.repositories.log_error_repository import ILogErrorRepository
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import AddAccountUseCase

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_log_error_repository():
    # Separate session: a rolled back signup must not take the log entry with it
    async with AsyncSessionLocal() as session:
        yield LogErrorRepository(session)


def make_signup_controller(
    uow: UnitOfWork, log_error_repository: ILogErrorRepository
) -> IController:
    """
    Compose the signup pipeline from concrete adapters.

    Returns:
        SignupController wrapped in LogControllerDecorator
    """
    add_account = AddAccountUseCase(
        BcryptHasher(ApplicationConfig.BCRYPT_SALT_ROUNDS), uow
    )
    controller = SignupController(EmailValidatorAdapter(), add_account)
    return LogControllerDecorator(controller, log_error_repository)


async def get_signup_controller(
    uow: UnitOfWork = Depends(get_unit_of_work),
    log_error_repository: ILogErrorRepository = Depends(get_log_error_repository),
) -> IController:
    return make_signup_controller(uow, log_error_repository)
