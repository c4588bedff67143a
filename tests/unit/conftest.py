import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.add = AsyncMock()
    return uow


@pytest.fixture
def mock_hasher():
    hasher = MagicMock()
    hasher.hash = AsyncMock(return_value="hashed_password")
    return hasher
