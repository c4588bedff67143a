"""
Unit tests for BcryptHasher

Uses the minimum bcrypt cost factor to keep tests fast.
"""
from unittest.mock import patch

import bcrypt
import pytest

from src.adapter.services.bcrypt_hasher import BcryptHasher
from src.app.errors import HashingError


@pytest.mark.asyncio
async def test_returns_verifiable_digest():
    """Test that the digest differs from plaintext and verifies with bcrypt"""
    hasher = BcryptHasher(salt_rounds=4)

    digest = await hasher.hash("any_value")

    assert digest != "any_value"
    assert bcrypt.checkpw(b"any_value", digest.encode("utf-8"))


@pytest.mark.asyncio
async def test_salt_uses_configured_rounds():
    """Test that gensalt is called with the configured cost factor"""
    hasher = BcryptHasher(salt_rounds=12)

    with patch(
        "src.adapter.services.bcrypt_hasher.bcrypt.gensalt",
        wraps=bcrypt.gensalt,
    ) as gensalt_spy, patch(
        "src.adapter.services.bcrypt_hasher.bcrypt.hashpw", return_value=b"hash"
    ) as hashpw_mock:
        digest = await hasher.hash("any_value")

    gensalt_spy.assert_called_once_with(12)
    assert hashpw_mock.call_args[0][0] == b"any_value"
    assert digest == "hash"


@pytest.mark.asyncio
async def test_salt_differs_per_call():
    """Test that the same plaintext hashes to different digests"""
    hasher = BcryptHasher(salt_rounds=4)

    first = await hasher.hash("any_value")
    second = await hasher.hash("any_value")

    assert first != second


@pytest.mark.asyncio
async def test_primitive_failure_raises_hashing_error():
    """Test that bcrypt errors surface as HashingError"""
    hasher = BcryptHasher(salt_rounds=4)

    with patch(
        "src.adapter.services.bcrypt_hasher.bcrypt.hashpw",
        side_effect=ValueError("password too long"),
    ):
        with pytest.raises(HashingError) as exc_info:
            await hasher.hash("any_value")

    assert isinstance(exc_info.value.__cause__, ValueError)


@pytest.mark.asyncio
async def test_secret_over_72_bytes_raises_hashing_error():
    """Test that long secrets are rejected instead of silently truncated"""
    hasher = BcryptHasher(salt_rounds=4)

    with pytest.raises(HashingError):
        await hasher.hash("x" * 100)


@pytest.mark.asyncio
async def test_multibyte_secret_measured_in_bytes():
    """Test that the limit counts encoded bytes, not characters"""
    hasher = BcryptHasher(salt_rounds=4)

    # 37 characters, 74 bytes in UTF-8
    with pytest.raises(HashingError):
        await hasher.hash("é" * 37)


@pytest.mark.asyncio
async def test_secret_of_exactly_72_bytes_is_hashed():
    hasher = BcryptHasher(salt_rounds=4)

    digest = await hasher.hash("x" * 72)

    assert bcrypt.checkpw(b"x" * 72, digest.encode("utf-8"))
