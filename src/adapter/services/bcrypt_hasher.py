import asyncio

import bcrypt

from src.app.errors import HashingError
from src.app.services.hasher import IHasher

# bcrypt only reads the first 72 bytes of a secret
MAX_SECRET_BYTES = 72


class BcryptHasher(IHasher):
    """
    Hasher backed by bcrypt.

    A fresh salt is generated for every digest; the cost factor is fixed at
    construction. Hashing runs in a worker thread so the event loop keeps
    serving other requests. Secrets longer than 72 bytes are rejected rather
    than truncated.
    """

    def __init__(self, salt_rounds: int = 12):
        self.salt_rounds = salt_rounds

    async def hash(self, plaintext: str) -> str:
        secret = plaintext.encode("utf-8")
        if len(secret) > MAX_SECRET_BYTES:
            raise HashingError(f"Secret exceeds {MAX_SECRET_BYTES} bytes")

        try:
            digest = await asyncio.to_thread(
                bcrypt.hashpw, secret, bcrypt.gensalt(self.salt_rounds)
            )
        except (ValueError, TypeError, MemoryError) as exc:
            raise HashingError("Failed to hash value") from exc
        return digest.decode("utf-8")
