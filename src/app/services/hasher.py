from abc import ABC, abstractmethod


class IHasher(ABC):
    """One-way hashing of secrets - application layer"""

    @abstractmethod
    async def hash(self, plaintext: str) -> str:
        """
        Produce an irreversible digest of plaintext.

        Raises:
            HashingError: the underlying primitive failed
        """
        pass
