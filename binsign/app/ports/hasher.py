"""Hasher port interface for content digests."""

from typing import Protocol

DIGEST_SIZE = 64


class HashStatePort(Protocol):
    """Incremental hash state for a single message."""

    def update(self, data: bytes) -> None:
        """Feed the next chunk of the message."""
        ...

    def finalize(self) -> bytes:
        """Return the 64-byte digest of everything fed so far."""
        ...


class HasherPort(Protocol):
    """Port interface for the content hasher.

    Implementations must be deterministic: the same bytes produce the same
    digest whether fed in one chunk or many, and any internal parallelism
    must not be observable in the result.

    Side effects: None (pure computation).
    """

    def new(self) -> HashStatePort:
        """Return a fresh incremental hash state."""
        ...

    def hash(self, data: bytes) -> bytes:
        """Hash data in one call.

        Args:
            data: Message bytes

        Returns:
            64-byte digest
        """
        ...
