"""Signer port interface for pre-hashed signatures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import (
        Ed25519PrivateKey,
        Ed25519PublicKey,
    )


class SignerPort(Protocol):
    """Port interface for signing externally computed digests.

    The digest is signed as-is; the signature scheme must not hash it again.

    Side effects: None (pure computation).
    """

    def sign(self, private_key: Ed25519PrivateKey, digest: bytes) -> bytes:
        """Sign a digest.

        Args:
            private_key: Signing key
            digest: 64-byte content digest

        Returns:
            64-byte signature

        Raises:
            SigningError: If the key or digest cannot be used for signing
        """
        ...

    def verify(self, public_key: Ed25519PublicKey, digest: bytes, signature: bytes) -> None:
        """Verify a signature over a digest.

        Args:
            public_key: Verifying key
            digest: 64-byte content digest
            signature: Signature to check

        Raises:
            VerificationError: If the signature is not authentic
        """
        ...
