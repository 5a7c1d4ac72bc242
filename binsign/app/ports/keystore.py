"""Key store port interface for on-disk key material."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import (
        Ed25519PrivateKey,
        Ed25519PublicKey,
    )


class KeyStorePort(Protocol):
    """Port interface for loading and generating Ed25519 keys.

    Side effects: Reads/writes key files.
    """

    def load_private_key(self, path: Path) -> Ed25519PrivateKey:
        """Load a private key.

        Raises:
            FileIOError: If the file cannot be read
            PrivateKeyError: If the content is not an Ed25519 private key
        """
        ...

    def load_public_key(self, path: Path) -> Ed25519PublicKey:
        """Load a public key.

        Raises:
            FileIOError: If the file cannot be read
            PublicKeyError: If the content is not an Ed25519 public key
        """
        ...

    def generate_keypair(self, private_key_path: Path, public_key_path: Path) -> None:
        """Generate a new keypair and write both halves."""
        ...
