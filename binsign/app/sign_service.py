"""Sign pipeline: hash, sign, compress, encode.

The signature is computed over the digest of the uncompressed content before
compression runs, so the compression level never affects verification.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import BaseModel

from binsign.app.ports import (
    CompressionPort,
    HasherPort,
    KeyStorePort,
    SignerPort,
    StoragePort,
)
from binsign.bundle import Bundle, encode_bundle
from binsign.utils.paths import resolve_output_path

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

logger = logging.getLogger(__name__)


class SignResult(BaseModel):
    """Outcome of a successful sign operation."""

    output_path: Path
    original_size: int
    payload_size: int
    bundle_size: int
    signature: str


class SignService:
    """Orchestrates bundle creation from a file and a private key.

    Every step aborts the operation on failure; the bundle is written only
    after it has been fully built and encoded.
    """

    def __init__(
        self,
        *,
        hasher: HasherPort,
        signer: SignerPort,
        compressor: CompressionPort,
        key_store: KeyStorePort,
        storage: StoragePort,
        default_suffix: str = ".sig",
    ) -> None:
        self.hasher = hasher
        self.signer = signer
        self.compressor = compressor
        self.key_store = key_store
        self.storage = storage
        self.default_suffix = default_suffix

    def sign_bytes(
        self,
        content: bytes,
        private_key: Ed25519PrivateKey,
        compression_level: int,
    ) -> Bundle:
        """Build a bundle for ``content`` in memory.

        Args:
            content: Original file content
            private_key: Ed25519 signing key
            compression_level: zstd level for the payload

        Returns:
            The signed, compressed bundle
        """
        logger.info("Original file size (in bytes): %d", len(content))
        logger.info("Hashing file...")
        digest = self.hasher.hash(content)
        logger.info("Signing hash...")
        signature = self.signer.sign(private_key, digest)
        logger.info("Compressing...")
        payload = self.compressor.compress(content, compression_level)
        return Bundle(signature=signature, original_size=len(content), payload=payload)

    def sign_file(
        self,
        file_path: Path,
        private_key_path: Path,
        output_path: Path | None = None,
        *,
        compression_level: int,
    ) -> SignResult:
        """Sign ``file_path`` and write the bundle.

        If ``output_path`` is ``None`` the bundle is written next to the
        input with the default suffix appended (``file.txt`` -> ``file.txt.sig``).

        Raises:
            FileIOError: If a file cannot be read or written
            KeyMaterialError: If the private key cannot be decoded
            SigningError: If signing fails
            CompressionError: If compression fails
        """
        destination = resolve_output_path(file_path, output_path, self.default_suffix)

        logger.info("Reading signing key...")
        private_key = self.key_store.load_private_key(private_key_path)
        logger.info("Reading file...")
        content = self.storage.read_bytes(file_path)

        bundle = self.sign_bytes(content, private_key, compression_level)

        logger.info("Encoding bundle...")
        encoded = encode_bundle(bundle)
        logger.info("Writing bundle to %s...", destination)
        self.storage.write_bytes(destination, encoded)

        return SignResult(
            output_path=destination,
            original_size=bundle.original_size,
            payload_size=len(bundle.payload),
            bundle_size=len(encoded),
            signature=bundle.signature.hex(),
        )
