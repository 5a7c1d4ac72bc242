"""Verify pipeline: decode, decompress, hash, verify."""

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
from binsign.bundle import decode_bundle
from binsign.utils.paths import resolve_output_path

if TYPE_CHECKING:
    from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PublicKey

logger = logging.getLogger(__name__)


class VerifyResult(BaseModel):
    """Outcome of a successful verify operation."""

    output_path: Path
    original_size: int


class VerifyService:
    """Recovers and authenticates the original file from a bundle.

    This is a strict accept/reject gate: the recovered content is written
    only after the signature has been verified over its digest.
    """

    def __init__(
        self,
        *,
        hasher: HasherPort,
        signer: SignerPort,
        compressor: CompressionPort,
        key_store: KeyStorePort,
        storage: StoragePort,
        default_suffix: str = ".ver",
    ) -> None:
        self.hasher = hasher
        self.signer = signer
        self.compressor = compressor
        self.key_store = key_store
        self.storage = storage
        self.default_suffix = default_suffix

    def verify_bytes(self, data: bytes, public_key: Ed25519PublicKey) -> bytes:
        """Decode and authenticate an encoded bundle held in memory.

        Returns:
            The recovered original content

        Raises:
            BundleDecodingError: If ``data`` is not a well-formed bundle
            DecompressionError: If the payload is corrupt or the size disagrees
            VerificationError: If the signature does not match
        """
        logger.info("Decoding bundle...")
        bundle = decode_bundle(data)
        logger.info("Decompressing...")
        content = self.compressor.decompress(bundle.payload, bundle.original_size)
        logger.info("Hashing file...")
        digest = self.hasher.hash(content)
        logger.info("Verifying...")
        self.signer.verify(public_key, digest, bundle.signature)
        return content

    def verify_file(
        self,
        bundle_path: Path,
        public_key_path: Path,
        output_path: Path | None = None,
    ) -> VerifyResult:
        """Verify ``bundle_path`` and write the recovered file.

        If ``output_path`` is ``None`` the file is written next to the bundle
        with the default suffix appended (``file.txt.sig`` -> ``file.txt.sig.ver``).
        """
        destination = resolve_output_path(bundle_path, output_path, self.default_suffix)

        logger.info("Reading verifying key...")
        public_key = self.key_store.load_public_key(public_key_path)
        logger.info("Reading file...")
        data = self.storage.read_bytes(bundle_path)

        content = self.verify_bytes(data, public_key)

        logger.info("Writing decoded file to %s...", destination)
        self.storage.write_bytes(destination, content)
        return VerifyResult(output_path=destination, original_size=len(content))
