"""DER-encoded Ed25519 key files (PKCS#8 private, SubjectPublicKeyInfo public)."""

from __future__ import annotations

import logging
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
    load_der_private_key,
    load_der_public_key,
)

from binsign.app.ports import KeyStorePort, StoragePort
from binsign.errors import FileIOError, PrivateKeyError, PublicKeyError
from binsign.utils.crypto import write_secure_file

logger = logging.getLogger(__name__)

_DER_HINT = "Make sure to use the DER format for keys."


class DERKeyStore(KeyStorePort):
    """Key store reading and writing unencrypted DER key files."""

    def __init__(self, storage: StoragePort) -> None:
        self._storage = storage

    def load_private_key(self, path: Path) -> Ed25519PrivateKey:
        der = self._storage.read_bytes(path)
        try:
            key = load_der_private_key(der, password=None)
        except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
            raise PrivateKeyError(
                f"Cannot decode private key {path}. {_DER_HINT} Details: {exc}"
            ) from exc
        if not isinstance(key, Ed25519PrivateKey):
            raise PrivateKeyError(
                f"Private key {path} is a {type(key).__name__}, expected Ed25519"
            )
        return key

    def load_public_key(self, path: Path) -> Ed25519PublicKey:
        der = self._storage.read_bytes(path)
        try:
            key = load_der_public_key(der)
        except (ValueError, UnsupportedAlgorithm) as exc:
            raise PublicKeyError(
                f"Cannot decode public key {path}. {_DER_HINT} Details: {exc}"
            ) from exc
        if not isinstance(key, Ed25519PublicKey):
            raise PublicKeyError(
                f"Public key {path} is a {type(key).__name__}, expected Ed25519"
            )
        return key

    def generate_keypair(self, private_key_path: Path, public_key_path: Path) -> None:
        signing_key = Ed25519PrivateKey.generate()
        private_der = encode_private_key(signing_key)
        public_der = encode_public_key(signing_key.public_key())

        try:
            write_secure_file(Path(private_key_path), private_der)
        except OSError as exc:
            raise FileIOError(f"Cannot write private key {private_key_path}: {exc}") from exc
        self._storage.write_bytes(Path(public_key_path), public_der)
        logger.info("Generated keypair %s / %s", private_key_path, public_key_path)


def encode_private_key(key: Ed25519PrivateKey) -> bytes:
    """Encode ``key`` as unencrypted PKCS#8 DER."""
    try:
        return key.private_bytes(Encoding.DER, PrivateFormat.PKCS8, NoEncryption())
    except (ValueError, TypeError) as exc:
        raise PrivateKeyError(f"Cannot encode private key: {exc}") from exc


def encode_public_key(key: Ed25519PublicKey) -> bytes:
    """Encode ``key`` as SubjectPublicKeyInfo DER."""
    try:
        return key.public_bytes(Encoding.DER, PublicFormat.SubjectPublicKeyInfo)
    except (ValueError, TypeError) as exc:
        raise PublicKeyError(f"Cannot encode public key: {exc}") from exc

