"""Ed25519ph signer that signs caller-supplied digests.

RFC 8032 Ed25519ph signs PH(M), normally SHA-512 of the message. Here PH(M)
is the 64-byte BLAKE3 digest computed by the hasher port. PyCryptodome's
EdDSA implementation switches to the pre-hashed variant when handed a
SHA-512 hash object and only ever calls ``digest()`` on it, so the external
digest is presented through a read-only ``SHA512Hash`` subclass.
"""

from __future__ import annotations

from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)
from cryptography.hazmat.primitives.serialization import (
    Encoding,
    NoEncryption,
    PrivateFormat,
    PublicFormat,
)
from Crypto.Hash import SHA512
from Crypto.Signature import eddsa

from binsign.app.ports import DIGEST_SIZE, SignerPort
from binsign.errors import SigningError, VerificationError

SIGNATURE_SIZE = 64


class PrehashedDigest(SHA512.SHA512Hash):
    """A fixed 64-byte digest exposed through the SHA-512 hash interface."""

    def __init__(self, digest: bytes) -> None:
        if len(digest) != DIGEST_SIZE:
            raise ValueError(f"Digest must be {DIGEST_SIZE} bytes, got {len(digest)}")
        super().__init__(None, None)
        self._prehashed = bytes(digest)

    def update(self, data: bytes) -> None:
        raise TypeError("A pre-hashed digest cannot be updated")

    def digest(self) -> bytes:
        return self._prehashed

    def hexdigest(self) -> str:
        return self._prehashed.hex()


class Ed25519phSigner(SignerPort):
    """Signer adapter implementing RFC 8032 Ed25519ph with an empty context."""

    def sign(self, private_key: Ed25519PrivateKey, digest: bytes) -> bytes:
        try:
            seed = private_key.private_bytes(Encoding.Raw, PrivateFormat.Raw, NoEncryption())
            key = eddsa.import_private_key(seed)
            return eddsa.new(key, "rfc8032").sign(PrehashedDigest(digest))
        except (TypeError, ValueError, AttributeError) as exc:
            raise SigningError(f"Failed to sign digest: {exc}") from exc

    def verify(self, public_key: Ed25519PublicKey, digest: bytes, signature: bytes) -> None:
        if len(signature) != SIGNATURE_SIZE:
            raise VerificationError(
                f"Signature must be {SIGNATURE_SIZE} bytes, got {len(signature)}"
            )
        try:
            raw = public_key.public_bytes(Encoding.Raw, PublicFormat.Raw)
            key = eddsa.import_public_key(raw)
            prehashed = PrehashedDigest(digest)
        except (TypeError, ValueError, AttributeError) as exc:
            raise VerificationError(f"Cannot verify with the provided key: {exc}") from exc

        try:
            eddsa.new(key, "rfc8032").verify(prehashed, signature)
        except ValueError as exc:
            raise VerificationError("Signature does not match the content and public key") from exc
