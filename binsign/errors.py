"""Exception hierarchy for binsign.

Every failure surfaced by the sign and verify pipelines is a ``BinsignError``.
Subclasses are tagged with a ``category`` so the CLI (or any other caller) can
report a precise cause instead of a generic failure. The originating
exception is always chained via ``raise ... from exc``.
"""

from __future__ import annotations

from typing import ClassVar


class BinsignError(Exception):
    """Base class for all binsign errors."""

    category: ClassVar[str] = "error"


class FileIOError(BinsignError):
    """Raised when a file cannot be read or written."""

    category: ClassVar[str] = "io"


class KeyMaterialError(BinsignError):
    """Raised when key material is malformed or of the wrong type."""

    category: ClassVar[str] = "key"


class PrivateKeyError(KeyMaterialError):
    """Raised when a private key cannot be decoded or encoded."""


class PublicKeyError(KeyMaterialError):
    """Raised when a public key cannot be decoded or encoded."""


class CryptoError(BinsignError):
    """Base class for signature scheme failures."""

    category: ClassVar[str] = "crypto"


class SigningError(CryptoError):
    """Raised when producing a signature fails.

    Not expected with a valid key; treated as an unexpected, fatal condition.
    """

    category: ClassVar[str] = "signing"


class VerificationError(CryptoError):
    """Raised when a signature does not match the digest and public key.

    This is the expected "not authentic" outcome (tampering, wrong key or
    wrong file), not a crash.
    """

    category: ClassVar[str] = "verification"


class CompressionError(BinsignError):
    """Raised when the payload cannot be compressed."""

    category: ClassVar[str] = "compression"


class DecompressionError(CompressionError):
    """Raised when the payload is corrupt or inconsistent with its declared size."""


class BundleEncodingError(BinsignError):
    """Raised when a bundle cannot be serialized."""

    category: ClassVar[str] = "encoding"


class BundleDecodingError(BinsignError):
    """Raised when a byte stream is not a well-formed bundle."""

    category: ClassVar[str] = "decoding"


__all__ = [
    "BinsignError",
    "BundleDecodingError",
    "BundleEncodingError",
    "CompressionError",
    "CryptoError",
    "DecompressionError",
    "FileIOError",
    "KeyMaterialError",
    "PrivateKeyError",
    "PublicKeyError",
    "SigningError",
    "VerificationError",
]
