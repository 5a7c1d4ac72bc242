"""Concrete adapters wiring application ports to built-in implementations."""

from __future__ import annotations

from .blake import Blake3Hasher, hash_bytes
from .ed25519ph import Ed25519phSigner
from .keystore import DERKeyStore
from .storage import FileSystemStorageAdapter
from .zstd import ZstdCompressionAdapter

__all__ = [
    "Blake3Hasher",
    "DERKeyStore",
    "Ed25519phSigner",
    "FileSystemStorageAdapter",
    "ZstdCompressionAdapter",
    "hash_bytes",
]
