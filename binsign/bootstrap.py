"""Application bootstrap wiring ports, adapters, and services."""

from __future__ import annotations

from dataclasses import dataclass

from binsign.app import SignService, VerifyService
from binsign.app.adapters import (
    Blake3Hasher,
    DERKeyStore,
    Ed25519phSigner,
    FileSystemStorageAdapter,
    ZstdCompressionAdapter,
)
from binsign.app.ports import (
    CompressionPort,
    HasherPort,
    KeyStorePort,
    SignerPort,
    StoragePort,
)
from binsign.config import Settings, get_settings


@dataclass(slots=True)
class ApplicationContainer:
    """Aggregates wired services and adapters for the CLI layer."""

    settings: Settings
    sign_service: SignService
    verify_service: VerifyService
    hasher: HasherPort
    signer: SignerPort
    compressor: CompressionPort
    key_store: KeyStorePort
    storage_port: StoragePort


def bootstrap_application(settings: Settings | None = None) -> ApplicationContainer:
    """Instantiate adapters and services for CLI consumption."""

    active_settings = settings or get_settings()

    storage = FileSystemStorageAdapter()
    hasher = Blake3Hasher(max_threads=active_settings.hash_threads)
    signer = Ed25519phSigner()
    compressor = ZstdCompressionAdapter()
    key_store = DERKeyStore(storage)

    sign_service = SignService(
        hasher=hasher,
        signer=signer,
        compressor=compressor,
        key_store=key_store,
        storage=storage,
        default_suffix=active_settings.sign_suffix,
    )
    verify_service = VerifyService(
        hasher=hasher,
        signer=signer,
        compressor=compressor,
        key_store=key_store,
        storage=storage,
        default_suffix=active_settings.verify_suffix,
    )

    return ApplicationContainer(
        settings=active_settings,
        sign_service=sign_service,
        verify_service=verify_service,
        hasher=hasher,
        signer=signer,
        compressor=compressor,
        key_store=key_store,
        storage_port=storage,
    )
