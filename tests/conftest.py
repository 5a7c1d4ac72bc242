"""Pytest configuration and fixtures."""

import gc
import shutil
import tempfile
from collections.abc import Generator
from pathlib import Path

import pytest
from cryptography.hazmat.primitives.asymmetric.ed25519 import (
    Ed25519PrivateKey,
    Ed25519PublicKey,
)

from binsign.bootstrap import ApplicationContainer, bootstrap_application
from binsign.config import Settings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    try:
        yield Path(tmpdir)
    finally:
        # Force garbage collection to release any file handles
        gc.collect()
        shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the caller's environment and .env file."""
    return Settings(_env_file=None, hash_threads=-1, compression_level=3)


@pytest.fixture
def container(settings: Settings) -> ApplicationContainer:
    """Fully wired application container."""
    return bootstrap_application(settings=settings)


@pytest.fixture
def keypair(temp_dir: Path, container: ApplicationContainer) -> tuple[Path, Path]:
    """Generate a DER keypair on disk and return (private_path, public_path)."""
    private_path = temp_dir / "keys" / "private.der"
    public_path = temp_dir / "keys" / "public.der"
    container.key_store.generate_keypair(private_path, public_path)
    return private_path, public_path


@pytest.fixture
def private_key(keypair: tuple[Path, Path], container: ApplicationContainer) -> Ed25519PrivateKey:
    return container.key_store.load_private_key(keypair[0])


@pytest.fixture
def public_key(keypair: tuple[Path, Path], container: ApplicationContainer) -> Ed25519PublicKey:
    return container.key_store.load_public_key(keypair[1])


@pytest.fixture
def sample_file(temp_dir: Path) -> Path:
    """Create a sample file with mildly compressible content."""
    file_path = temp_dir / "sample.txt"
    file_path.write_bytes(b"binsign sample content\n" * 200 + bytes(range(256)))
    return file_path


@pytest.fixture
def override_settings(temp_dir: Path) -> Generator[Settings, None, None]:
    """Install isolated global settings for CLI tests."""

    import binsign.config as config_module

    original_settings = getattr(config_module, "_settings", None)

    settings = config_module.Settings(_env_file=None, compression_level=3)
    config_module._settings = settings

    try:
        yield settings
    finally:
        config_module._settings = original_settings
