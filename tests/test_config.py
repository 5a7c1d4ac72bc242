import logging

import pytest
from pydantic import ValidationError

from binsign.bootstrap import bootstrap_application
from binsign.config import Settings, configure_logging


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.compression_level == 22
    assert settings.sign_suffix == ".sig"
    assert settings.verify_suffix == ".ver"
    assert settings.hash_threads == -1
    assert settings.log_level == "WARNING"


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("BINSIGN_COMPRESSION_LEVEL", "-3")
    monkeypatch.setenv("BINSIGN_SIGN_SUFFIX", ".bsig")
    monkeypatch.setenv("BINSIGN_HASH_THREADS", "2")

    settings = Settings(_env_file=None)

    assert settings.compression_level == -3
    assert settings.sign_suffix == ".bsig"
    assert settings.hash_threads == 2


def test_log_level_alias(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("BINSIGN_LOG_LEVEL", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings(_env_file=None).log_level == "DEBUG"


@pytest.mark.parametrize("level", [-8, 23])
def test_compression_level_bounds(level: int) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, compression_level=level)


@pytest.mark.parametrize("threads", [0, -2])
def test_hash_threads_validation(threads: int) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, hash_threads=threads)


def test_unknown_log_level_rejected() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_verbose_forces_info() -> None:
    assert Settings(_env_file=None, log_level="ERROR", verbose=True).get_log_level() == logging.INFO
    assert Settings(_env_file=None, log_level="DEBUG", verbose=True).get_log_level() == logging.DEBUG
    assert Settings(_env_file=None, log_level="ERROR").get_log_level() == logging.ERROR


def test_configure_logging_applies_level() -> None:
    root = logging.getLogger()
    previous = root.level
    try:
        configure_logging(Settings(_env_file=None, verbose=True))
        assert root.level == logging.INFO
    finally:
        root.setLevel(previous)


def test_suffixes_flow_into_services(temp_dir, keypair) -> None:
    settings = Settings(_env_file=None, sign_suffix=".signed", verify_suffix=".out")
    container = bootstrap_application(settings=settings)
    source = temp_dir / "doc.txt"
    source.write_bytes(b"content")

    signed = container.sign_service.sign_file(source, keypair[0], compression_level=3)
    verified = container.verify_service.verify_file(signed.output_path, keypair[1])

    assert signed.output_path.name == "doc.txt.signed"
    assert verified.output_path.name == "doc.txt.signed.out"
