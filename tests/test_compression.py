"""Tests for the zstd compression adapter."""

from __future__ import annotations

import pytest
import zstandard

from binsign.app.adapters import ZstdCompressionAdapter
from binsign.errors import CompressionError, DecompressionError

CONTENT = b"The quick brown fox jumps over the lazy dog. " * 500


@pytest.fixture
def compressor() -> ZstdCompressionAdapter:
    return ZstdCompressionAdapter()


@pytest.mark.parametrize("level", [-7, -1, 1, 3, 19, 22])
def test_round_trip_across_levels(compressor: ZstdCompressionAdapter, level: int) -> None:
    payload = compressor.compress(CONTENT, level)
    assert compressor.decompress(payload, len(CONTENT)) == CONTENT


def test_empty_content(compressor: ZstdCompressionAdapter) -> None:
    payload = compressor.compress(b"", 3)
    assert payload
    assert compressor.decompress(payload, 0) == b""


def test_compresses_repetitive_content(compressor: ZstdCompressionAdapter) -> None:
    assert len(compressor.compress(CONTENT, 3)) < len(CONTENT) // 10


@pytest.mark.parametrize("level", [-8, 23, 100])
def test_out_of_range_level(compressor: ZstdCompressionAdapter, level: int) -> None:
    with pytest.raises(CompressionError):
        compressor.compress(CONTENT, level)


@pytest.mark.parametrize("delta", [-1, 1, 1000])
def test_size_mismatch_detected(compressor: ZstdCompressionAdapter, delta: int) -> None:
    payload = compressor.compress(CONTENT, 3)
    with pytest.raises(DecompressionError):
        compressor.decompress(payload, len(CONTENT) + delta)


def test_size_mismatch_on_empty_payload(compressor: ZstdCompressionAdapter) -> None:
    payload = compressor.compress(b"", 3)
    with pytest.raises(DecompressionError):
        compressor.decompress(payload, 5)


@pytest.mark.parametrize("garbage", [b"", b"not zstd at all", b"\x00" * 64])
def test_garbage_payload_rejected(compressor: ZstdCompressionAdapter, garbage: bytes) -> None:
    with pytest.raises(DecompressionError):
        compressor.decompress(garbage, 10)


def test_decompression_error_is_compression_category(compressor: ZstdCompressionAdapter) -> None:
    with pytest.raises(DecompressionError) as excinfo:
        compressor.decompress(b"junk", 4)
    assert excinfo.value.category == "compression"


def test_trailing_data_after_frame_rejected(compressor: ZstdCompressionAdapter) -> None:
    payload = compressor.compress(CONTENT, 3)
    with pytest.raises(DecompressionError):
        compressor.decompress(payload + b"JUNKJUNKJUNK", len(CONTENT))


def test_second_frame_after_payload_rejected(compressor: ZstdCompressionAdapter) -> None:
    payload = compressor.compress(CONTENT, 3)
    with pytest.raises(DecompressionError):
        compressor.decompress(payload + compressor.compress(b"", 3), len(CONTENT))


def test_unallocatable_size_reported_as_decompression_error(
    compressor: ZstdCompressionAdapter, monkeypatch: pytest.MonkeyPatch
) -> None:
    payload = compressor.compress(CONTENT, 3)

    class _ExhaustedDecompressor:
        def decompress(self, data, **kwargs):
            raise MemoryError

    monkeypatch.setattr(zstandard, "ZstdDecompressor", _ExhaustedDecompressor)
    with pytest.raises(DecompressionError) as excinfo:
        compressor.decompress(payload, len(CONTENT))
    assert isinstance(excinfo.value.__cause__, MemoryError)


def test_huge_declared_size_never_escapes_untagged(compressor: ZstdCompressionAdapter) -> None:
    size = 2**45
    frame = b"\x28\xb5\x2f\xfd\xe0" + size.to_bytes(8, "little") + b"\x01\x00\x00"
    with pytest.raises(DecompressionError):
        compressor.decompress(frame, size)
