"""Zstandard compression adapter."""

from __future__ import annotations

import logging

import zstandard

from binsign.app.ports import CompressionPort
from binsign.config import MAX_COMPRESSION_LEVEL, MIN_COMPRESSION_LEVEL
from binsign.errors import CompressionError, DecompressionError

logger = logging.getLogger(__name__)

_FRAME_MAGIC = b"\x28\xb5\x2f\xfd"
# Frame_Header_Descriptor bit 4 is unused, bit 3 reserved; our frames never set them.
_FHD_UNUSED_BITS = 0x18


class ZstdCompressionAdapter(CompressionPort):
    """Compress payloads as single zstd frames that record their content size."""

    def __init__(
        self,
        *,
        min_level: int = MIN_COMPRESSION_LEVEL,
        max_level: int = MAX_COMPRESSION_LEVEL,
    ) -> None:
        self._min_level = min_level
        self._max_level = min(max_level, zstandard.MAX_COMPRESSION_LEVEL)

    def compress(self, data: bytes, level: int) -> bytes:
        if not self._min_level <= level <= self._max_level:
            raise CompressionError(
                f"Compression level {level} is outside {self._min_level}..{self._max_level}"
            )
        try:
            compressor = zstandard.ZstdCompressor(level=level, write_content_size=True)
            compressed = compressor.compress(data)
        except zstandard.ZstdError as exc:
            raise CompressionError(f"zstd compression failed: {exc}") from exc
        logger.debug("Compressed %d bytes to %d at level %d", len(data), len(compressed), level)
        return compressed

    def decompress(self, data: bytes, original_size: int) -> bytes:
        if data[:4] != _FRAME_MAGIC:
            raise DecompressionError("Payload is not a zstd frame")
        if len(data) > 4 and data[4] & _FHD_UNUSED_BITS:
            raise DecompressionError("Payload frame header sets reserved bits")

        try:
            params = zstandard.get_frame_parameters(data)
        except zstandard.ZstdError as exc:
            raise DecompressionError(f"Payload is not a zstd frame: {exc}") from exc

        # The output buffer is sized from the frame header, so it must agree
        # with the bundle before anything is allocated.
        if params.content_size == zstandard.CONTENTSIZE_UNKNOWN:
            raise DecompressionError("Payload frame does not record its content size")
        if params.content_size != original_size:
            raise DecompressionError(
                f"Payload declares {params.content_size} bytes but bundle declares {original_size}"
            )

        try:
            decompressed = zstandard.ZstdDecompressor().decompress(
                data, max_output_size=original_size, allow_extra_data=False
            )
        except zstandard.ZstdError as exc:
            raise DecompressionError(f"zstd decompression failed: {exc}") from exc
        except MemoryError as exc:
            raise DecompressionError(
                f"Cannot allocate {original_size} bytes for the decompressed payload"
            ) from exc

        if len(decompressed) != original_size:
            raise DecompressionError(
                f"Decompressed {len(decompressed)} bytes, expected {original_size}"
            )
        return decompressed
