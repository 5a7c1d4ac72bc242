"""Compression port interface for bundle payloads."""

from typing import Protocol


class CompressionPort(Protocol):
    """Port interface for payload compression.

    Side effects: None (pure computation).
    """

    def compress(self, data: bytes, level: int) -> bytes:
        """Compress data.

        Args:
            data: Raw bytes
            level: Algorithm-specific compression level

        Returns:
            Compressed bytes

        Raises:
            CompressionError: If the level is invalid or compression fails
        """
        ...

    def decompress(self, data: bytes, original_size: int) -> bytes:
        """Decompress data that must expand to exactly ``original_size`` bytes.

        Raises:
            DecompressionError: If the data is corrupt or its size disagrees
        """
        ...
