"""BLAKE3 hasher producing 64-byte extendable-output digests."""

from __future__ import annotations

import logging

from blake3 import blake3 as _Blake3

from binsign.app.ports import DIGEST_SIZE, HasherPort

logger = logging.getLogger(__name__)

AUTO_THREADS = -1


class Blake3HashState:
    """Incremental BLAKE3 state for one message."""

    def __init__(self, max_threads: int) -> None:
        self._hasher = _Blake3(max_threads=max_threads)

    def update(self, data: bytes) -> None:
        self._hasher.update(data)

    def finalize(self) -> bytes:
        # XOF output; reading does not disturb the state
        return self._hasher.digest(length=DIGEST_SIZE)


class Blake3Hasher(HasherPort):
    """Hasher adapter backed by the ``blake3`` package.

    Large inputs are split across the extension's internal thread pool when
    ``max_threads`` allows it; the digest is identical for any thread count.
    """

    def __init__(self, *, max_threads: int = AUTO_THREADS) -> None:
        if max_threads == 0 or max_threads < AUTO_THREADS:
            raise ValueError("max_threads must be -1 (automatic) or a positive integer")
        self._max_threads = _Blake3.AUTO if max_threads == AUTO_THREADS else max_threads

    @property
    def max_threads(self) -> int:
        return self._max_threads

    def new(self) -> Blake3HashState:
        return Blake3HashState(self._max_threads)

    def hash(self, data: bytes) -> bytes:
        logger.debug("Hashing %d bytes (max_threads=%s)", len(data), self._max_threads)
        state = self.new()
        state.update(data)
        return state.finalize()


def hash_bytes(data: bytes) -> bytes:
    """Return the 64-byte BLAKE3 digest of ``data`` using automatic threading."""
    return Blake3Hasher().hash(data)
