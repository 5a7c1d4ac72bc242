"""Deterministic binary encoding of bundles.

Layout (all integers little-endian)::

    offset 0   signature        64 bytes
    offset 64  original_size    u64
    offset 72  payload_length   u64
    offset 80  payload          payload_length bytes

The payload length must account for every remaining byte; anything short or
long is rejected.
"""

from __future__ import annotations

import struct

from pydantic import ValidationError

from binsign.bundle.model import SIGNATURE_SIZE, Bundle
from binsign.errors import BundleDecodingError, BundleEncodingError

_HEADER = struct.Struct(f"<{SIGNATURE_SIZE}sQQ")
HEADER_SIZE = _HEADER.size


def encode_bundle(bundle: Bundle) -> bytes:
    """Serialize ``bundle`` to its binary form.

    Raises:
        BundleEncodingError: If the header fields cannot be packed
    """
    try:
        header = _HEADER.pack(bundle.signature, bundle.original_size, len(bundle.payload))
    except struct.error as exc:
        raise BundleEncodingError(f"Cannot encode bundle header: {exc}") from exc
    return header + bundle.payload


def decode_bundle(data: bytes | bytearray | memoryview) -> Bundle:
    """Parse a bundle produced by :func:`encode_bundle`.

    Args:
        data: Encoded bundle bytes

    Returns:
        The decoded bundle

    Raises:
        BundleDecodingError: If ``data`` is truncated, carries trailing bytes,
            or declares a payload length that disagrees with its size
    """
    view = memoryview(data)
    if len(view) < HEADER_SIZE:
        raise BundleDecodingError(
            f"Bundle is truncated: expected at least {HEADER_SIZE} header bytes, got {len(view)}"
        )

    signature, original_size, payload_length = _HEADER.unpack_from(view)
    remaining = len(view) - HEADER_SIZE
    if payload_length > remaining:
        raise BundleDecodingError(
            f"Bundle is truncated: payload declares {payload_length} bytes, {remaining} present"
        )
    if payload_length < remaining:
        raise BundleDecodingError(
            f"Bundle has {remaining - payload_length} trailing bytes after the payload"
        )

    try:
        return Bundle(
            signature=signature,
            original_size=original_size,
            payload=view[HEADER_SIZE:].tobytes(),
        )
    except ValidationError as exc:
        raise BundleDecodingError(f"Bundle fields are invalid: {exc}") from exc
