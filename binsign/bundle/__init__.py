"""Bundle record and its binary codec."""

from binsign.bundle.codec import HEADER_SIZE, decode_bundle, encode_bundle
from binsign.bundle.model import SIGNATURE_SIZE, U64_MAX, Bundle

__all__ = [
    "Bundle",
    "HEADER_SIZE",
    "SIGNATURE_SIZE",
    "U64_MAX",
    "decode_bundle",
    "encode_bundle",
]
