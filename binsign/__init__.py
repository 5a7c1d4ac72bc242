"""binsign - sign files and bundle the signature with a compressed copy.

Files are hashed with BLAKE3, the digest is signed with Ed25519ph, and the
content is compressed with zstd. Signature, original size and payload are
stored together in a single bundle that ``binsign verify`` authenticates and
unpacks.
"""

__version__ = "0.1.0"

from binsign.config import Settings, get_settings

__all__ = ["Settings", "get_settings", "__version__"]
