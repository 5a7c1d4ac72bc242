"""Port interfaces for the binsign application layer.

These protocol interfaces define contracts for adapters.
Services depend on these ports, never on concrete implementations.
"""

__all__ = [
    "CompressionPort",
    "DIGEST_SIZE",
    "HasherPort",
    "HashStatePort",
    "KeyStorePort",
    "SignerPort",
    "StoragePort",
]

from binsign.app.ports.compression import CompressionPort
from binsign.app.ports.hasher import DIGEST_SIZE, HasherPort, HashStatePort
from binsign.app.ports.keystore import KeyStorePort
from binsign.app.ports.signer import SignerPort
from binsign.app.ports.storage import StoragePort
