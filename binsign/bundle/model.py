"""Bundle model: signature, original size and compressed payload."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

SIGNATURE_SIZE = 64
U64_MAX = 2**64 - 1


class Bundle(BaseModel):
    """Signed, compressed copy of a file.

    The signature covers the 64-byte digest of the *decompressed* content,
    so the compression level never affects verifiability. Instances are
    frozen; pipelines build a new bundle rather than updating one.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    signature: bytes = Field(
        ...,
        min_length=SIGNATURE_SIZE,
        max_length=SIGNATURE_SIZE,
        description="Ed25519ph signature over the content digest",
    )
    original_size: int = Field(
        ...,
        ge=0,
        le=U64_MAX,
        description="Exact byte length of the content before compression",
    )
    payload: bytes = Field(
        ...,
        description="Compressed content",
    )

    def __repr__(self) -> str:
        return (
            f"Bundle(signature={self.signature[:8].hex()}..., "
            f"original_size={self.original_size}, payload_size={len(self.payload)})"
        )
