"""Application layer for binsign.

This layer orchestrates the sign and verify pipelines without direct
filesystem access. All side effects are delegated to adapters via port
interfaces.
"""

__all__ = [
    "SignResult",
    "SignService",
    "VerifyResult",
    "VerifyService",
]

from binsign.app.sign_service import SignResult, SignService
from binsign.app.verify_service import VerifyResult, VerifyService
