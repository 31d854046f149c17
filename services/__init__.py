from __future__ import annotations

# Re-export the id codec and token helpers for convenient imports
from .identifiers import InvalidIdentifier, decode_object_id
from .security import InvalidToken, MissingClaim, decode_access_token, issue_access_token

__all__ = [
    "InvalidIdentifier",
    "decode_object_id",
    "InvalidToken",
    "MissingClaim",
    "decode_access_token",
    "issue_access_token",
]
