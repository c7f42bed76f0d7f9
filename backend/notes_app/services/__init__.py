# Business Logic Services
from .auth import (
    create_access_token,
    decode_identity,
    require_auth,
)
from .notes import (
    NoteService,
    NoteValidationError,
    NoteOwnershipError,
    is_owner,
    utc_now_iso,
)

__all__ = [
    # Auth
    "create_access_token",
    "decode_identity",
    "require_auth",
    # Notes
    "NoteService",
    "NoteValidationError",
    "NoteOwnershipError",
    "is_owner",
    "utc_now_iso",
]
