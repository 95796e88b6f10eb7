from .auth import Token
from .user import (
    DeletionErrorResponse,
    MessageResponse,
    RoleRead,
    UserDeletionRequest,
    UserRead,
)

__all__ = [
    "DeletionErrorResponse",
    "MessageResponse",
    "RoleRead",
    "Token",
    "UserDeletionRequest",
    "UserRead",
]
