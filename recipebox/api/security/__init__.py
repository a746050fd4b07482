"""Security module for authentication and authorization."""

from .guards import (
    AuthenticatedUser,
    admin_guard,
    auth_guard,
    extract_token_from_header,
)
from .jwt import (
    JWTConfig,
    JWTService,
    TokenClaims,
)
from .ownership import can_mutate
from .password import PasswordService

__all__ = [
    # Guards
    "AuthenticatedUser",
    "admin_guard",
    "auth_guard",
    "extract_token_from_header",
    # JWT
    "JWTConfig",
    "JWTService",
    "TokenClaims",
    # Ownership
    "can_mutate",
    # Password
    "PasswordService",
]
