"""Application error taxonomy.

Every error carries the HTTP status and a short machine-readable code so the
exception handlers in ``recipebox.api.app`` can render it without a lookup
table.
"""

from __future__ import annotations

from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_401_UNAUTHORIZED,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class RecipeBoxError(Exception):
    """Base exception for application errors."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    error: str = "internal_error"

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class ValidationError(RecipeBoxError):
    """Missing or malformed input the caller can correct."""

    status_code = HTTP_400_BAD_REQUEST
    error = "validation_error"


class InvalidInputError(ValidationError):
    """Input of the wrong type reached a security primitive."""

    error = "invalid_input"


class DuplicateEmailError(RecipeBoxError):
    """Email is already registered."""

    status_code = HTTP_400_BAD_REQUEST
    error = "email_exists"


class AuthenticationError(RecipeBoxError):
    """Invalid email or password.

    The message never says which of the two was wrong.
    """

    status_code = HTTP_400_BAD_REQUEST
    error = "invalid_credentials"


class TokenMissingError(RecipeBoxError):
    """No bearer token was presented."""

    status_code = HTTP_401_UNAUTHORIZED
    error = "token_missing"


class TokenInvalidError(RecipeBoxError):
    """Token is malformed or its signature does not verify."""

    status_code = HTTP_403_FORBIDDEN
    error = "token_invalid"


class TokenExpiredError(TokenInvalidError):
    """Token signature is valid but its lifetime is over."""

    error = "token_expired"


class ForbiddenError(RecipeBoxError):
    """Identity is not allowed to perform the action."""

    status_code = HTTP_403_FORBIDDEN
    error = "forbidden"


class NotFoundError(RecipeBoxError):
    """Requested resource does not exist."""

    status_code = HTTP_404_NOT_FOUND
    error = "not_found"


class InternalError(RecipeBoxError):
    """Unexpected failure. Details stay in the server log."""
