"""JWT token handling for authentication."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

from recipebox.core.enums import UserRole
from recipebox.core.exceptions import (
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
)

_REQUIRED_CLAIMS = ["sub", "exp", "iat", "email", "name", "role"]


@dataclass(frozen=True)
class TokenClaims:
    """Identity claims carried by an access token."""

    user_id: int
    email: str
    name: str
    role: UserRole
    issued_at: datetime | None = None
    expires_at: datetime | None = None


@dataclass(frozen=True)
class JWTConfig:
    """JWT configuration."""

    secret_key: str
    algorithm: str = "HS256"
    access_token_expire_hours: int = 24
    issuer: str | None = None

    def __post_init__(self) -> None:
        if not self.secret_key:
            raise ValueError("JWT secret key is required")
        if self.algorithm.lower() == "none":
            raise ValueError("Unsigned JWT algorithm 'none' is not allowed")


class JWTService:
    """JWT token creation and validation.

    Tokens are stateless: nothing is stored server-side and a token stays
    valid until it expires.
    """

    def __init__(self, config: JWTConfig) -> None:
        """Initialize JWT service.

        Args:
            config: JWT configuration.
        """
        self._config = config

    @property
    def access_token_lifetime(self) -> timedelta:
        """Access token lifetime."""
        return timedelta(hours=self._config.access_token_expire_hours)

    def issue(self, claims: TokenClaims, *, now: datetime | None = None) -> str:
        """Create a signed access token.

        Equal claims, secret and ``now`` always give the same token.

        Args:
            claims: Identity to encode. Timestamps on it are ignored.
            now: Issue time, defaults to the current UTC time.

        Returns:
            Encoded token string.
        """
        issued_at = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        expires_at = issued_at + self.access_token_lifetime

        payload: dict[str, Any] = {
            "sub": str(claims.user_id),
            "id": claims.user_id,
            "email": claims.email,
            "name": claims.name,
            "role": UserRole(claims.role).value,
            "iat": int(issued_at.timestamp()),
            "exp": int(expires_at.timestamp()),
        }

        if self._config.issuer:
            payload["iss"] = self._config.issuer

        return jwt.encode(
            payload,
            self._config.secret_key,
            algorithm=self._config.algorithm,
        )

    def verify(self, token: str | None) -> TokenClaims:
        """Validate a token and recover its claims.

        Args:
            token: Encoded token string.

        Returns:
            Claims carried by the token.

        Raises:
            TokenMissingError: If no token was given.
            TokenExpiredError: If the token lifetime is over.
            TokenInvalidError: If the token is malformed or badly signed.
        """
        if not token:
            raise TokenMissingError("Access token required")

        try:
            payload = jwt.decode(
                token,
                self._config.secret_key,
                algorithms=[self._config.algorithm],
                options={"require": _REQUIRED_CLAIMS},
                issuer=self._config.issuer,
            )
        except jwt.ExpiredSignatureError as e:
            raise TokenExpiredError("Token has expired", cause=e) from e
        except jwt.InvalidTokenError as e:
            raise TokenInvalidError("Invalid token", cause=e) from e

        try:
            return TokenClaims(
                user_id=int(payload["sub"]),
                email=payload["email"],
                name=payload["name"],
                role=UserRole(payload["role"]),
                issued_at=datetime.fromtimestamp(payload["iat"], tz=timezone.utc),
                expires_at=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )
        except (TypeError, ValueError) as e:
            raise TokenInvalidError("Invalid token claims", cause=e) from e
