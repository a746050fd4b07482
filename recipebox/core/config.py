"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API settings
    api_host: str = Field(default="0.0.0.0", description="API server host")
    api_port: int = Field(
        default=5000,
        validation_alias=AliasChoices("api_port", "port"),
        description="API server port",
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    cors_origin: str = Field(
        default="*",
        description="Comma-separated origins allowed to call the API (the SPA host)",
    )

    # JWT Authentication Settings
    jwt_secret_key: str = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("jwt_secret_key", "jwt_secret"),
        description="Secret key for JWT signing (required, no default)",
    )
    jwt_algorithm: str = Field(
        default="HS256",
        description="JWT signing algorithm",
    )
    jwt_access_token_expire_hours: int = Field(
        default=24,
        ge=1,
        le=24 * 30,
        description="Access token lifetime in hours",
    )
    jwt_issuer: str | None = Field(
        default=None,
        description="JWT issuer claim",
    )

    # Password hashing (argon2id)
    password_time_cost: int = Field(default=3, ge=1, description="Argon2 iterations")
    password_memory_cost: int = Field(default=65536, ge=8, description="Argon2 memory in KiB")
    password_parallelism: int = Field(default=4, ge=1, description="Argon2 lanes")

    # Domain behaviour
    seed_sample_recipes: bool = Field(
        default=True,
        description="Add the sample recipes owned by 'system' at startup",
    )
    allow_admin_registration: bool = Field(
        default=True,
        description="Honour role='admin' in self-registration requests",
    )

    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins as a list."""
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]

    @field_validator("jwt_secret_key")
    @classmethod
    def _reject_blank_secret(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("jwt_secret_key must not be blank")
        return value

    @field_validator("jwt_algorithm")
    @classmethod
    def _reject_unsigned_algorithm(cls, value: str) -> str:
        if value.lower() == "none":
            raise ValueError("Unsigned JWT algorithm 'none' is not allowed")
        return value


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]


def reset_settings() -> None:
    """Reset cached settings (useful for testing)."""
    get_settings.cache_clear()
