"""Dependency injection providers for Litestar."""

from __future__ import annotations

import logging

from litestar.di import Provide

from recipebox.api.security import JWTConfig, JWTService, PasswordService
from recipebox.api.services.auth import AuthService
from recipebox.api.services.recipe import RecipeService
from recipebox.core.config import Settings, get_settings
from recipebox.db.repositories import (
    InMemoryRecipeRepository,
    InMemoryUserRepository,
    RecipeRepository,
    UserRepository,
)

logger = logging.getLogger(__name__)

# Global singleton instances (created at app startup)
_settings: Settings | None = None
_user_repository: UserRepository | None = None
_recipe_repository: RecipeRepository | None = None
_jwt_service: JWTService | None = None
_password_service: PasswordService | None = None


# -----------------------------------------------------------------------------
# Storage dependencies
# -----------------------------------------------------------------------------


def get_user_repository() -> UserRepository:
    """Provide user repository singleton.

    Raises:
        RuntimeError: If not initialized.
    """
    if _user_repository is None:
        raise RuntimeError("User repository not initialized")
    return _user_repository


def get_recipe_repository() -> RecipeRepository:
    """Provide recipe repository singleton.

    Raises:
        RuntimeError: If not initialized.
    """
    if _recipe_repository is None:
        raise RuntimeError("Recipe repository not initialized")
    return _recipe_repository


# -----------------------------------------------------------------------------
# Auth & recipe dependencies
# -----------------------------------------------------------------------------


def get_jwt_service() -> JWTService:
    """Provide JWT service singleton.

    Returns:
        JWTService instance.

    Raises:
        RuntimeError: If not initialized.
    """
    if _jwt_service is None:
        raise RuntimeError("JWT service not initialized")
    return _jwt_service


def get_password_service() -> PasswordService:
    """Provide password service singleton.

    Returns:
        PasswordService instance.

    Raises:
        RuntimeError: If not initialized.
    """
    if _password_service is None:
        raise RuntimeError("Password service not initialized")
    return _password_service


async def get_auth_service(user_repository: UserRepository, settings: Settings) -> AuthService:
    """Provide auth service for request scope.

    Args:
        user_repository: User repository.
        settings: Application settings.

    Returns:
        AuthService instance.
    """
    return AuthService(
        repository=user_repository,
        jwt_service=get_jwt_service(),
        password_service=get_password_service(),
        allow_admin_registration=settings.allow_admin_registration,
    )


async def get_recipe_service(recipe_repository: RecipeRepository) -> RecipeService:
    """Provide recipe service for request scope.

    Args:
        recipe_repository: Recipe repository.

    Returns:
        RecipeService instance.
    """
    return RecipeService(repository=recipe_repository)


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------


def provide_settings() -> Settings:
    """Provide settings instance.

    Returns:
        Settings the services were initialized with.
    """
    return _settings or get_settings()


# -----------------------------------------------------------------------------
# Lifecycle management
# -----------------------------------------------------------------------------


async def init_services(settings: Settings) -> JWTService:
    """Initialize all service singletons.

    Called during application startup.

    Args:
        settings: Application settings.

    Returns:
        JWT service, to be stored in app state for the auth guards.
    """
    global _settings, _user_repository, _recipe_repository, _jwt_service, _password_service

    _settings = settings

    # In-memory stores; all data is lost on restart
    _user_repository = InMemoryUserRepository()
    _recipe_repository = InMemoryRecipeRepository()

    if settings.seed_sample_recipes:
        await RecipeService(_recipe_repository).seed_sample_recipes()

    # Initialize authentication services
    jwt_config = JWTConfig(
        secret_key=settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
        access_token_expire_hours=settings.jwt_access_token_expire_hours,
        issuer=settings.jwt_issuer,
    )
    _jwt_service = JWTService(jwt_config)
    _password_service = PasswordService(
        time_cost=settings.password_time_cost,
        memory_cost=settings.password_memory_cost,
        parallelism=settings.password_parallelism,
    )
    logger.info("Authentication services initialized")

    return _jwt_service


async def shutdown_services() -> None:
    """Drop service singletons.

    Called during application shutdown.
    """
    global _settings, _user_repository, _recipe_repository, _jwt_service, _password_service

    _settings = None
    _user_repository = None
    _recipe_repository = None
    _jwt_service = None
    _password_service = None
    logger.info("Services shut down")


# Dependency providers for Litestar
dependencies = {
    # Authentication services
    "auth_service": Provide(get_auth_service),
    "recipe_service": Provide(get_recipe_service),
    # Storage
    "user_repository": Provide(get_user_repository, sync_to_thread=False),
    "recipe_repository": Provide(get_recipe_repository, sync_to_thread=False),
    "settings": Provide(provide_settings, sync_to_thread=False),
}
