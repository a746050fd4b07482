"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest
from litestar.testing import TestClient

from recipebox.api.app import create_app
from recipebox.api.security import AuthenticatedUser, JWTConfig, JWTService, PasswordService
from recipebox.api.services.auth import AuthService
from recipebox.api.services.recipe import RecipeService
from recipebox.core.config import Settings
from recipebox.core.enums import UserRole
from recipebox.db.repositories import InMemoryRecipeRepository, InMemoryUserRepository

TEST_SECRET = "test_secret_key_for_testing_only_256bits"


@pytest.fixture
def settings() -> Settings:
    """Provide test settings with cheap password hashing."""
    return Settings(
        _env_file=None,
        jwt_secret_key=TEST_SECRET,
        debug=True,
        seed_sample_recipes=False,
        password_time_cost=1,
        password_memory_cost=8,
        password_parallelism=1,
    )


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def password_service() -> PasswordService:
    """Create password service for testing."""
    return PasswordService(time_cost=1, memory_cost=8, parallelism=1)


@pytest.fixture
def jwt_config() -> JWTConfig:
    """Create JWT config for testing."""
    return JWTConfig(secret_key=TEST_SECRET)


@pytest.fixture
def jwt_service(jwt_config: JWTConfig) -> JWTService:
    """Create JWT service for testing."""
    return JWTService(jwt_config)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Create an empty user store."""
    return InMemoryUserRepository()


@pytest.fixture
def recipe_repository() -> InMemoryRecipeRepository:
    """Create an empty recipe store."""
    return InMemoryRecipeRepository()


@pytest.fixture
def auth_service(
    user_repository: InMemoryUserRepository,
    jwt_service: JWTService,
    password_service: PasswordService,
) -> AuthService:
    """Create auth service over the in-memory store."""
    return AuthService(
        repository=user_repository,
        jwt_service=jwt_service,
        password_service=password_service,
    )


@pytest.fixture
def recipe_service(recipe_repository: InMemoryRecipeRepository) -> RecipeService:
    """Create recipe service over the in-memory store."""
    return RecipeService(repository=recipe_repository)


@pytest.fixture
def alice() -> AuthenticatedUser:
    """A regular user identity."""
    return AuthenticatedUser(id=5, email="alice@example.com", name="Alice", role=UserRole.USER)


@pytest.fixture
def bob() -> AuthenticatedUser:
    """Another regular user identity."""
    return AuthenticatedUser(id=7, email="bob@example.com", name="Bob", role=UserRole.USER)


@pytest.fixture
def admin() -> AuthenticatedUser:
    """An admin identity."""
    return AuthenticatedUser(id=9, email="root@example.com", name="Root", role=UserRole.ADMIN)


@pytest.fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """HTTP client for a freshly started application."""
    with TestClient(app=create_app(settings)) as test_client:
        yield test_client


@pytest.fixture
def register_and_login(client: TestClient) -> Callable[..., tuple[int, str]]:
    """Register a user through the API and return (user id, token)."""

    def _register_and_login(
        *,
        name: str,
        email: str,
        password: str = "pw123456",
        role: str | None = None,
    ) -> tuple[int, str]:
        body = {"name": name, "email": email, "password": password}
        if role is not None:
            body["role"] = role

        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 201, response.text
        user_id = response.json()["user"]["id"]

        response = client.post("/api/auth/login", json={"email": email, "password": password})
        assert response.status_code == 200, response.text
        return user_id, response.json()["token"]

    return _register_and_login
