"""API schemas module."""

from .auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from .health import HealthResponse
from .recipe import CreateRecipeRequest, RecipeResponse, UpdateRecipeRequest

__all__ = [
    "CreateRecipeRequest",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "RecipeResponse",
    "RegisterRequest",
    "RegisterResponse",
    "UpdateRecipeRequest",
    "UserResponse",
]
