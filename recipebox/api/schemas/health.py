"""Health check schema."""

from __future__ import annotations

from typing import Literal

import msgspec

from recipebox import __version__


class HealthResponse(msgspec.Struct, kw_only=True):
    """Health check response."""

    status: Literal["healthy"]
    users: int
    recipes: int
    version: str = __version__
