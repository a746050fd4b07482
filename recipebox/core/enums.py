from enum import Enum


class UserRole(str, Enum):
    """Roles a registered user can hold."""

    USER = "user"
    ADMIN = "admin"


class Difficulty(str, Enum):
    """Difficulty labels offered by the recipe form.

    Stored recipes keep whatever string the client sent; these are the
    values the SPA offers.
    """

    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


# Owner recorded on seed data. No user id compares equal to it.
SYSTEM_OWNER = "system"

DEFAULT_COOKING_TIME = 30
DEFAULT_DIFFICULTY = Difficulty.MEDIUM.value
DEFAULT_CATEGORY = "Main Course"
