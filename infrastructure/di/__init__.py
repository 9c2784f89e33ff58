from .db import get_database
from .repositories import get_user_repository, get_exercise_repository

__all__ = [
    "get_database",
    "get_user_repository",
    "get_exercise_repository",
]
