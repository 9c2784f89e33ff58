from .user_repository import UserRepository
from .exercise_repository import ExerciseRepository

__all__ = [
    "UserRepository",
    "ExerciseRepository"
]
