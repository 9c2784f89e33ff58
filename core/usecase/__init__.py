from .user_usecase import UserUseCase
from .exercise_usecase import ExerciseUseCase

__all__ = [
    "UserUseCase",
    "ExerciseUseCase",
]
