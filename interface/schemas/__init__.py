from .user_schema import UserCreate, UserResponse
from .exercise_schema import (
    ExerciseCreate,
    ExerciseResponse,
    ExerciseLogResponse,
    LogEntryResponse,
)
from .error_schema import ErrorResponse

__all__ = [
    "UserCreate",
    "UserResponse",
    "ExerciseCreate",
    "ExerciseResponse",
    "ExerciseLogResponse",
    "LogEntryResponse",
    "ErrorResponse",
]
