from .user_entity import UserEntity
from .exercise_entity import (
    ExerciseEntity,
    ExerciseLog,
    LogEntry,
    LogQuery,
)

__all__ = [
    "UserEntity",
    "ExerciseEntity",
    "ExerciseLog",
    "LogEntry",
    "LogQuery",
]
