from fastapi import Depends

from core.interfaces import DatabaseRepository
from infrastructure.repositories import UserRepository, ExerciseRepository
from infrastructure.di.db import get_database

async def get_user_repository(database: DatabaseRepository = Depends(get_database)) -> UserRepository:
    """
    Dependency for injecting a UserRepository.

    Args:
        database: The document store.

    Returns:
        An instance of UserRepository.
    """
    return UserRepository(database=database)


async def get_exercise_repository(database: DatabaseRepository = Depends(get_database)) -> ExerciseRepository:
    """
    Dependency for injecting an ExerciseRepository.

    Args:
        database: The document store.

    Returns:
        An instance of ExerciseRepository.
    """
    return ExerciseRepository(database=database)
