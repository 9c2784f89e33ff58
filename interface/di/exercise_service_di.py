from fastapi import Depends
from core.usecase import ExerciseUseCase
from core.interfaces import UserRepositoryInterface, ExerciseRepositoryInterface
from infrastructure.di import get_user_repository, get_exercise_repository

async def get_exercise_usecase(
    user_repository: UserRepositoryInterface = Depends(get_user_repository),
    exercise_repository: ExerciseRepositoryInterface = Depends(get_exercise_repository)
) -> ExerciseUseCase:
    """
    Get an ExerciseUseCase instance bound to the user and exercise repositories.

    Args:
        user_repository: The user repository
        exercise_repository: The exercise repository

    Returns:
        ExerciseUseCase: An ExerciseUseCase instance
    """
    return ExerciseUseCase(
        user_repository=user_repository,
        exercise_repository=exercise_repository
    )
