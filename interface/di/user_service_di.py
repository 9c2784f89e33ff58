from fastapi import Depends
from core.usecase import UserUseCase
from core.interfaces import UserRepositoryInterface
from infrastructure.di import get_user_repository

async def get_user_usecase(
    user_repository: UserRepositoryInterface = Depends(get_user_repository)
) -> UserUseCase:
    """
    Get a UserUseCase instance bound to the user repository.

    Args:
        user_repository: The user repository

    Returns:
        UserUseCase: A UserUseCase instance
    """
    return UserUseCase(user_repository=user_repository)
