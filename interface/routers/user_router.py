from typing import List

from fastapi import APIRouter, Depends, status

from core.usecase import UserUseCase
from interface.di import get_payload, get_user_usecase
from interface.schemas import ErrorResponse, UserCreate, UserResponse


# Create user router
user_router = APIRouter(
    prefix="/api/users",
    tags=["users"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Validation error"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Store error"}
    }
)


@user_router.post("", response_model=UserResponse)
async def register_user(
    user_data: UserCreate = Depends(get_payload(UserCreate)),
    user_service: UserUseCase = Depends(get_user_usecase)
):
    """
    Register a new user. The username is trimmed and must not be empty.
    """
    user = await user_service.register_user(user_data.username)
    return UserResponse(username=user.username, id=user.id)


@user_router.get("", response_model=List[UserResponse])
async def list_users(
    user_service: UserUseCase = Depends(get_user_usecase)
):
    """
    List every user. Order is whatever the store returns.
    """
    users = await user_service.list_users()
    return [UserResponse(username=user.username, id=user.id) for user in users]
