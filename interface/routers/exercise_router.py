from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from core.service import format_date
from core.usecase import ExerciseUseCase
from interface.di import get_exercise_usecase, get_payload
from interface.schemas import (
    ErrorResponse,
    ExerciseCreate,
    ExerciseLogResponse,
    ExerciseResponse,
    LogEntryResponse,
)


# Create exercise router
exercise_router = APIRouter(
    prefix="/api/users",
    tags=["exercises"],
    responses={
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse, "description": "User not found"},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse, "description": "Store error"}
    }
)


@exercise_router.post(
    "/{user_id}/exercises",
    response_model=ExerciseResponse,
    responses={status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse, "description": "Validation error"}}
)
async def add_exercise(
    user_id: str,
    exercise_data: ExerciseCreate = Depends(get_payload(ExerciseCreate)),
    exercise_service: ExerciseUseCase = Depends(get_exercise_usecase)
):
    """
    Log an exercise for a user.

    The response carries the user's ID, not the exercise's.
    """
    user, exercise = await exercise_service.add_exercise(
        user_id=user_id,
        description=exercise_data.description,
        duration=exercise_data.duration,
        date=exercise_data.date
    )
    return ExerciseResponse(
        username=user.username,
        description=exercise.description,
        duration=exercise.duration,
        date=format_date(exercise.date),
        id=user.id
    )


@exercise_router.get("/{user_id}/logs", response_model=ExerciseLogResponse)
async def get_exercise_log(
    user_id: str,
    date_from: Optional[str] = Query(default=None, alias="from", description="Earliest date, inclusive"),
    date_to: Optional[str] = Query(default=None, alias="to", description="Latest date, inclusive"),
    limit: Optional[str] = Query(default=None, description="Maximum number of entries"),
    exercise_service: ExerciseUseCase = Depends(get_exercise_usecase)
):
    """
    Get a user's exercise log.

    Malformed filters are not rejected: a bad ``from`` means the epoch, a bad
    ``to`` means today and a bad ``limit`` is ignored.
    """
    exercise_log = await exercise_service.get_exercise_log(
        user_id=user_id,
        date_from=date_from,
        date_to=date_to,
        limit=limit
    )
    return ExerciseLogResponse(
        username=exercise_log.user.username,
        count=exercise_log.count,
        id=exercise_log.user.id,
        log=[
            LogEntryResponse(
                description=entry.description,
                duration=entry.duration,
                date=format_date(entry.date)
            )
            for entry in exercise_log.log
        ]
    )
