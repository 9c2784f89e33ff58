import pytest
from datetime import date
from unittest.mock import AsyncMock, patch

from core.entities import LogQuery, UserEntity
from core.exceptions import NotFoundError, QueryError, ValidationError
from core.interfaces import ExerciseRepositoryInterface, UserRepositoryInterface
from core.usecase import ExerciseUseCase

FIXED_TODAY = date(2024, 3, 15)


@pytest.fixture
def alice():
    return UserEntity(id="user-1", username="alice")


@pytest.fixture
def mock_user_repository(alice):
    repository = AsyncMock(spec=UserRepositoryInterface)
    repository.get_user_by_id.side_effect = lambda user_id: alice if user_id == alice.id else None
    return repository


@pytest.fixture
def mock_exercise_repository():
    repository = AsyncMock(spec=ExerciseRepositoryInterface)
    repository.create_exercise.side_effect = lambda exercise: exercise.model_copy(update={"id": "exercise-1"})
    repository.list_exercises.return_value = []
    return repository


@pytest.fixture
def exercise_usecase(mock_user_repository, mock_exercise_repository):
    return ExerciseUseCase(
        user_repository=mock_user_repository,
        exercise_repository=mock_exercise_repository,
    )


@pytest.fixture
def fixed_today():
    with patch("core.service.exercise_service.today", return_value=FIXED_TODAY):
        yield FIXED_TODAY


# Tests for add_exercise
@pytest.mark.asyncio
async def test_add_exercise_success(exercise_usecase, mock_exercise_repository, alice):
    user, exercise = await exercise_usecase.add_exercise(
        user_id="user-1", description=" run ", duration="30", date="2024-01-01"
    )

    assert user == alice
    assert exercise.id == "exercise-1"
    assert exercise.user_id == "user-1"
    assert exercise.description == "run"
    assert exercise.duration == 30
    assert exercise.date == date(2024, 1, 1)
    mock_exercise_repository.create_exercise.assert_awaited_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("raw_date", [None, "", "not a date"])
async def test_add_exercise_defaults_date_to_today(exercise_usecase, fixed_today, raw_date):
    _, exercise = await exercise_usecase.add_exercise(
        user_id="user-1", description="swim", duration="15", date=raw_date
    )

    assert exercise.date == fixed_today


@pytest.mark.asyncio
@pytest.mark.parametrize("description, duration, message", [
    (None, "30", "Description is required"),
    ("   ", "30", "Description is required"),
    ("run", None, "Duration is required"),
    ("run", "  ", "Duration is required"),
    ("run", "abc", "Duration must be a positive number"),
    ("run", "0", "Duration must be a positive number"),
    ("run", "-10", "Duration must be a positive number"),
])
async def test_add_exercise_validation_errors(
    exercise_usecase, mock_user_repository, mock_exercise_repository, description, duration, message
):
    with pytest.raises(ValidationError) as exc_info:
        await exercise_usecase.add_exercise(
            user_id="user-1", description=description, duration=duration
        )

    assert str(exc_info.value) == message
    mock_user_repository.get_user_by_id.assert_not_called()
    mock_exercise_repository.create_exercise.assert_not_called()


@pytest.mark.asyncio
async def test_add_exercise_unknown_user(exercise_usecase, mock_exercise_repository):
    with pytest.raises(NotFoundError):
        await exercise_usecase.add_exercise(
            user_id="missing", description="run", duration="30"
        )

    mock_exercise_repository.create_exercise.assert_not_called()


@pytest.mark.asyncio
async def test_add_exercise_propagates_store_errors(exercise_usecase, mock_exercise_repository):
    mock_exercise_repository.create_exercise.side_effect = QueryError("Failed to push data")

    with pytest.raises(QueryError):
        await exercise_usecase.add_exercise(
            user_id="user-1", description="run", duration="30"
        )


# Tests for get_exercise_log
@pytest.mark.asyncio
async def test_get_exercise_log_passes_filters(exercise_usecase, mock_exercise_repository, alice):
    mock_exercise_repository.list_exercises.return_value = [
        {"id": "e1", "userId": "user-1", "description": "run", "duration": 30, "date": "2024-01-02"},
    ]

    exercise_log = await exercise_usecase.get_exercise_log(
        user_id="user-1", date_from="2024-01-01", date_to="2024-01-31", limit="10"
    )

    mock_exercise_repository.list_exercises.assert_awaited_once_with(
        "user-1",
        LogQuery(date_from=date(2024, 1, 1), date_to=date(2024, 1, 31), limit=10),
    )
    assert exercise_log.user == alice
    assert exercise_log.count == 1
    assert exercise_log.log[0].description == "run"
    assert exercise_log.log[0].duration == 30
    assert exercise_log.log[0].date == date(2024, 1, 2)


@pytest.mark.asyncio
async def test_get_exercise_log_degrades_bad_filters(exercise_usecase, mock_exercise_repository, fixed_today):
    await exercise_usecase.get_exercise_log(
        user_id="user-1", date_from="nope", date_to="nope", limit="-1"
    )

    mock_exercise_repository.list_exercises.assert_awaited_once_with(
        "user-1",
        LogQuery(date_from=date(1970, 1, 1), date_to=fixed_today, limit=None),
    )


@pytest.mark.asyncio
async def test_get_exercise_log_zero_limit_skips_store(exercise_usecase, mock_exercise_repository):
    exercise_log = await exercise_usecase.get_exercise_log(user_id="user-1", limit="0")

    assert exercise_log.count == 0
    assert exercise_log.log == []
    mock_exercise_repository.list_exercises.assert_not_called()


@pytest.mark.asyncio
async def test_get_exercise_log_shapes_malformed_records(
    exercise_usecase, mock_exercise_repository, fixed_today
):
    mock_exercise_repository.list_exercises.return_value = [
        {"id": "e1", "description": "lift", "duration": "heavy", "date": "someday"},
        {"id": "e2", "description": 42, "duration": "20", "date": "2024-01-05"},
    ]

    exercise_log = await exercise_usecase.get_exercise_log(user_id="user-1")

    first, second = exercise_log.log
    assert first.duration == 0
    assert first.date == fixed_today
    assert second.description == "42"
    assert second.duration == 20
    assert second.date == date(2024, 1, 5)


@pytest.mark.asyncio
async def test_get_exercise_log_unknown_user(exercise_usecase, mock_exercise_repository):
    with pytest.raises(NotFoundError):
        await exercise_usecase.get_exercise_log(user_id="missing")

    mock_exercise_repository.list_exercises.assert_not_called()
