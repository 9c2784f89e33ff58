import pytest
from datetime import date
from fastapi import status, FastAPI
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from core.entities import ExerciseEntity, ExerciseLog, LogEntry, UserEntity
from core.exceptions import NotFoundError, QueryError, ValidationError
from core.usecase import ExerciseUseCase
from interface.di import get_exercise_usecase
from interface.middleware import register_exception_handlers
from interface.routers import exercise_router

ALICE = UserEntity(id="user-1", username="alice")


@pytest.fixture
def app():
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(exercise_router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_exercise_service():
    return AsyncMock(spec=ExerciseUseCase)


@pytest.fixture(autouse=True)
def override_dependencies(app, mock_exercise_service):
    app.dependency_overrides[get_exercise_usecase] = lambda: mock_exercise_service
    yield
    app.dependency_overrides = {}


# Tests for add_exercise endpoint
def test_add_exercise_success(client: TestClient, mock_exercise_service: AsyncMock):
    # Arrange
    exercise = ExerciseEntity(
        id="exercise-1", user_id="user-1", description="run", duration=30, date=date(2024, 1, 1)
    )
    mock_exercise_service.add_exercise.return_value = (ALICE, exercise)

    # Act
    response = client.post(
        "/api/users/user-1/exercises",
        json={"description": "run", "duration": "30", "date": "2024-01-01"},
    )

    # Assert
    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "username": "alice",
        "description": "run",
        "duration": 30,
        "date": "Mon Jan 01 2024",
        "_id": "user-1",
    }
    mock_exercise_service.add_exercise.assert_called_once_with(
        user_id="user-1", description="run", duration="30", date="2024-01-01"
    )


def test_add_exercise_form_body(client: TestClient, mock_exercise_service: AsyncMock):
    exercise = ExerciseEntity(
        id="exercise-1", user_id="user-1", description="swim", duration=12.5, date=date(2024, 2, 3)
    )
    mock_exercise_service.add_exercise.return_value = (ALICE, exercise)

    response = client.post(
        "/api/users/user-1/exercises",
        data={"description": "swim", "duration": "12.5"},
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json()["duration"] == 12.5
    assert response.json()["date"] == "Sat Feb 03 2024"
    mock_exercise_service.add_exercise.assert_called_once_with(
        user_id="user-1", description="swim", duration="12.5", date=None
    )


def test_add_exercise_validation_error(client: TestClient, mock_exercise_service: AsyncMock):
    mock_exercise_service.add_exercise.side_effect = ValidationError("Duration must be a positive number")

    response = client.post(
        "/api/users/user-1/exercises", json={"description": "run", "duration": "-1"}
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"error": "Duration must be a positive number"}


def test_add_exercise_unknown_user(client: TestClient, mock_exercise_service: AsyncMock):
    mock_exercise_service.add_exercise.side_effect = NotFoundError("User not found")

    response = client.post(
        "/api/users/missing/exercises", json={"description": "run", "duration": "30"}
    )

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "User not found"}


# Tests for get_exercise_log endpoint
def test_get_exercise_log(client: TestClient, mock_exercise_service: AsyncMock):
    mock_exercise_service.get_exercise_log.return_value = ExerciseLog(
        user=ALICE,
        log=[
            LogEntry(description="run", duration=30, date=date(2024, 1, 1)),
            LogEntry(description="swim", duration=12.5, date=date(2024, 1, 2)),
        ],
    )

    response = client.get(
        "/api/users/user-1/logs", params={"from": "2024-01-01", "to": "2024-01-31", "limit": "2"}
    )

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "username": "alice",
        "count": 2,
        "_id": "user-1",
        "log": [
            {"description": "run", "duration": 30, "date": "Mon Jan 01 2024"},
            {"description": "swim", "duration": 12.5, "date": "Tue Jan 02 2024"},
        ],
    }
    mock_exercise_service.get_exercise_log.assert_called_once_with(
        user_id="user-1", date_from="2024-01-01", date_to="2024-01-31", limit="2"
    )


def test_get_exercise_log_without_filters(client: TestClient, mock_exercise_service: AsyncMock):
    mock_exercise_service.get_exercise_log.return_value = ExerciseLog(user=ALICE)

    response = client.get("/api/users/user-1/logs")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"username": "alice", "count": 0, "_id": "user-1", "log": []}
    mock_exercise_service.get_exercise_log.assert_called_once_with(
        user_id="user-1", date_from=None, date_to=None, limit=None
    )


def test_get_exercise_log_unknown_user(client: TestClient, mock_exercise_service: AsyncMock):
    mock_exercise_service.get_exercise_log.side_effect = NotFoundError("User not found")

    response = client.get("/api/users/missing/logs")

    assert response.status_code == status.HTTP_404_NOT_FOUND
    assert response.json() == {"error": "User not found"}


def test_get_exercise_log_store_failure(client: TestClient, mock_exercise_service: AsyncMock):
    mock_exercise_service.get_exercise_log.side_effect = QueryError("Failed to query data: timeout")

    response = client.get("/api/users/user-1/logs")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"error": "Store error"}
