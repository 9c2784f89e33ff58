from typing import Any, Dict, Optional, Tuple
from utilities.monitoring import MonitoringFactory

from core.entities import ExerciseEntity, ExerciseLog, LogEntry, UserEntity
from core.exceptions import NotFoundError, ValidationError
from core.interfaces import ExerciseRepositoryInterface, UserRepositoryInterface
from core.service import (
    build_log_query,
    coerce_stored_date,
    coerce_stored_duration,
    normalize_text,
    parse_duration,
    resolve_exercise_date,
)


class ExerciseUseCase:
    """
    Use case class for logging exercises and reading a user's exercise log.
    """

    def __init__(
        self,
        user_repository: UserRepositoryInterface,
        exercise_repository: ExerciseRepositoryInterface,
    ):
        self.user_repository = user_repository
        self.exercise_repository = exercise_repository
        self.logger = MonitoringFactory.get_logger("exercise-usecase")

    async def _require_user(self, user_id: str) -> UserEntity:
        user = await self.user_repository.get_user_by_id(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def add_exercise(
        self,
        user_id: str,
        description: Any,
        duration: Any,
        date: Optional[Any] = None,
    ) -> Tuple[UserEntity, ExerciseEntity]:
        """
        Log an exercise for a user.

        Required fields are checked before the user lookup so that a bad
        request never touches the store. An absent or unparseable date is
        replaced with today's date.

        Args:
            user_id: Identifier of the user the exercise belongs to
            description: Raw description
            duration: Raw duration in minutes
            date: Raw calendar date (optional)

        Returns:
            Tuple containing (user, stored exercise)

        Raises:
            ValidationError: If description or duration is missing or malformed
            NotFoundError: If the user does not exist
        """
        normalized_description = normalize_text(description)
        if normalized_description is None:
            raise ValidationError("Description is required")

        if normalize_text(duration) is None and not isinstance(duration, (int, float)):
            raise ValidationError("Duration is required")

        parsed_duration = parse_duration(duration)
        if parsed_duration is None:
            raise ValidationError("Duration must be a positive number")

        try:
            user = await self._require_user(user_id)

            exercise = ExerciseEntity(
                user_id=user.id,
                description=normalized_description,
                duration=parsed_duration,
                date=resolve_exercise_date(date),
            )
            exercise = await self.exercise_repository.create_exercise(exercise)
            self.logger.info(f"Exercise {exercise.id} logged for user {user.id}")
            return user, exercise
        except NotFoundError:
            self.logger.warning(f"Exercise rejected, unknown user: {user_id}")
            raise
        except Exception as e:
            self.logger.error(f"Error adding exercise for user {user_id}: {str(e)}")
            raise

    async def get_exercise_log(
        self,
        user_id: str,
        date_from: Optional[Any] = None,
        date_to: Optional[Any] = None,
        limit: Optional[Any] = None,
    ) -> ExerciseLog:
        """
        Read a user's exercise log.

        Malformed filters degrade instead of failing: see ``build_log_query``.

        Raises:
            NotFoundError: If the user does not exist
        """
        query = build_log_query(date_from, date_to, limit)

        try:
            user = await self._require_user(user_id)

            if query.limit == 0:
                return ExerciseLog(user=user)

            records = await self.exercise_repository.list_exercises(user.id, query)
            return ExerciseLog(user=user, log=[self._to_entry(record) for record in records])
        except NotFoundError:
            self.logger.warning(f"Log requested for unknown user: {user_id}")
            raise
        except Exception as e:
            self.logger.error(f"Error reading exercise log for user {user_id}: {str(e)}")
            raise

    @staticmethod
    def _to_entry(record: Dict[str, Any]) -> LogEntry:
        # Stored records are trusted only loosely; bad fields degrade to defaults.
        description = record.get("description")
        return LogEntry(
            description="" if description is None else str(description),
            duration=coerce_stored_duration(record.get("duration")),
            date=coerce_stored_date(record.get("date")),
        )
